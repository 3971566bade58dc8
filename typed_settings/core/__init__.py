"""Ports and shared markers of the settings proxy."""

from typed_settings.core.interfaces import SettingsStorage
from typed_settings.core.markers import ASIS, AsIs

__all__ = ["ASIS", "AsIs", "SettingsStorage"]
