"""Utility modules for the typed settings tools."""

from typed_settings.utils.logging_utils import setup_logging

__all__ = ["setup_logging"]
