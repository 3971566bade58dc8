"""Typed Settings

Typed, mutation-tracking proxy over a string-keyed key/value settings store.
"""

__version__ = "0.1.0"

# Codecs
from typed_settings.codecs import identity, json_decode, json_encode, stringify_non_string
from typed_settings.config import Codec, CodecResolver, load_settings_file

# Ports and markers
from typed_settings.core import ASIS, AsIs, SettingsStorage

# Proxy
from typed_settings.settings import TrackedSettingsView, TypedSettings

# Host stores
from typed_settings.storage import EnvironmentStorage, FileStorage, MemoryStorage

from typed_settings.utils import setup_logging

__all__ = [
    "ASIS",
    "AsIs",
    "Codec",
    "CodecResolver",
    "EnvironmentStorage",
    "FileStorage",
    "MemoryStorage",
    "SettingsStorage",
    "TrackedSettingsView",
    "TypedSettings",
    "identity",
    "json_decode",
    "json_encode",
    "load_settings_file",
    "setup_logging",
    "stringify_non_string",
]
