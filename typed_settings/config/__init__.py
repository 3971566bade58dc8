"""Codec configuration: option schema, resolution and settings file loading."""

from typed_settings.config.loader import load_settings_file
from typed_settings.config.resolver import CodecResolver
from typed_settings.config.schema import Codec, Decoder, Encoder

__all__ = [
    "Codec",
    "CodecResolver",
    "Decoder",
    "Encoder",
    "load_settings_file",
]
