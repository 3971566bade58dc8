"""Host store adapters."""

from typed_settings.storage.env import EnvironmentStorage
from typed_settings.storage.file import FileStorage
from typed_settings.storage.memory import MemoryStorage

__all__ = ["EnvironmentStorage", "FileStorage", "MemoryStorage"]
