"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from typed_settings import MemoryStorage


@pytest.fixture
def example_settings() -> dict:
    """Return typed example settings covering strings, numbers, lists and objects."""

    return {
        "arrayVal": ["a", "b", "c"],
        "numberVal": 42,
        "objVal": {"stringProp": "I am a string property inside an object"},
        "stringVal": "I am a string value",
        "stringConfusingVal": "42",
    }


@pytest.fixture
def storage_factory():
    """Return a factory building a MemoryStorage wrapped in a call-recording spy."""

    def _factory(data: dict[str, str] | None = None) -> MagicMock:
        return MagicMock(wraps=MemoryStorage(data))

    return _factory


@pytest.fixture
def storage(storage_factory) -> MagicMock:
    """Return the host store of the basic scenario: a = "hello", b = [1, 2, 3]."""

    return storage_factory({"a": '"hello"', "b": "[1,2,3]"})
