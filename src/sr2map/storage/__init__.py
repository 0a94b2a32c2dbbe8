"""
Storage package for SR2 Interactive Map.

Provides the JSON key-value store abstraction and its QSettings and
in-memory backends.
"""

from .store import KeyValueStore, MemoryStore, QSettingsStore

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "QSettingsStore",
]
