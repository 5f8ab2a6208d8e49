"""Storage package for persisted client state."""

from .kv import KeyValueStore, MemoryKeyValueStore, SqliteKeyValueStore
from .preferences import LanguagePreference

__all__ = ["KeyValueStore", "MemoryKeyValueStore", "SqliteKeyValueStore", "LanguagePreference"]
