"""Storage layer for the verse trainer.

Provides a key/value store interface with a SQLite implementation, used to
persist settings and cached API responses.
"""

from pathlib import Path

from .base import KeyValueStore, SettingsRepository
from .sqlite import SETTINGS_KEY, SQLiteKeyValueStore, SQLiteSettingsRepository
from .connection import get_connection, init_schema, DEFAULT_DB_PATH

__all__ = [
    # Abstract interfaces
    "KeyValueStore",
    "SettingsRepository",
    # SQLite implementations
    "SQLiteKeyValueStore",
    "SQLiteSettingsRepository",
    "SETTINGS_KEY",
    # Connection utilities
    "get_connection",
    "init_schema",
    "DEFAULT_DB_PATH",
    # Factory functions
    "get_kv_store",
    "get_settings_repo",
]


def get_kv_store(db_path: Path = DEFAULT_DB_PATH) -> KeyValueStore:
    """Get a KeyValueStore instance, creating the schema if needed."""
    init_schema(db_path)
    return SQLiteKeyValueStore(db_path)


def get_settings_repo(db_path: Path = DEFAULT_DB_PATH) -> SettingsRepository:
    """Get a SettingsRepository instance."""
    return SQLiteSettingsRepository(get_kv_store(db_path))
