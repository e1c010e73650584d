"""SQLite implementations of repository interfaces."""

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .base import KeyValueStore, SettingsRepository
from .connection import get_connection, DEFAULT_DB_PATH
from models import Settings

logger = logging.getLogger(__name__)

SETTINGS_KEY = "bibleVerseSettings"


class SQLiteKeyValueStore(KeyValueStore):
    """SQLite implementation of KeyValueStore."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        self.db_path = db_path

    def get(self, key: str, default: Any = None) -> Any:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = cursor.fetchone()
        finally:
            conn.close()

        if row is None:
            return default
        try:
            return json.loads(row["value"])
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable value stored under %r", key)
            return default

    def set(self, key: str, value: Any) -> None:
        conn = get_connection(self.db_path)
        try:
            # Use INSERT OR REPLACE for upsert behavior
            conn.execute(
                """INSERT OR REPLACE INTO kv_store (key, value, updated_at)
                VALUES (?, ?, ?)""",
                (key, json.dumps(value), datetime.now().isoformat()),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()


class SQLiteSettingsRepository(SettingsRepository):
    """Settings stored as one JSON blob in the key/value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load(self) -> Settings:
        """Load settings merged over defaults.

        An empty CSV URL falls back to the DEFAULT_CSV_URL environment
        variable.
        """
        stored = self.store.get(SETTINGS_KEY) or {}
        try:
            settings = Settings.model_validate(stored)
        except ValidationError:
            logger.warning("Stored settings are invalid, using defaults")
            settings = Settings()

        if not settings.csv_url:
            default_url = os.environ.get("DEFAULT_CSV_URL", "")
            if default_url:
                settings = settings.model_copy(update={"csv_url": default_url})

        return settings

    def save(self, settings: Settings) -> None:
        self.store.set(SETTINGS_KEY, settings.to_store())
