"""
Key-value storage for the VolleyStats system.
"""

import sqlite3
import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class DatabaseManager:
    """SQLite-backed string key-value store with get/set/remove semantics."""

    def __init__(self, db_path: str = "volleystats.db"):
        self.db_path = db_path
        self.init_database()

    def init_database(self) -> None:
        """Initialize the database with the storage table."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS local_storage (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            conn.commit()
            logger.info(f"Storage initialized at {self.db_path}")

    def get_item(self, key: str) -> Optional[str]:
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM local_storage WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        """Insert or overwrite the value stored under ``key``."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO local_storage (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value, updated_at = CURRENT_TIMESTAMP
            """, (key, value))
            conn.commit()
            logger.debug(f"Stored {len(value)} characters under '{key}'")

    def remove_item(self, key: str) -> None:
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM local_storage WHERE key = ?", (key,))
            conn.commit()
            if cursor.rowcount:
                logger.info(f"Removed stored key '{key}'")

    def get_database_stats(self) -> Dict[str, int]:
        """Get basic storage statistics."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()

            cursor.execute("SELECT COUNT(*), COALESCE(SUM(LENGTH(value)), 0) FROM local_storage")
            keys, total_size = cursor.fetchone()

            return {
                'keys': keys,
                'total_size': total_size
            }


class InMemoryStorage:
    """Dict-backed store with the same interface as DatabaseManager."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items) if items else {}

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)

    def get_database_stats(self) -> Dict[str, int]:
        return {
            'keys': len(self.items),
            'total_size': sum(len(value) for value in self.items.values())
        }
