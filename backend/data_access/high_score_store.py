"""
Key/value stores for the persisted high score.

The game only needs two calls: read a string value by key (None when
absent) and write one back. Values are string-encoded integers.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import get_connection, init_database


class HighScoreStore:
    """
    Base class/interface for high-score persistence.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class InMemoryHighScoreStore(HighScoreStore):
    """Dict-backed store for tests and throwaway runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = str(value)


class SqliteHighScoreStore(HighScoreStore):
    """
    Store backed by the `key_value` table in the SQLite database.

    Every call opens its own connection, so the store can outlive the
    game instances that use it.
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path
        init_database(db_path)

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Context manager for database connections.

        Commits on success (if auto_commit=True), rolls back on exception
        and closes the connection in all cases.

        Yields:
            A tuple of (connection, cursor) for database operations.
        """
        conn = get_connection(self.db_path)
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    def get(self, key: str) -> Optional[str]:
        with self.connection(auto_commit=False) as (conn, cursor):
            cursor.execute("SELECT value FROM key_value WHERE key = ?", (key,))
            row = cursor.fetchone()
        return row['value'] if row else None

    def set(self, key: str, value: str) -> None:
        with self.connection() as (conn, cursor):
            cursor.execute(
                """
                INSERT INTO key_value (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, str(value)),
            )
