"""
Database configuration and schema management for the snake game.

This module provides SQLite connection management with environment-aware
path selection and schema initialization.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def get_database_path(db_path: Optional[str] = None) -> str:
    """
    Determine the SQLite database path.

    Returns:
        - the explicit `db_path` when given
        - SNAKE_DB_PATH from the environment when set
        - backend/snake.db otherwise
    """
    if db_path:
        return db_path

    env_path = os.getenv('SNAKE_DB_PATH', '').strip()
    if env_path:
        return env_path

    backend_dir = Path(__file__).parent
    return str(backend_dir / 'snake.db')


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    path = get_database_path(db_path)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database(db_path: Optional[str] = None) -> None:
    """
    Initialize the database schema.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    logger.debug("Initializing database at: %s", get_database_path(db_path))

    conn = get_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS key_value (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()

    except Exception as e:
        conn.rollback()
        logger.error("Error initializing database: %s", e)
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    init_database()
    logger.info("Database ready at: %s", get_database_path())
