"""Database connection helpers and initialization."""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Optional

from storefront.core.config import settings

logger = logging.getLogger(__name__)

# Extract the file path from the DATABASE_URL (strip "sqlite:///")
DB_PATH = settings.DATABASE_URL.replace("sqlite:///", "")


def _ensure_directory(db_path: str) -> None:
    if db_path == ":memory:":
        return
    db_dir = os.path.dirname(db_path) or "."
    os.makedirs(db_dir, exist_ok=True)
    logger.trace("Database directory ensured at %s", db_dir)


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection with row factory and FK enforcement."""
    db_path = db_path or DB_PATH
    _ensure_directory(db_path)
    logger.trace("Opening database connection to %s", db_path)
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_db():
    """Context manager that yields a database connection and auto-commits/rolls back."""
    conn = get_connection()
    try:
        yield conn
        conn.commit()
        logger.trace("Database transaction committed")
    except Exception:
        logger.error("Database transaction rolled back", exc_info=True)
        conn.rollback()
        raise
    finally:
        conn.close()
        logger.trace("Database connection closed")


def init_db() -> None:
    """Initialize the database by creating all tables."""
    logger.info("Initializing database schema at %s", DB_PATH)
    from storefront.db import schema

    conn = get_connection()
    try:
        schema.create_tables(conn)
    finally:
        conn.close()
