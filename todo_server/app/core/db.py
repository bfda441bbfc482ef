"""
SQLite database integration.

This module provides helpers for resolving the database path, opening
a connection and creating the ``todos`` table.  It uses SQLite as a
lightweight embedded database; to switch to another DBMS you would
replace the connection logic and adapt the SQL accordingly.
"""

import logging
import os
import sqlite3
from pathlib import Path

from .errors import StorageUnavailable

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

CREATE_TODOS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS todos (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    completed BOOLEAN NOT NULL DEFAULT 0
);
"""


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are returned unchanged.  Relative
    paths are resolved against the project root.
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


def get_connection(database_url: str) -> sqlite3.Connection:
    """Open a connection suitable for use from a single worker thread.

    The connection is created with ``check_same_thread=False`` because it
    is opened by the caller and then handed to the store's worker thread,
    which is the only thread that touches it afterwards.
    """
    db_path = get_database_path(database_url)
    try:
        conn = sqlite3.connect(db_path, check_same_thread=False)
    except sqlite3.Error as exc:
        logger.error("Cannot open database %s: %s", db_path, exc)
        raise StorageUnavailable(f"Cannot open database {db_path}: {exc}") from exc
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create the ``todos`` table if it does not exist yet.

    Idempotent.  Any SQLite error here (unwritable file, a file that is
    not a database, ...) is reported as ``StorageUnavailable``.
    """
    try:
        conn.executescript(CREATE_TODOS_TABLE_SQL)
        conn.commit()
    except sqlite3.Error as exc:
        logger.error("Creating todos table failed: %s", exc)
        raise StorageUnavailable(f"Creating todos table failed: {exc}") from exc
