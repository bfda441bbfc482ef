"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server starts with an in-memory store and no extra setup.  Tests and
embedding code may build their own ``Settings`` instance instead of
relying on the module-level one.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Todo Server")
    api_version: str = os.getenv("API_VERSION", "0.1.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Which store backend to serve from: ``memory`` keeps records for the
    # process lifetime only, ``sqlite`` persists them in ``database_url``.
    store_backend: str = os.getenv("TODO_STORE", "memory")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.  ``:memory:`` is
    # accepted and gives a private, non-persistent database.
    database_url: str = os.getenv("DATABASE_URL", "todo_server.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
