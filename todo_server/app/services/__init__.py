"""
Service layer abstraction.

The store is the only shared mutable resource of the service.  Its
backend is picked from settings by ``create_store`` so API handlers
never need to know whether records live in memory or in SQLite.
"""

from todo_server.app.core.config import Settings
from todo_server.app.services.memory_store import InMemoryTodoStore
from todo_server.app.services.sqlite_store import SQLiteTodoStore
from todo_server.app.services.store import TodoStore

__all__ = ["TodoStore", "InMemoryTodoStore", "SQLiteTodoStore", "create_store"]


def create_store(settings: Settings) -> TodoStore:
    """Build the store backend named by ``settings.store_backend``."""
    backend = settings.store_backend.lower()
    if backend == "memory":
        return InMemoryTodoStore()
    if backend == "sqlite":
        return SQLiteTodoStore(settings.database_url)
    raise ValueError(f"Unknown store backend: {settings.store_backend!r}")
