"""
Abstract todo store.

Handlers depend only on ``TodoStore``; the concrete backend is chosen
once at startup by ``create_store``.  Every operation is a coroutine so
backends are free to suspend on locks or on a worker thread.

Stores own the canonical copy of each record.  Values passed in and
handed out are copies, so mutating them never changes stored state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from todo_server.app.schemas.todo import Todo


class TodoStore(ABC):
    """Contract shared by the in-memory and SQLite stores."""

    async def init(self) -> None:
        """Prepare the backend.  Idempotent; no-op by default."""

    async def close(self) -> None:
        """Release backend resources.  Safe to call more than once."""

    @abstractmethod
    async def insert(self, todo: Todo) -> None:
        """Add a new todo.

        Raises ``DuplicateIdentifier`` if ``todo.id`` is already stored.
        """

    @abstractmethod
    async def list(self) -> List[Todo]:
        """Return every stored todo, in insertion/storage order."""

    @abstractmethod
    async def get(self, todo_id: int) -> Todo:
        """Return the todo with ``todo_id`` or raise ``NotFound``."""

    @abstractmethod
    async def update(self, todo: Todo) -> None:
        """Replace name and completed of the stored todo sharing ``todo.id``.

        Raises ``NotFound`` if there is no such todo.
        """

    @abstractmethod
    async def toggle(self, todo_id: int) -> None:
        """Flip ``completed`` atomically, or raise ``NotFound``."""
