"""
In-memory todo store.

Records live in an insertion-ordered dict for the lifetime of the
store object.  Access is guarded by an asyncio reader/writer lock:
``list`` and ``get`` may run together, while ``insert``, ``update`` and
``toggle`` hold exclusive access for their whole read-modify-write.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List

from todo_server.app.core.errors import DuplicateIdentifier, NotFound
from todo_server.app.schemas.todo import Todo
from todo_server.app.services.store import TodoStore

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """Asyncio lock admitting many readers or a single writer.

    Writers are preferred: once a writer is waiting, new readers queue
    behind it so a steady stream of reads cannot starve mutations.
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(lambda: not self._writer and not self._waiting_writers)
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._cond:
            self._waiting_writers += 1
            try:
                await self._cond.wait_for(lambda: not self._writer and not self._readers)
            finally:
                self._waiting_writers -= 1
                # Readers blocked on us must re-check if we were cancelled.
                self._cond.notify_all()
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()


class InMemoryTodoStore(TodoStore):
    """Process-lifetime store backed by a dict keyed by todo id."""

    def __init__(self) -> None:
        self._todos: Dict[int, Todo] = {}
        self._lock = ReadWriteLock()

    async def insert(self, todo: Todo) -> None:
        async with self._lock.write():
            if todo.id in self._todos:
                logger.warning("Rejected duplicate todo %s", todo.id)
                raise DuplicateIdentifier(todo.id)
            self._todos[todo.id] = todo.model_copy()
        logger.info("Created todo %s", todo.id)

    async def list(self) -> List[Todo]:
        async with self._lock.read():
            return [todo.model_copy() for todo in self._todos.values()]

    async def get(self, todo_id: int) -> Todo:
        async with self._lock.read():
            todo = self._todos.get(todo_id)
            if todo is None:
                raise NotFound(todo_id)
            return todo.model_copy()

    async def update(self, todo: Todo) -> None:
        async with self._lock.write():
            if todo.id not in self._todos:
                logger.warning("Cannot update missing todo %s", todo.id)
                raise NotFound(todo.id)
            self._todos[todo.id] = todo.model_copy()
        logger.info("Updated todo %s", todo.id)

    async def toggle(self, todo_id: int) -> None:
        async with self._lock.write():
            current = self._todos.get(todo_id)
            if current is None:
                logger.warning("Cannot toggle missing todo %s", todo_id)
                raise NotFound(todo_id)
            self._todos[todo_id] = current.model_copy(update={"completed": not current.completed})
        logger.info("Toggled todo %s", todo_id)
