"""
SQLite-backed todo store.

All access goes through a single sqlite3 connection owned by a
one-thread executor.  Every store call is submitted to that worker, so
calls run one at a time in submission order and never race inside the
storage engine, while the event loop stays free during disk I/O.

All queries use parameterized statements.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional, TypeVar

from todo_server.app.core.db import get_connection, init_db
from todo_server.app.core.errors import DuplicateIdentifier, NotFound, StorageUnavailable
from todo_server.app.schemas.todo import MAX_TODO_ID, Todo
from todo_server.app.services.store import TodoStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _check_id(todo_id: int) -> None:
    # sqlite3 cannot bind integers beyond 64 bits; such ids are never stored.
    if not 0 <= todo_id <= MAX_TODO_ID:
        raise NotFound(todo_id)


class SQLiteTodoStore(TodoStore):
    """Durable store persisting todos in a single ``todos`` table."""

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url
        # Both are created by init() and released by close().
        self._executor: Optional[ThreadPoolExecutor] = None
        self._conn: Optional[sqlite3.Connection] = None

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        if self._executor is None:
            raise RuntimeError("SQLiteTodoStore used before init()")
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, func, *args)

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("SQLiteTodoStore used before init()")
        return self._conn

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    async def init(self) -> None:
        """Open the database and create the schema.

        Raises ``StorageUnavailable`` if either step fails, after
        releasing the connection and the worker thread.  A store may be
        initialised again after ``close()``.
        """
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="todo-sqlite")
        try:
            await self._run(self._init_sync)
        except StorageUnavailable:
            await self.close()
            raise
        logger.info("SQLite todo store ready at %s", self.database_url)

    def _init_sync(self) -> None:
        if self._conn is not None:
            init_db(self._conn)
            return
        conn = get_connection(self.database_url)
        try:
            init_db(conn)
        except StorageUnavailable:
            conn.close()
            raise
        self._conn = conn

    async def close(self) -> None:
        executor = self._executor
        if executor is None:
            return
        if self._conn is not None:
            await self._run(self._close_sync)
        self._executor = None
        # The close job has been awaited, so nothing is left to wait for.
        executor.shutdown(wait=False)

    def _close_sync(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    async def insert(self, todo: Todo) -> None:
        await self._run(self._insert_sync, todo)
        logger.info("Created todo %s", todo.id)

    def _insert_sync(self, todo: Todo) -> None:
        conn = self._connection()
        try:
            with conn:
                conn.execute(
                    "INSERT INTO todos (id, name, completed) VALUES (?, ?, ?)",
                    (todo.id, todo.name, todo.completed),
                )
        except sqlite3.IntegrityError:
            logger.warning("Rejected duplicate todo %s", todo.id)
            raise DuplicateIdentifier(todo.id) from None

    async def list(self) -> List[Todo]:
        return await self._run(self._list_sync)

    def _list_sync(self) -> List[Todo]:
        rows = self._connection().execute("SELECT id, name, completed FROM todos").fetchall()
        return [self._row_to_todo(row) for row in rows]

    async def get(self, todo_id: int) -> Todo:
        _check_id(todo_id)
        return await self._run(self._get_sync, todo_id)

    def _get_sync(self, todo_id: int) -> Todo:
        row = self._connection().execute(
            "SELECT id, name, completed FROM todos WHERE id = ?",
            (todo_id,),
        ).fetchone()
        if row is None:
            raise NotFound(todo_id)
        return self._row_to_todo(row)

    async def update(self, todo: Todo) -> None:
        await self._run(self._update_sync, todo)
        logger.info("Updated todo %s", todo.id)

    def _update_sync(self, todo: Todo) -> None:
        conn = self._connection()
        with conn:
            cursor = conn.execute(
                "UPDATE todos SET name = ?, completed = ? WHERE id = ?",
                (todo.name, todo.completed, todo.id),
            )
        # Zero affected rows means the todo did not exist
        if cursor.rowcount == 0:
            logger.warning("Cannot update missing todo %s", todo.id)
            raise NotFound(todo.id)

    async def toggle(self, todo_id: int) -> None:
        _check_id(todo_id)
        await self._run(self._toggle_sync, todo_id)
        logger.info("Toggled todo %s", todo_id)

    def _toggle_sync(self, todo_id: int) -> None:
        conn = self._connection()
        with conn:
            cursor = conn.execute(
                "UPDATE todos SET completed = NOT completed WHERE id = ?",
                (todo_id,),
            )
        if cursor.rowcount == 0:
            logger.warning("Cannot toggle missing todo %s", todo_id)
            raise NotFound(todo_id)

    @staticmethod
    def _row_to_todo(row: sqlite3.Row) -> Todo:
        """Convert a database row to a ``Todo``."""
        return Todo(id=row["id"], name=row["name"], completed=bool(row["completed"]))
