"""
Exceptions raised by the todo stores.

Endpoints translate ``NotFound`` and ``DuplicateIdentifier`` into
client errors.  ``StorageUnavailable`` is only raised while a store is
being initialised and is meant to stop the service from starting.
"""


class StoreError(Exception):
    """Base class for all store failures."""


class NotFound(StoreError):
    """The requested identifier is not present in the store."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id


class DuplicateIdentifier(StoreError):
    """An insert collided with an identifier that already exists."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo {todo_id} already exists")
        self.todo_id = todo_id


class StorageUnavailable(StoreError):
    """The durable backend could not be opened or its schema created."""
