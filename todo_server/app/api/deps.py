"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from todo_server.app.services.store import TodoStore


def get_store(request: Request) -> TodoStore:
    """Return the store attached to the running application."""
    return request.app.state.store
