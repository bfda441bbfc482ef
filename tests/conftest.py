import asyncio

import pytest
from fastapi.testclient import TestClient

from todo_server.app.main import create_app
from todo_server.app.services.memory_store import InMemoryTodoStore
from todo_server.app.services.sqlite_store import SQLiteTodoStore


def make_store(backend, tmp_path):
    if backend == "memory":
        return InMemoryTodoStore()
    return SQLiteTodoStore(str(tmp_path / "todos.db"))


@pytest.fixture(params=["memory", "sqlite"])
def backend(request):
    return request.param


@pytest.fixture
def store(backend, tmp_path):
    """An initialised store of each backend, closed after the test."""
    store = make_store(backend, tmp_path)
    asyncio.run(store.init())
    yield store
    asyncio.run(store.close())


@pytest.fixture
def client(backend, tmp_path):
    """A TestClient running the full app against each backend."""
    app = create_app(store=make_store(backend, tmp_path))
    with TestClient(app) as client:
        yield client
