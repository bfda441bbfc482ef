"""
Todo endpoints.

These routes expose the store over HTTP.  Request bodies are validated
into ``Todo`` models before they reach the store.  Store failures
(``NotFound``, ``DuplicateIdentifier``) are reported as HTTP 400 with a
``detail`` message; existing clients rely on that status code, so it is
kept instead of the more usual 404/409.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from todo_server.app.api.deps import get_store
from todo_server.app.core.errors import DuplicateIdentifier, NotFound
from todo_server.app.schemas.todo import MAX_TODO_ID, Todo
from todo_server.app.services.store import TodoStore

router = APIRouter()


def _bad_request(exc: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def _check_path_id(todo_id: int) -> None:
    # Ids outside the u32 range can never be stored.
    if not 0 <= todo_id <= MAX_TODO_ID:
        raise _bad_request(NotFound(todo_id))


@router.get("/todos", response_model=List[Todo])
async def list_todos(store: TodoStore = Depends(get_store)) -> List[Todo]:
    """Return every todo; an empty list when there are none."""
    return await store.list()


@router.post("/todos", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_todo(todo: Todo, store: TodoStore = Depends(get_store)) -> Response:
    """Store a new todo.  A duplicate ``id`` is rejected with 400."""
    try:
        await store.insert(todo)
    except DuplicateIdentifier as exc:
        raise _bad_request(exc)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/todos", response_class=Response)
async def update_todo(todo: Todo, store: TodoStore = Depends(get_store)) -> Response:
    """Replace name and completion state of an existing todo."""
    try:
        await store.update(todo)
    except NotFound as exc:
        raise _bad_request(exc)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/todos/{todo_id}", response_model=Todo)
async def get_todo(todo_id: int, store: TodoStore = Depends(get_store)) -> Todo:
    """Return a single todo, or 400 if it does not exist."""
    _check_path_id(todo_id)
    try:
        return await store.get(todo_id)
    except NotFound as exc:
        raise _bad_request(exc)


@router.post("/toggle/{todo_id}", response_class=Response)
async def toggle_todo(todo_id: int, store: TodoStore = Depends(get_store)) -> Response:
    """Flip the completion state of a todo."""
    _check_path_id(todo_id)
    try:
        await store.toggle(todo_id)
    except NotFound as exc:
        raise _bad_request(exc)
    return Response(status_code=status.HTTP_200_OK)
