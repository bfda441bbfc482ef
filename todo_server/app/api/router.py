"""
Top-level router.

The routes are mounted at the root without a version prefix because
clients of the todo service address ``/todos`` and ``/toggle/{id}``
directly.
"""

from fastapi import APIRouter

from .endpoints import index, todos

router = APIRouter()

router.include_router(index.router, tags=["index"])
router.include_router(todos.router, tags=["todos"])
