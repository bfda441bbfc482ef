"""
Pydantic schema for todo records.

A todo is identified by a caller-supplied unsigned 32-bit integer.
The same model is used for request bodies, responses and as the
value type held by the stores.
"""

from pydantic import BaseModel, Field

MAX_TODO_ID = 2**32 - 1


class Todo(BaseModel):
    """A single todo record."""

    id: int = Field(..., ge=0, le=MAX_TODO_ID, description="Caller-supplied unique identifier")
    name: str = Field(..., description="Free-form title of the todo")
    completed: bool = Field(False, description="Whether the todo has been done")
