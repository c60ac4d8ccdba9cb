"""
Todo schemas.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from todo_api.schemas.base import BaseSchema, IDSchema, TimestampSchema


class TodoCreate(BaseSchema):
    """Creation body. Numbers are kept as their text, like the column would."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    task: Optional[str] = None


class TodoResponse(IDSchema):
    """Todo as returned by the list endpoint."""
    owner_id: Optional[int] = None
    task: Optional[str] = None
    done: bool


class TodoRecord(TodoResponse, TimestampSchema):
    """Full todo row as returned right after creation."""


class MutationResult(BaseSchema):
    """Outcome of an ownership-scoped update or delete."""
    affected: int = Field(..., ge=0, description="Rows matched; 0 means no such todo for this owner")
