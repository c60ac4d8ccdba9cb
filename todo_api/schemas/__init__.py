# Pydantic schemas package

from todo_api.schemas.base import BaseSchema, TimestampSchema, IDSchema, Envelope, ErrorEnvelope
from todo_api.schemas.user import UserCreate, UserResponse, Principal
from todo_api.schemas.todo import TodoCreate, TodoResponse, TodoRecord, MutationResult

__all__ = [
    # Base schemas
    "BaseSchema", "TimestampSchema", "IDSchema", "Envelope", "ErrorEnvelope",

    # User schemas
    "UserCreate", "UserResponse", "Principal",

    # Todo schemas
    "TodoCreate", "TodoResponse", "TodoRecord", "MutationResult",
]
