# Database models package

from todo_api.models.base import BaseModel
from todo_api.models.user import User
from todo_api.models.todo import Todo

__all__ = [
    "BaseModel",
    "User",
    "Todo",
]
