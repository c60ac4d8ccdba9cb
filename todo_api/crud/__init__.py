# CRUD operations package

from todo_api.crud.base import CRUDBase
from todo_api.crud.user import CRUDUser, user
from todo_api.crud.todo import CRUDTodo, todo

__all__ = [
    "CRUDBase",
    "CRUDUser", "user",
    "CRUDTodo", "todo",
]
