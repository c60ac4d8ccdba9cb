# API routers package

from todo_api.routers.status import router as status_router
from todo_api.routers.todos import router as todos_router
from todo_api.routers.users import router as users_router

__all__ = ["status_router", "todos_router", "users_router"]
