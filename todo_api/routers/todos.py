"""
Todo router.

All routes require an API key. Every operation is a single statement
filtered on the caller's id, so a todo owned by someone else behaves
exactly like one that does not exist.
"""

from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.crud.todo import todo as todo_crud
from todo_api.database import get_db
from todo_api.dependencies.auth import get_current_user
from todo_api.dependencies.body import body_openapi, parse_body
from todo_api.schemas.base import Envelope, ErrorEnvelope
from todo_api.schemas.todo import MutationResult, TodoCreate, TodoRecord, TodoResponse
from todo_api.schemas.user import Principal
from todo_api.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(
    tags=["todos"],
    responses={
        403: {"model": ErrorEnvelope, "description": "Missing or invalid api token"},
        500: {"model": ErrorEnvelope, "description": "Storage failure"},
    },
)


@router.post(
    "/create",
    response_model=Envelope[TodoRecord],
    openapi_extra=body_openapi(TodoCreate),
)
async def create_todo(
    todo_in: TodoCreate = Depends(parse_body(TodoCreate)),
    current_user: Principal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a todo owned by the caller. It starts out not done."""
    todo_obj = await todo_crud.create_for_owner(db, obj_in=todo_in, owner_id=current_user.id)
    logger.info(f"User {current_user.id} created todo {todo_obj.id}")
    return Envelope(data=TodoRecord.model_validate(todo_obj))


@router.get("/list", response_model=Envelope[List[TodoResponse]])
async def list_todos(
    current_user: Principal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the caller's todos, in storage order."""
    todos = await todo_crud.get_multi_by_owner(db, owner_id=current_user.id)
    return Envelope(data=[TodoResponse.model_validate(t) for t in todos])


async def _set_done(db: AsyncSession, current_user: Principal, todo_id: int, done: bool) -> Envelope[MutationResult]:
    affected = await todo_crud.set_done(db, id=todo_id, owner_id=current_user.id, done=done)
    if affected:
        logger.info(f"User {current_user.id} set todo {todo_id} done={done}")
    else:
        logger.info(f"User {current_user.id} has no todo {todo_id}; done={done} not applied")
    return Envelope(data=MutationResult(affected=affected))


@router.post("/done/{todo_id}", response_model=Envelope[MutationResult])
async def mark_done(
    todo_id: int = Path(..., description="ID of the todo to mark as done"),
    current_user: Principal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Mark one of the caller's todos as done.

    ``data.affected`` is 0 when the id is unknown or belongs to another user.
    """
    return await _set_done(db, current_user, todo_id, True)


@router.post("/undone/{todo_id}", response_model=Envelope[MutationResult])
async def mark_undone(
    todo_id: int = Path(..., description="ID of the todo to mark as not done"),
    current_user: Principal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Mark one of the caller's todos as not done.

    ``data.affected`` is 0 when the id is unknown or belongs to another user.
    """
    return await _set_done(db, current_user, todo_id, False)


@router.post("/delete/{todo_id}", response_model=Envelope[MutationResult])
async def delete_todo(
    todo_id: int = Path(..., description="ID of the todo to delete"),
    current_user: Principal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete one of the caller's todos.

    Deleting twice is not an error; the second call reports ``affected: 0``.
    """
    affected = await todo_crud.remove_for_owner(db, id=todo_id, owner_id=current_user.id)
    logger.info(f"User {current_user.id} deleted todo {todo_id} (affected={affected})")
    return Envelope(data=MutationResult(affected=affected))
