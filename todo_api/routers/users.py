"""
Registration router.

This module contains the only unauthenticated write: creating a user and
handing back their API key.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.crud.user import user as user_crud
from todo_api.database import get_db
from todo_api.dependencies.body import body_openapi, parse_body
from todo_api.schemas.base import Envelope, ErrorEnvelope
from todo_api.schemas.user import UserCreate, UserResponse
from todo_api.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(
    tags=["users"],
    responses={500: {"model": ErrorEnvelope, "description": "Storage failure (e.g. username taken)"}},
)


@router.post(
    "/register",
    response_model=Envelope[UserResponse],
    openapi_extra=body_openapi(UserCreate),
)
async def register_user(
    user_in: UserCreate = Depends(parse_body(UserCreate)),
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new user and generate their API key.

    The username is not validated; a duplicate is rejected by the unique
    index and answered with 500. This is the only response that ever
    contains the API key.
    """
    new_user = await user_crud.create(db, obj_in=user_in)
    logger.info(f"Registered user id={new_user.id} username={new_user.username!r}")
    return Envelope(data=UserResponse.model_validate(new_user))
