"""
User schemas.

This module contains Pydantic schemas for registration and the
authenticated principal.
"""

from typing import Optional

from pydantic import ConfigDict

from todo_api.schemas.base import BaseSchema, IDSchema, TimestampSchema


class UserCreate(BaseSchema):
    """Registration body. No validation: the value goes to storage as is."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    username: Optional[str] = None


class UserResponse(IDSchema, TimestampSchema):
    """Created user, including the API key (only ever returned here)."""
    username: Optional[str] = None
    api_key: str


class Principal(IDSchema):
    """Authenticated user attached to a request."""
    username: Optional[str] = None
    api_key: str
