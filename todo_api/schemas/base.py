"""
Base Pydantic schemas.

This module contains base schemas with common fields and configurations,
plus the ``{code, data}`` envelope every response is wrapped in.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All other schemas should inherit from this class.
    """

    model_config = ConfigDict(from_attributes=True)


class TimestampSchema(BaseSchema):
    """
    Schema with timestamp fields.
    """

    created_at: datetime
    updated_at: datetime


class IDSchema(BaseSchema):
    """
    Schema with ID field.
    """

    id: int


class Envelope(BaseModel, Generic[DataT]):
    """Successful response body: ``{"code": 200, "data": ...}``."""

    code: int = 200
    data: DataT


class ErrorEnvelope(BaseModel):
    """Failure response body; ``data`` is a message or a validation error list."""

    code: int
    data: Any
