"""
Base CRUD operations.

This module contains the base class that specific model CRUD classes
inherit from.
"""

from typing import Generic, Type, TypeVar

from pydantic import BaseModel

from todo_api.database import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType]):
    """
    Base CRUD operations class.

    Binds a CRUD class to the model it operates on.
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize CRUD operations for a specific model.

        Args:
            model: The SQLAlchemy model class
        """
        self.model = model
