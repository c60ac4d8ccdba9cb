"""
Todo database model.
"""

from sqlalchemy import Boolean, Column, Integer, Text
from sqlalchemy.sql import expression

from todo_api.models.base import BaseModel


class Todo(BaseModel):
    """
    A single task belonging to a user.

    Ownership is by convention: ``owner_id`` holds ``users.id`` but no
    foreign key constraint is declared, and every query filters on it.
    """

    __tablename__ = "todos"

    owner_id = Column(Integer, index=True, nullable=True)
    task = Column(Text, nullable=True)
    done = Column(Boolean, nullable=False, default=False, server_default=expression.false())

    def __repr__(self):
        return f"<Todo(id={self.id}, owner_id={self.owner_id}, done={self.done})>"
