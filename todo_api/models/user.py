"""
User database model.

Users are created once at registration and never updated; the API key
generated for them is the only credential the service knows about.
"""

import uuid

from sqlalchemy import Column, String

from todo_api.config import settings
from todo_api.models.base import BaseModel


def generate_api_key() -> str:
    """Return a new time-based (v1) UUID in its canonical string form."""
    return str(uuid.uuid1())


class User(BaseModel):
    """
    Registered API user.

    Owns todos through ``Todo.owner_id``.
    """

    __tablename__ = "users"

    username = Column(String(settings.USERNAME_MAX_LENGTH), unique=True, nullable=True)

    # Opaque bearer credential, shown to the client only at registration
    api_key = Column(String(36), unique=True, index=True, nullable=False, default=generate_api_key)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
