"""
User CRUD operations.

This module contains CRUD operations specific to user management.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from todo_api.crud.base import CRUDBase
from todo_api.models.user import User, generate_api_key
from todo_api.schemas.user import UserCreate


class CRUDUser(CRUDBase[User, UserCreate]):
    """
    CRUD operations for User model.
    """

    async def create(self, db: AsyncSession, *, obj_in: UserCreate) -> User:
        """
        Create a new user with a server-generated API key.

        The username is stored untouched; uniqueness is left to the
        database, so a duplicate surfaces as an ``IntegrityError``.

        Args:
            db: Database session
            obj_in: User creation data

        Returns:
            Created user instance
        """
        db_obj = User(
            username=obj_in.username,
            api_key=generate_api_key(),
        )
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def get_by_api_key(self, db: AsyncSession, *, api_key: str) -> Optional[User]:
        """
        Get user by API key.

        Args:
            db: Database session
            api_key: User's API key

        Returns:
            User instance or None if not found

        Raises:
            MultipleResultsFound: If more than one user holds the key
        """
        result = await db.execute(select(User).where(User.api_key == api_key))
        return result.scalars().one_or_none()


# Create instance of CRUDUser
user = CRUDUser(User)
