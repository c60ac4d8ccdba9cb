"""
Todo CRUD operations.

Every read and write here is scoped by ``owner_id``; a todo owned by
someone else is simply never matched.
"""

from typing import List

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from todo_api.crud.base import CRUDBase
from todo_api.models.todo import Todo
from todo_api.schemas.todo import TodoCreate


class CRUDTodo(CRUDBase[Todo, TodoCreate]):
    """
    CRUD operations for Todo model.
    """

    async def create_for_owner(
        self,
        db: AsyncSession,
        *,
        obj_in: TodoCreate,
        owner_id: int
    ) -> Todo:
        """
        Create a todo owned by ``owner_id``; ``done`` starts out false.

        Args:
            db: Database session
            obj_in: Todo creation data
            owner_id: ID of the owning user

        Returns:
            Created todo instance
        """
        db_obj = Todo(owner_id=owner_id, task=obj_in.task)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def get_multi_by_owner(self, db: AsyncSession, *, owner_id: int) -> List[Todo]:
        """
        Get every todo belonging to ``owner_id`` in storage default order.

        Args:
            db: Database session
            owner_id: ID of the owning user

        Returns:
            List of todo instances
        """
        result = await db.execute(select(Todo).where(Todo.owner_id == owner_id))
        return list(result.scalars().all())

    async def set_done(
        self,
        db: AsyncSession,
        *,
        id: int,
        owner_id: int,
        done: bool
    ) -> int:
        """
        Set the ``done`` flag of one todo.

        Args:
            db: Database session
            id: Todo ID
            owner_id: ID of the requesting user
            done: New value of the flag

        Returns:
            Number of rows matched (0 when the todo does not exist or is
            owned by someone else)
        """
        result = await db.execute(
            update(Todo)
            .where(Todo.id == id, Todo.owner_id == owner_id)
            .values(done=done)
            .execution_options(synchronize_session="evaluate")
        )
        await db.commit()
        return result.rowcount

    async def remove_for_owner(self, db: AsyncSession, *, id: int, owner_id: int) -> int:
        """
        Delete one todo.

        Args:
            db: Database session
            id: Todo ID
            owner_id: ID of the requesting user

        Returns:
            Number of rows deleted
        """
        result = await db.execute(
            delete(Todo)
            .where(Todo.id == id, Todo.owner_id == owner_id)
            .execution_options(synchronize_session="evaluate")
        )
        await db.commit()
        return result.rowcount


# Create instance of CRUDTodo
todo = CRUDTodo(Todo)
