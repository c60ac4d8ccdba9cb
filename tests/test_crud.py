"""
Tests for CRUD operations.

This module contains tests for the user and todo database operations.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from todo_api.crud.todo import todo as todo_crud
from todo_api.crud.user import user as user_crud
from todo_api.models.todo import Todo
from todo_api.schemas.todo import TodoCreate
from todo_api.schemas.user import UserCreate


async def stored_done(db, todo_id):
    """Read the done flag straight from the table; None when the row is gone."""
    result = await db.execute(select(Todo.done).where(Todo.id == todo_id))
    return result.scalar_one_or_none()


# User CRUD Tests
async def test_create_user(db):
    """Test creating a new user generates an API key."""
    user = await user_crud.create(db, obj_in=UserCreate(username="crud_user"))

    assert user.id is not None
    assert user.username == "crud_user"
    assert len(user.api_key) == 36
    assert user.created_at is not None


async def test_create_user_duplicate_username(db):
    """Test that the unique index rejects a second user with the same name."""
    await user_crud.create(db, obj_in=UserCreate(username="twice"))
    with pytest.raises(IntegrityError):
        await user_crud.create(db, obj_in=UserCreate(username="twice"))


async def test_get_user_by_api_key(db):
    """Test retrieving user by API key."""
    created_user = await user_crud.create(db, obj_in=UserCreate(username="bykey"))

    retrieved_user = await user_crud.get_by_api_key(db, api_key=created_user.api_key)

    assert retrieved_user is not None
    assert retrieved_user.id == created_user.id


async def test_get_user_by_unknown_api_key(db):
    """Test that an unknown key finds nobody."""
    assert await user_crud.get_by_api_key(db, api_key="nope") is None


async def test_create_user_with_numeric_username(db):
    """Test that a number is stored as its text rather than rejected."""
    user = await user_crud.create(db, obj_in=UserCreate(username=12345))

    assert user.username == "12345"


# Todo CRUD Tests
async def test_create_todo_for_owner(db):
    """Test a new todo belongs to its owner and is not done."""
    todo = await todo_crud.create_for_owner(db, obj_in=TodoCreate(task="buy milk"), owner_id=7)

    assert todo.owner_id == 7
    assert todo.task == "buy milk"
    assert todo.done is False


async def test_get_multi_by_owner(db):
    """Test listing filters on owner."""
    await todo_crud.create_for_owner(db, obj_in=TodoCreate(task="a"), owner_id=1)
    await todo_crud.create_for_owner(db, obj_in=TodoCreate(task="b"), owner_id=2)
    await todo_crud.create_for_owner(db, obj_in=TodoCreate(task="c"), owner_id=1)

    todos = await todo_crud.get_multi_by_owner(db, owner_id=1)

    assert sorted(t.task for t in todos) == ["a", "c"]


async def test_set_done_reports_affected_rows(db):
    """Test the done flag update and its row count."""
    todo = await todo_crud.create_for_owner(db, obj_in=TodoCreate(task="x"), owner_id=1)

    assert await todo_crud.set_done(db, id=todo.id, owner_id=1, done=True) == 1
    assert await stored_done(db, todo.id) is True

    assert await todo_crud.set_done(db, id=todo.id, owner_id=2, done=False) == 0
    assert await todo_crud.set_done(db, id=todo.id + 100, owner_id=1, done=False) == 0


async def test_set_done_on_other_owner_leaves_row_alone(db):
    """Test the ownership predicate on updates."""
    todo = await todo_crud.create_for_owner(db, obj_in=TodoCreate(task="x"), owner_id=1)

    await todo_crud.set_done(db, id=todo.id, owner_id=2, done=True)

    assert await stored_done(db, todo.id) is False


async def test_remove_for_owner(db):
    """Test deletion and its row count."""
    todo = await todo_crud.create_for_owner(db, obj_in=TodoCreate(task="x"), owner_id=1)

    assert await todo_crud.remove_for_owner(db, id=todo.id, owner_id=2) == 0
    assert await stored_done(db, todo.id) is False

    assert await todo_crud.remove_for_owner(db, id=todo.id, owner_id=1) == 1
    assert await stored_done(db, todo.id) is None

    assert await todo_crud.remove_for_owner(db, id=todo.id, owner_id=1) == 0
