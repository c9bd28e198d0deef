"""
Todo API endpoints.

Every route identifies the caller through the ``username`` header.
"""

from typing import List

from fastapi import APIRouter, Depends

from app.api.schemas import TodoRequest, TodoResponse
from app.api.validators import (
    TodoContext,
    checks_create_todos_user_availability,
    checks_exists_user_account,
    checks_todo_exists,
)
from app.core.errors import TodoNotFound
from app.core.todo import User
from app.core.user_store import UserStore, get_user_store


router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", response_model=List[TodoResponse])
async def list_todos(user: User = Depends(checks_exists_user_account)):
    """
    List the caller's todos in creation order.

    Raises:
        404: User not found
    """
    return user.todos


@router.post("", response_model=TodoResponse, status_code=201)
async def create_todo(
    request: TodoRequest,
    user: User = Depends(checks_create_todos_user_availability),
    store: UserStore = Depends(get_user_store)
):
    """
    Create a todo for the caller.

    Args:
        request: Title and deadline of the new todo
        user: Caller, already checked against the plan limit
        store: User store

    Returns:
        Created todo

    Raises:
        404: User not found
        403: Free plan limit reached
    """
    return store.add_todo(user, title=request.title, deadline=request.deadline)


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    request: TodoRequest,
    context: TodoContext = Depends(checks_todo_exists),
    store: UserStore = Depends(get_user_store)
):
    """
    Replace a todo's title and deadline.

    Raises:
        404: User or todo not found
        400: Id is not a uuid
    """
    return store.update_todo(context.todo, title=request.title, deadline=request.deadline)


@router.patch("/{todo_id}/done", response_model=TodoResponse)
async def mark_todo_done(
    context: TodoContext = Depends(checks_todo_exists),
    store: UserStore = Depends(get_user_store)
):
    """
    Mark a todo as done.

    Raises:
        404: User or todo not found
        400: Id is not a uuid
    """
    return store.mark_done(context.todo)


@router.delete("/{todo_id}", status_code=204)
async def delete_todo(
    user: User = Depends(checks_exists_user_account),
    context: TodoContext = Depends(checks_todo_exists),
    store: UserStore = Depends(get_user_store)
):
    """
    Delete one of the caller's todos.

    Returns:
        No content (204)

    Raises:
        404: User or todo not found
        400: Id is not a uuid
    """
    if not store.remove_todo(context.user, context.todo):
        raise TodoNotFound("Todo not found")

    return None
