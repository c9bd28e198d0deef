"""
Request validators for user and todo endpoints.

Each validator is a FastAPI dependency. It either raises a TodoServiceError,
which short-circuits the request with a JSON error, or returns the entity it
resolved so later dependencies and the handler receive it as a typed value.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from fastapi import Depends, Header

from app.core.errors import InvalidId, PlanLimitReached, TodoNotFound, UserNotFound
from app.core.todo import Todo, User, is_valid_uuid
from app.core.user_store import UserStore, get_user_store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TodoContext:
    """A todo resolved together with the user who owns it."""
    user: User
    todo: Todo


async def checks_exists_user_account(
    username: Optional[str] = Header(default=None),
    store: UserStore = Depends(get_user_store),
) -> User:
    """
    Resolve the user named by the ``username`` header.

    Raises:
        UserNotFound: If no user has that exact username
    """
    user = store.find_by_username(username)
    if user is None:
        logger.warning(f"No user with username '{username}'")
        raise UserNotFound("User not found")

    return user


async def checks_create_todos_user_availability(
    user: User = Depends(checks_exists_user_account),
) -> User:
    """
    Allow pro users, and free users below the todo ceiling.

    Raises:
        PlanLimitReached: If a free user already holds the maximum
    """
    if not user.can_create_todo():
        logger.warning(f"User {user.id} reached the free plan limit ({len(user.todos)} todos)")
        raise PlanLimitReached()

    return user


async def checks_todo_exists(
    todo_id: str,
    username: Optional[str] = Header(default=None),
    store: UserStore = Depends(get_user_store),
) -> TodoContext:
    """
    Resolve a todo from the path together with its owner from the header.

    Checks run in order: the user exists, the id is UUID-shaped, then the
    id belongs to one of the user's todos.

    Raises:
        UserNotFound: If no user has that username
        InvalidId: If the id is not a UUID
        TodoNotFound: If the user has no todo with that id
    """
    user = store.find_by_username(username)
    if user is None:
        logger.warning(f"No user with username '{username}'")
        raise UserNotFound()

    if not is_valid_uuid(todo_id):
        logger.warning(f"Rejected malformed todo id '{todo_id}'")
        raise InvalidId()

    todo = user.find_todo(todo_id)
    if todo is None:
        logger.warning(f"User {user.id} has no todo {todo_id}")
        raise TodoNotFound()

    return TodoContext(user=user, todo=todo)


async def find_user_by_id(
    user_id: str,
    store: UserStore = Depends(get_user_store),
) -> User:
    """
    Resolve the user whose id is in the path.

    Raises:
        UserNotFound: If no user has that id
    """
    user = store.find_by_id(user_id)
    if user is None:
        logger.warning(f"No user with id '{user_id}'")
        raise UserNotFound()

    return user
