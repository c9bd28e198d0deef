"""
In-memory user store.

This module owns every registered user and their todos for the lifetime
of the process. Nothing is persisted; a restart starts from an empty store.
"""

import logging
from datetime import datetime
from typing import List, Optional

from app.core.errors import AlreadyPro, DuplicateUsername
from app.core.todo import Todo, User

logger = logging.getLogger(__name__)


class UserStore:
    """
    Holds all users (in-memory storage), unique by username and by id.

    Handlers run on a single event loop without awaiting between lookup
    and mutation, so no lock guards the user list.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._users: List[User] = []

    def create_user(self, name: str, username: str) -> User:
        """
        Register a new user on the free plan.

        Args:
            name: Display name
            username: Unique username (exact, case-sensitive match)

        Returns:
            Newly created User

        Raises:
            DuplicateUsername: If the username is already taken
        """
        if self.find_by_username(username) is not None:
            logger.warning(f"Rejected registration of existing username '{username}'")
            raise DuplicateUsername()

        user = User(name=name, username=username)
        self._users.append(user)
        logger.info(f"Created user {user.id} (username: '{username}')")
        return user

    def find_by_username(self, username: Optional[str]) -> Optional[User]:
        """Get user by username, or None."""
        if username is None:
            return None
        for user in self._users:
            if user.username == username:
                return user
        return None

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Get user by id, or None."""
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def user_count(self) -> int:
        return len(self._users)

    def upgrade_to_pro(self, user: User) -> User:
        """
        Move a user to the pro plan. There is no downgrade path.

        Raises:
            AlreadyPro: If the user is already on the pro plan
        """
        if user.pro:
            logger.warning(f"User {user.id} tried to upgrade but is already pro")
            raise AlreadyPro()

        user.pro = True
        logger.info(f"User {user.id} upgraded to pro")
        return user

    def add_todo(self, user: User, title: str, deadline: datetime) -> Todo:
        """
        Create a todo and append it to the user's list.

        Plan limits are checked by the caller before this is reached.
        """
        todo = Todo(title=title, deadline=deadline)
        user.todos.append(todo)
        logger.info(f"User {user.id} created todo {todo.id} ({len(user.todos)} total)")
        return todo

    def update_todo(self, todo: Todo, title: str, deadline: datetime) -> Todo:
        """Overwrite a todo's title and deadline in place."""
        todo.title = title
        todo.deadline = deadline
        logger.info(f"Updated todo {todo.id}")
        return todo

    def mark_done(self, todo: Todo) -> Todo:
        """Mark a todo as done."""
        todo.done = True
        logger.info(f"Todo {todo.id} marked done")
        return todo

    def remove_todo(self, user: User, todo: Todo) -> bool:
        """
        Remove a todo from the user's list by identity.

        Returns:
            True if removed, False if the todo was not in the list
        """
        for index, item in enumerate(user.todos):
            if item is todo:
                del user.todos[index]
                logger.info(f"User {user.id} deleted todo {todo.id} ({len(user.todos)} remaining)")
                return True

        logger.warning(f"Todo {todo.id} not present in todos of user {user.id}")
        return False

    def clear(self) -> None:
        """Drop every user."""
        self._users.clear()
        logger.debug("User store cleared")


# Global user store instance
_user_store = UserStore()


def get_user_store() -> UserStore:
    """Get global user store instance."""
    return _user_store
