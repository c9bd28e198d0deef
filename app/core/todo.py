"""
Todo and user data structures.

Users own their todos directly; there is no cross-user sharing.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
import re
from uuid import uuid4


# Maximum number of todos a user on the free plan may hold
FREE_PLAN_TODO_LIMIT = 10

# Hyphenated UUID, versions 1-8 with RFC 4122 variant, or the nil/max UUIDs
UUID_PATTERN = re.compile(
    r'^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}'
    r'|00000000-0000-0000-0000-000000000000'
    r'|ffffffff-ffff-ffff-ffff-ffffffffffff)$',
    re.IGNORECASE,
)


def new_id() -> str:
    """Generate a new random identifier."""
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def is_valid_uuid(value: Optional[str]) -> bool:
    """
    Check that a value is a well-formed UUID string.

    Args:
        value: Candidate identifier

    Returns:
        True if the value matches the UUID syntax
    """
    if not value:
        return False
    return UUID_PATTERN.match(value) is not None


@dataclass(eq=False)
class Todo:
    """A single task owned by one user."""
    title: str
    deadline: datetime
    id: str = field(default_factory=new_id)
    done: bool = False
    created_at: datetime = field(default_factory=utc_now)


@dataclass(eq=False)
class User:
    """A registered user and the todos they own."""
    name: str
    username: str
    id: str = field(default_factory=new_id)
    pro: bool = False
    todos: List[Todo] = field(default_factory=list)

    def can_create_todo(self) -> bool:
        """Check whether the user's plan allows another todo."""
        return self.pro or len(self.todos) < FREE_PLAN_TODO_LIMIT

    def find_todo(self, todo_id: str) -> Optional[Todo]:
        """Get one of the user's todos by id."""
        for todo in self.todos:
            if todo.id == todo_id:
                return todo
        return None
