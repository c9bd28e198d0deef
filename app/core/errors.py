"""
Service errors for the todo API.

Each error carries the HTTP status code and the message returned to the
client in the ``{"error": ...}`` body.
"""

from typing import Optional


class TodoServiceError(Exception):
    """Base class for client-facing request errors."""
    status_code: int = 400
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UserNotFound(TodoServiceError):
    """Raised when no user matches the supplied username or id."""
    status_code = 404
    default_message = "User not found."


class InvalidId(TodoServiceError):
    """Raised when a todo id is not UUID-shaped."""
    status_code = 400
    default_message = "The provided id is not a uuid."


class TodoNotFound(TodoServiceError):
    """Raised when a todo id matches none of the user's todos."""
    status_code = 404
    default_message = "User's todo not found."


class DuplicateUsername(TodoServiceError):
    """Raised when registering a username that is already taken."""
    status_code = 400
    default_message = "Username already exists"


class AlreadyPro(TodoServiceError):
    """Raised when upgrading a user who is already on the pro plan."""
    status_code = 400
    default_message = "Pro plan is already activated."


class PlanLimitReached(TodoServiceError):
    """Raised when a free-plan user is at the todo ceiling."""
    status_code = 403
    default_message = "Free plan limit reached. Please upgrade to pro."
