"""
Request and response models shared by the user and todo routers.
"""

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, field_validator


class CreateUserRequest(BaseModel):
    """Request model for user registration."""
    name: str = Field(..., description="Display name")
    username: str = Field(..., description="Unique username, matched exactly")


class TodoRequest(BaseModel):
    """Request model for creating or replacing a todo."""
    title: str = Field(..., description="Todo title")
    deadline: datetime = Field(..., description="Deadline as an ISO-8601 date or timestamp")

    @field_validator("deadline")
    @classmethod
    def deadline_in_utc(cls, value: datetime) -> datetime:
        """Read naive deadlines as UTC and normalise aware ones to UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class TodoResponse(BaseModel):
    """Response model for todo data."""
    id: str
    title: str
    deadline: datetime
    done: bool
    created_at: datetime

    class Config:
        from_attributes = True


class UserResponse(BaseModel):
    """Response model for user data, including owned todos."""
    id: str
    name: str
    username: str
    pro: bool
    todos: List[TodoResponse] = []

    class Config:
        from_attributes = True
