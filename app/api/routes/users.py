"""
User API endpoints.

Provides username registration (no password), lookup by id and the
one-way upgrade to the pro plan.
"""

from fastapi import APIRouter, Depends

from app.api.schemas import CreateUserRequest, UserResponse
from app.api.validators import find_user_by_id
from app.core.todo import User
from app.core.user_store import UserStore, get_user_store


router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    request: CreateUserRequest,
    store: UserStore = Depends(get_user_store)
):
    """
    Register a new user on the free plan.

    Args:
        request: User registration request
        store: User store

    Returns:
        Newly created user

    Raises:
        400: Username already exists
    """
    return store.create_user(name=request.name, username=request.username)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user: User = Depends(find_user_by_id)):
    """
    Get user by id.

    Raises:
        404: User not found
    """
    return user


@router.patch("/{user_id}/pro", response_model=UserResponse)
async def upgrade_user_to_pro(
    user: User = Depends(find_user_by_id),
    store: UserStore = Depends(get_user_store)
):
    """
    Upgrade a user to the pro plan.

    Raises:
        404: User not found
        400: Pro plan is already activated
    """
    return store.upgrade_to_pro(user)
