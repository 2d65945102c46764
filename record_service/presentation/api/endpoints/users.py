"""User CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from record_service.application.schemas import (
    MessageResponse,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from record_service.application.services import UserService
from record_service.domain.exceptions import EntityNotFoundError
from record_service.infrastructure.dependencies import get_user_service

router = APIRouter(tags=["Users"])


@router.get("/", response_model=list[UserResponse])
@router.get("/users", response_model=list[UserResponse])
async def list_users(
    name: str | None = Query(None, description="Filter by exact name"),
    email: str | None = Query(None, description="Filter by exact email"),
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, description="Maximum number of users; omit for all"),
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Retrieve users in ascending ID order."""
    users = await service.list_users(name=name, email=email, skip=skip, limit=limit)
    return [UserResponse.model_validate(u, from_attributes=True) for u in users]


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Retrieve a single user by ID."""
    try:
        user = await service.get_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a new user."""
    user = await service.create_user(data)
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Overwrite name, email and password of an existing user."""
    try:
        user = await service.update_user(user_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete a user by ID."""
    try:
        await service.delete_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(detail="User deleted successfully.")
