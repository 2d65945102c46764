"""Pydantic DTOs (Data Transfer Objects) for the User feature."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Request body for POST /users; every field must be present."""

    name: str = Field(..., max_length=255, examples=["Alice"])
    email: str = Field(..., max_length=255, examples=["a@x.com"])
    password: str = Field(..., max_length=255, examples=["pw1"])


class UserUpdate(BaseModel):
    """Request body for PUT /users/{id}; all three fields are replaced together."""

    name: str = Field(..., max_length=255, examples=["Alice2"])
    email: str = Field(..., max_length=255, examples=["a2@x.com"])
    password: str = Field(..., max_length=255, examples=["pw1b"])


class UserResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    email: str
    password: str

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    detail: str
