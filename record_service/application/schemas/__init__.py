from .user import MessageResponse, UserCreate, UserResponse, UserUpdate

__all__ = [
    "MessageResponse",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
