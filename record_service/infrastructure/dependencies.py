"""Request-scoped service providers for FastAPI routes."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from record_service.application.services import UserService
from record_service.infrastructure.database.repositories import SQLAlchemyUserRepository
from record_service.infrastructure.database.session import get_db_session


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService instance with its repository wired up."""
    repository = SQLAlchemyUserRepository(session)
    yield UserService(repository)
