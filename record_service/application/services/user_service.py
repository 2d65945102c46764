"""Application service (use case) for User operations."""

import logging

from record_service.application.interfaces import UserRepository
from record_service.application.schemas import UserCreate, UserUpdate
from record_service.domain.entities import User
from record_service.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user CRUD logic. Depends on the repository port (DI).

    Each write is committed before the method returns, so a failed commit
    surfaces as ``StorageError`` while the request is still in flight.
    ``StorageError`` raised by the repository is not caught here; it is
    translated into a 500 response at the HTTP boundary.
    """

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_user(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def list_users(
        self,
        *,
        name: str | None = None,
        email: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[User]:
        return await self._repository.get_all(
            name=name,
            email=email,
            skip=skip,
            limit=limit,
        )

    async def create_user(self, data: UserCreate) -> User:
        user = User(name=data.name, email=data.email, password=data.password)
        created = await self._repository.create(user)
        await self._repository.commit()
        logger.info("Created user id=%s", created.id)
        return created

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        user = User(id=user_id, name=data.name, email=data.email, password=data.password)
        updated = await self._repository.update(user)
        if updated is None:
            logger.warning("Update skipped: user id=%s does not exist", user_id)
            raise EntityNotFoundError("User", user_id)
        await self._repository.commit()
        logger.info("Updated user id=%s", user_id)
        return updated

    async def delete_user(self, user_id: int) -> bool:
        deleted = await self._repository.delete(user_id)
        if not deleted:
            logger.warning("Delete skipped: user id=%s does not exist", user_id)
            raise EntityNotFoundError("User", user_id)
        await self._repository.commit()
        logger.info("Deleted user id=%s", user_id)
        return True
