"""Concrete repository implementation for User backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from record_service.application.interfaces import UserRepository
from record_service.domain.entities import User
from record_service.domain.exceptions import StorageError
from record_service.infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions.

    Every SQLAlchemy failure is re-raised as ``StorageError``.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        """Map ORM model → domain entity."""
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
        )

    def _to_model(self, entity: User) -> UserModel:
        """Map domain entity → ORM model (for creation)."""
        return UserModel(
            name=entity.name,
            email=entity.email,
            password=entity.password,
        )

    async def get_by_id(self, user_id: int) -> User | None:
        try:
            result = await self._session.get(UserModel, user_id)
        except SQLAlchemyError as exc:
            raise StorageError("get_by_id", str(exc)) from exc
        return self._to_entity(result) if result else None

    async def get_all(
        self,
        *,
        name: str | None = None,
        email: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[User]:
        stmt = select(UserModel)

        if name is not None:
            stmt = stmt.where(UserModel.name == name)
        if email is not None:
            stmt = stmt.where(UserModel.email == email)

        stmt = stmt.order_by(UserModel.id).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("get_all", str(exc)) from exc
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, user: User) -> User:
        model = self._to_model(user)
        self._session.add(model)
        try:
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise StorageError("create", str(exc)) from exc
        return self._to_entity(model)

    async def update(self, user: User) -> User | None:
        # Single UPDATE so concurrent writers resolve as last-write-wins.
        stmt = (
            update(UserModel)
            .where(UserModel.id == user.id)
            .values(name=user.name, email=user.email, password=user.password)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("update", str(exc)) from exc
        if result.rowcount == 0:
            return None
        return User(id=user.id, name=user.name, email=user.email, password=user.password)

    async def delete(self, user_id: int) -> bool:
        stmt = (
            delete(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("delete", str(exc)) from exc
        return result.rowcount > 0

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise StorageError("commit", str(exc)) from exc
