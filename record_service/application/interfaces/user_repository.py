"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from record_service.domain.entities import User


class UserRepository(ABC):
    """Persistence port for users, implemented in the infrastructure layer.

    Implementations raise ``StorageError`` for any connection or query
    failure and report missing rows through their return values.
    """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        """Retrieve a single user by its ID."""
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        name: str | None = None,
        email: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[User]:
        """Retrieve users in ascending ID order, optionally filtered.

        Without a ``limit`` every matching row is returned.
        """
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, user: User) -> User | None:
        """Overwrite name, email and password. Returns None if the row is gone."""
        ...

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Delete a user. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Make pending writes durable before the caller reports success."""
        ...
