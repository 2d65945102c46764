"""Integration tests for SQLAlchemyUserRepository on a temporary SQLite file."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from record_service.domain.entities import User
from record_service.domain.exceptions import StorageError
from record_service.infrastructure.database import Database
from record_service.infrastructure.database.repositories import SQLAlchemyUserRepository


@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncIterator[Database]:
    db = Database(f"sqlite:///{tmp_path / 'repo.sqlite3'}")
    yield db
    await db.dispose()


@pytest.mark.asyncio
async def test_ids_are_assigned_by_the_store(database: Database):
    await database.create_tables()
    async with database.session_factory() as session:
        repo = SQLAlchemyUserRepository(session)
        first = await repo.create(User(name="Alice", email="a@x.com", password="pw1"))
        second = await repo.create(User(name="Bob", email="b@x.com", password="pw2"))
        await repo.commit()

    assert (first.id, second.id) == (1, 2)

    async with database.session_factory() as session:
        users = await SQLAlchemyUserRepository(session).get_all()
    assert [(u.id, u.name) for u in users] == [(1, "Alice"), (2, "Bob")]


@pytest.mark.asyncio
async def test_update_overwrites_all_fields(database: Database):
    await database.create_tables()
    async with database.session_factory() as session:
        repo = SQLAlchemyUserRepository(session)
        created = await repo.create(User(name="Alice", email="a@x.com", password="pw1"))
        await repo.commit()

    async with database.session_factory() as session:
        repo = SQLAlchemyUserRepository(session)
        updated = await repo.update(
            User(id=created.id, name="Alice2", email="a2@x.com", password="pw1b")
        )
        await repo.commit()
    assert updated == User(id=created.id, name="Alice2", email="a2@x.com", password="pw1b")

    async with database.session_factory() as session:
        stored = await SQLAlchemyUserRepository(session).get_by_id(created.id)
    assert stored == updated


@pytest.mark.asyncio
async def test_missing_rows_report_not_found_without_error(database: Database):
    await database.create_tables()
    async with database.session_factory() as session:
        repo = SQLAlchemyUserRepository(session)
        assert await repo.get_by_id(7) is None
        assert await repo.update(User(id=7, name="n", email="e", password="p")) is None
        assert await repo.delete(7) is False


@pytest.mark.asyncio
async def test_delete_removes_row(database: Database):
    await database.create_tables()
    async with database.session_factory() as session:
        repo = SQLAlchemyUserRepository(session)
        created = await repo.create(User(name="Bob", email="b@x.com", password="pw2"))
        assert await repo.delete(created.id) is True
        assert await repo.get_all() == []


@pytest.mark.asyncio
async def test_missing_table_raises_storage_error(database: Database):
    async with database.session_factory() as session:
        repo = SQLAlchemyUserRepository(session)
        with pytest.raises(StorageError) as exc_info:
            await repo.get_all()
    assert exc_info.value.operation == "get_all"
    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_rejected_insert_raises_storage_error(database: Database):
    await database.create_tables()
    async with database.session_factory() as session:
        repo = SQLAlchemyUserRepository(session)
        with pytest.raises(StorageError) as exc_info:
            await repo.create(User(name=None, email="a@x.com", password="pw1"))  # type: ignore[arg-type]
    assert exc_info.value.operation == "create"
