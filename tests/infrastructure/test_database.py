"""Database Session Manager: schema preparation, health and rollback."""

import logging
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, select, text
from sqlalchemy.exc import OperationalError

import clientes_api.models  # noqa: F401
from clientes_api.config import Settings
from clientes_api.infrastructure.database import DatabaseSessionManager
from clientes_api.main import prepare_database
from clientes_api.models.cliente import Cliente


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


async def test_prepare_schema_creates_tables(manager):
    await manager.prepare_schema()
    async with manager.session() as db:
        count = await db.scalar(select(func.count()).select_from(Cliente))
    assert count == 0


async def test_prepare_schema_keeps_data_without_reset(manager):
    await manager.prepare_schema()
    async with manager.session() as db:
        db.add(Cliente(nome="Ana"))
        await db.commit()

    await manager.prepare_schema()
    async with manager.session() as db:
        assert await db.scalar(select(func.count()).select_from(Cliente)) == 1


async def test_prepare_schema_reset_drops_data(manager):
    await manager.prepare_schema()
    async with manager.session() as db:
        db.add(Cliente(nome="Ana"))
        await db.commit()

    await manager.prepare_schema(reset=True)
    async with manager.session() as db:
        assert await db.scalar(select(func.count()).select_from(Cliente)) == 0


async def test_health_check_true_when_reachable(manager):
    assert await manager.health_check() is True


async def test_session_errors_propagate_and_roll_back(manager):
    await manager.prepare_schema()
    with pytest.raises(OperationalError):
        async with manager.session() as db:
            db.add(Cliente(nome="Ana"))
            await db.flush()
            await db.execute(text("SELECT * FROM tabela_inexistente"))

    async with manager.session() as db:
        assert await db.scalar(select(func.count()).select_from(Cliente)) == 0


async def test_prepare_database_skipped_when_disabled():
    fake = AsyncMock(spec=DatabaseSessionManager)
    await prepare_database(fake, Settings())
    fake.prepare_schema.assert_not_awaited()


async def test_prepare_database_passes_reset_flag():
    fake = AsyncMock(spec=DatabaseSessionManager)
    await prepare_database(fake, Settings(database_reset_on_startup=True))
    fake.prepare_schema.assert_awaited_once_with(reset=True)


async def test_prepare_database_failure_is_logged_not_raised(caplog):
    fake = AsyncMock(spec=DatabaseSessionManager)
    fake.prepare_schema.side_effect = RuntimeError("db down")

    with caplog.at_level(logging.ERROR):
        await prepare_database(fake, Settings(database_create_schema=True))

    assert "An error occurred while migrating the database" in caplog.text
