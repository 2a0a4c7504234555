"""API test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched for the readiness probe, which bypasses get_db

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from clientes_api.db.base import Base
from clientes_api.infrastructure.database import get_db, DatabaseSessionManager
from clientes_api.models.cliente import Cliente
import clientes_api.infrastructure.database as db_module
from clientes_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_clientes(test_db):
    """Insert a small, name-diverse set of clientes."""
    clientes = [
        Cliente(nome="Ana Souza", email="ana@example.com", cidade="Recife"),
        Cliente(nome="Mariana Lima", telefone="81 99999-0000"),
        Cliente(nome="Bruno Costa", endereco="Rua das Flores, 10"),
        Cliente(nome="JOANA PRADO"),
    ]
    test_db.add_all(clientes)
    await test_db.commit()
    return clientes


@pytest.fixture
async def seed_cliente(test_db):
    cliente = Cliente(
        nome="Carlos Mendes",
        email="carlos@example.com",
        telefone="11 3333-4444",
        endereco="Av. Paulista, 1000",
        cidade="São Paulo",
    )
    test_db.add(cliente)
    await test_db.commit()
    await test_db.refresh(cliente)
    return cliente


@pytest.fixture
async def fresh_session(test_session_factory):
    """A session with an empty identity map, for asserting persisted state."""
    async with test_session_factory() as session:
        yield session
