"""Cliente Repository: the only component that talks to storage for clientes.

Invariants:
    - One repository per request, bound to the request's AsyncSession
    - add/update/delete only stage changes; save() commits them atomically
    - save() rolls back and raises PersistenceError on any SQLAlchemy failure
    - Name filtering is a case-insensitive substring match with LIKE wildcards escaped
    - A page starting past the largest SQL OFFSET is empty and never queried

Design Decisions:
    - Thin wrapper over the unit of work already provided by AsyncSession
    - Listing ordered by created_at, id: stable pages in insertion order
"""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from clientes_api.core.domain_types import ClienteId
from clientes_api.core.errors import PersistenceError
from clientes_api.models.cliente import Cliente
from clientes_api.schemas.cliente import ClientesResourceParameters

logger = logging.getLogger(__name__)

# Largest OFFSET a 64-bit SQL integer can hold.
MAX_SQL_OFFSET = 2**63 - 1


class SqlAlchemyClienteRepository:
    """Async cliente repository over a SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    def add_cliente(self, cliente: Cliente) -> None:
        self._db.add(cliente)

    async def get_clientes(
        self, params: ClientesResourceParameters | None = None,
    ) -> Sequence[Cliente]:
        """Clientes matching params.nome (all when absent), one page at a time."""
        params = params or ClientesResourceParameters()
        if params.offset > MAX_SQL_OFFSET:
            return []
        query = select(Cliente).order_by(Cliente.created_at, Cliente.id)
        if params.nome:
            query = query.where(
                Cliente.nome.icontains(params.nome, autoescape=True),
            )
        query = query.limit(params.page_size).offset(params.offset)
        result = await self._db.execute(query)
        return result.scalars().all()

    async def get_cliente(self, cliente_id: ClienteId) -> Cliente | None:
        result = await self._db.execute(
            select(Cliente).where(Cliente.id == cliente_id),
        )
        return result.scalar_one_or_none()

    def update_cliente(self, cliente: Cliente) -> None:
        # Tracked entities are flushed on commit; add() reattaches detached ones.
        self._db.add(cliente)

    async def delete_cliente(self, cliente: Cliente) -> None:
        await self._db.delete(cliente)

    async def save(self) -> None:
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            logger.error(f"Cliente commit violated a constraint: {e}")
            raise PersistenceError("Integrity constraint violated", "commit") from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"Cliente commit failed: {e}")
            raise PersistenceError("Database operation failed", "commit") from e
