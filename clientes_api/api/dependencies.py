"""Route Dependencies: per-request collaborators injected with FastAPI Depends.

Invariants:
    - One repository per request, sharing the request's DB session
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clientes_api.infrastructure.database import get_db
from clientes_api.repositories.cliente_repository import SqlAlchemyClienteRepository


def get_cliente_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyClienteRepository:
    return SqlAlchemyClienteRepository(db)
