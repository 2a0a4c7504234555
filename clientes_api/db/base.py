"""SQLAlchemy Declarative Base: shared base class for all ORM models.

Invariants:
    - Every table is registered on Base.metadata (create_all, Alembic autogenerate)
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Clientes API ORM models."""
    pass
