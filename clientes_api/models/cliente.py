"""Cliente ORM: persists the single customer resource.

Invariants:
    - id is UUID primary key, generated on flush (never supplied by callers)
    - nome is non-nullable and indexed for partial-name filtering
    - created_at is set once at insert and never updated

Design Decisions:
    - Python-side defaults (uuid4, utcnow): identical behavior on PostgreSQL and SQLite
    - No version column: last write wins on concurrent updates
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from clientes_api.db.base import Base


class Cliente(Base):
    """Cliente entity."""
    __tablename__ = "clientes"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    nome: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(150), nullable=True)
    telefone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    endereco: Mapped[str | None] = mapped_column(String(200), nullable=True)
    cidade: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Cliente id={self.id} nome={self.nome!r}>"
