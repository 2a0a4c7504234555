"""Create clientes table.

Revision ID: 001_create_clientes
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_create_clientes"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "clientes",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("nome", sa.String(100), nullable=False),
        sa.Column("email", sa.String(150), nullable=True),
        sa.Column("telefone", sa.String(20), nullable=True),
        sa.Column("endereco", sa.String(200), nullable=True),
        sa.Column("cidade", sa.String(100), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_clientes_nome", "clientes", ["nome"])


def downgrade() -> None:
    op.drop_index("ix_clientes_nome", table_name="clientes")
    op.drop_table("clientes")
