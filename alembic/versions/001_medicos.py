"""Initial schema: medicos table with embedded address columns.

Revision ID: 001_medicos
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_medicos"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "medicos",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("nome", sa.String(100), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("crm", sa.String(20), nullable=False),
        sa.Column("telefone", sa.String(20), nullable=True),
        sa.Column("especialidade", sa.String(20), nullable=False),
        sa.Column("logradouro", sa.String(100), nullable=False),
        sa.Column("bairro", sa.String(100), nullable=False),
        sa.Column("cep", sa.String(8), nullable=False),
        sa.Column("cidade", sa.String(100), nullable=False),
        sa.Column("uf", sa.String(2), nullable=False),
        sa.Column("complemento", sa.String(100), nullable=True),
        sa.Column("numero", sa.String(20), nullable=True),
        sa.Column("ativo", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.UniqueConstraint("crm", name="uq_medicos_crm"),
        sa.UniqueConstraint("email", name="uq_medicos_email"),
    )
    op.create_index(
        "ix_medicos_ativo_nome", "medicos", ["ativo", "nome"],
    )


def downgrade() -> None:
    op.drop_index("ix_medicos_ativo_nome", table_name="medicos")
    op.drop_table("medicos")
