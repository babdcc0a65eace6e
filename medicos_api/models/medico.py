"""Medico ORM: persists a doctor record with its embedded address.

Invariants:
    - id is an integer primary key generated by the database, never reassigned
    - crm and email are unique across all doctors (DB constraint is the only race guard)
    - ativo only transitions True -> False (soft delete, rows are never removed)
    - endereco columns live on the medicos table (composite of Endereco)

Design Decisions:
    - Mutation methods on the entity: the service layer never assigns columns directly
    - BigInteger id with an Integer variant on SQLite so autoincrement works in tests
"""

from sqlalchemy import BigInteger, Boolean, Enum, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, composite, mapped_column

from medicos_api.core.domain_types import Especialidade
from medicos_api.db.base import Base
from medicos_api.models.endereco import Endereco


class Medico(Base):
    """Doctor entity: soft-deleted via the ativo flag."""
    __tablename__ = "medicos"
    __table_args__ = (
        UniqueConstraint("crm", name="uq_medicos_crm"),
        UniqueConstraint("email", name="uq_medicos_email"),
        Index("ix_medicos_ativo_nome", "ativo", "nome"),
    )

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    nome: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    crm: Mapped[str] = mapped_column(String(20), nullable=False)
    telefone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    especialidade: Mapped[Especialidade] = mapped_column(
        Enum(Especialidade, native_enum=False, length=20), nullable=False,
    )
    ativo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    endereco: Mapped[Endereco] = composite(
        mapped_column("logradouro", String(100), nullable=False),
        mapped_column("bairro", String(100), nullable=False),
        mapped_column("cep", String(8), nullable=False),
        mapped_column("cidade", String(100), nullable=False),
        mapped_column("uf", String(2), nullable=False),
        mapped_column("complemento", String(100), nullable=True),
        mapped_column("numero", String(20), nullable=True),
    )

    def atualizar_informacoes(
        self,
        nome: str | None = None,
        telefone: str | None = None,
        endereco: Endereco | None = None,
    ) -> None:
        """Overwrite only the fields that were supplied."""
        if nome is not None:
            self.nome = nome
        if telefone is not None:
            self.telefone = telefone
        if endereco is not None:
            self.endereco = endereco

    def desativar(self) -> None:
        """Soft delete. Idempotent on an already inactive doctor."""
        self.ativo = False
