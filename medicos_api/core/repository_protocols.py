"""Boundary Protocols: contracts between the service layer and persistence.

Invariants:
    - Core NEVER imports from the shell: dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by the shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests supply a plain fake
    - get_reference_by_id is an eager lookup-or-raise (no deferred proxy)
"""

from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol

from medicos_api.core.domain_types import Especialidade, MedicoId
from medicos_api.core.pagination import PageRequest


class MedicoLike(Protocol):
    """Structural contract for Medico entities handled by the service layer."""
    id: int
    nome: str
    email: str
    crm: str
    telefone: str | None
    especialidade: Especialidade
    endereco: Any
    ativo: bool

    def atualizar_informacoes(
        self, nome: str | None = None, telefone: str | None = None,
        endereco: Any = None,
    ) -> None: ...

    def desativar(self) -> None: ...


class MedicoRepository(Protocol):
    """Contract for doctor persistence: implemented by the shell."""
    async def save(self, medico: MedicoLike) -> MedicoLike: ...

    async def find_all_by_ativo_true(
        self, page_request: PageRequest,
    ) -> tuple[list[MedicoLike], int]: ...

    async def get_reference_by_id(self, medico_id: MedicoId) -> MedicoLike: ...

    def transaction(self) -> AbstractAsyncContextManager[None]: ...
