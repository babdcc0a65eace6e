"""Medico Service: registration, listing, detail, update and deactivation.

Invariants:
    - The repository is supplied through the constructor (no container, no globals)
    - cadastrar, atualizar and desativar each run in one repository.transaction()
    - A failed lookup aborts the transaction before any field is touched
    - listar never returns inactive doctors and never exposes telefone/endereco

Design Decisions:
    - DTO -> entity mapping lives here, keeping schemas free of ORM imports
    - Lookups are eager: an unknown id fails at get_reference_by_id, not later
"""

import logging

from medicos_api.core.domain_types import MedicoId
from medicos_api.core.pagination import PageRequest, count_pages
from medicos_api.core.repository_protocols import MedicoRepository
from medicos_api.models.endereco import Endereco
from medicos_api.models.medico import Medico
from medicos_api.schemas.medico import (
    DadosAtualizacaoMedico,
    DadosCadastroMedico,
    DadosEndereco,
    DadosListagemMedico,
    PaginaListagemMedico,
)

logger = logging.getLogger(__name__)


def _to_endereco(dados: DadosEndereco) -> Endereco:
    return Endereco(**dados.model_dump())


class MedicoService:
    """Doctor use cases over an injected MedicoRepository."""

    def __init__(self, repository: MedicoRepository):
        self._repository = repository

    async def cadastrar(self, dados: DadosCadastroMedico) -> Medico:
        """Create and persist a new active doctor."""
        medico = Medico(
            nome=dados.nome,
            email=dados.email,
            crm=dados.crm,
            telefone=dados.telefone,
            especialidade=dados.especialidade,
            endereco=_to_endereco(dados.endereco),
            ativo=True,
        )
        async with self._repository.transaction():
            await self._repository.save(medico)
        logger.info("Medico registered", extra={"medico_id": medico.id})
        return medico

    async def listar(self, page_request: PageRequest) -> PaginaListagemMedico:
        """One page of active doctors, projected to the listing view."""
        medicos, total = await self._repository.find_all_by_ativo_true(page_request)
        return PaginaListagemMedico(
            content=[DadosListagemMedico.model_validate(m) for m in medicos],
            total_elements=total,
            total_pages=count_pages(total, page_request.size),
            number=page_request.page,
            size=page_request.size,
        )

    async def detalhar(self, medico_id: MedicoId) -> Medico:
        return await self._repository.get_reference_by_id(medico_id)

    async def atualizar(self, dados: DadosAtualizacaoMedico) -> Medico:
        """Apply a partial update; absent fields are left untouched."""
        async with self._repository.transaction():
            medico = await self._repository.get_reference_by_id(MedicoId(dados.id))
            medico.atualizar_informacoes(
                nome=dados.nome,
                telefone=dados.telefone,
                endereco=_to_endereco(dados.endereco) if dados.endereco else None,
            )
        logger.info("Medico updated", extra={"medico_id": dados.id})
        return medico

    async def desativar(self, medico_id: MedicoId) -> None:
        """Soft delete. Deactivating an inactive doctor is a no-op."""
        async with self._repository.transaction():
            medico = await self._repository.get_reference_by_id(medico_id)
            medico.desativar()
        logger.info("Medico deactivated", extra={"medico_id": medico_id})
