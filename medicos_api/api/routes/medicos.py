"""Medicos Routes: HTTP surface for doctor registration, listing, update and deactivation.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
    - Mutating endpoints return empty bodies (201 on create, 204 otherwise)
    - page/size/sort are read as raw strings; malformed values fall back to defaults
    - Not-found and conflict errors propagate as VollMedError to the global handlers

Design Decisions:
    - MedicoService built per request from the request's session (explicit
      composition via Depends, no container)
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from medicos_api.config import get_settings
from medicos_api.core.domain_types import MedicoId
from medicos_api.core.pagination import parse_page_request
from medicos_api.infrastructure.database import get_db
from medicos_api.repositories.medico_repository import SqlAlchemyMedicoRepository
from medicos_api.schemas.medico import (
    DadosAtualizacaoMedico,
    DadosCadastroMedico,
    DadosDetalhamentoMedico,
    PaginaListagemMedico,
)
from medicos_api.services.medico_service import MedicoService

router = APIRouter(prefix="/medicos", tags=["medicos"])


def get_medico_service(db: AsyncSession = Depends(get_db)) -> MedicoService:
    return MedicoService(SqlAlchemyMedicoRepository(db))


@router.post("", status_code=status.HTTP_201_CREATED)
async def cadastrar_medico(
    body: DadosCadastroMedico,
    service: MedicoService = Depends(get_medico_service),
):
    """Register a new doctor."""
    medico = await service.cadastrar(body)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{router.prefix}/{medico.id}"},
    )


@router.get("", response_model=PaginaListagemMedico)
async def listar_medicos(
    page: str | None = Query(None),
    size: str | None = Query(None),
    sort: str | None = Query(None),
    service: MedicoService = Depends(get_medico_service),
):
    """List active doctors, paginated (default: page=0, size=10, sort=nome)."""
    page_request = parse_page_request(
        page, size, sort, max_size=get_settings().max_page_size,
    )
    return await service.listar(page_request)


@router.get("/{medico_id}", response_model=DadosDetalhamentoMedico)
async def detalhar_medico(
    medico_id: int,
    service: MedicoService = Depends(get_medico_service),
):
    """Full record of one doctor, active or not."""
    medico = await service.detalhar(MedicoId(medico_id))
    return DadosDetalhamentoMedico.model_validate(medico)


@router.put("", status_code=status.HTTP_204_NO_CONTENT)
async def atualizar_medico(
    body: DadosAtualizacaoMedico,
    service: MedicoService = Depends(get_medico_service),
):
    """Partially update a doctor (nome, telefone, endereco)."""
    await service.atualizar(body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{medico_id}", status_code=status.HTTP_204_NO_CONTENT)
async def desativar_medico(
    medico_id: int,
    service: MedicoService = Depends(get_medico_service),
):
    """Soft delete: mark the doctor inactive."""
    await service.desativar(MedicoId(medico_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
