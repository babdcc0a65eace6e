"""SQLAlchemy Medico Repository: async persistence for doctor records.

Invariants:
    - Listing only ever selects rows with ativo = true
    - Listing order is (sort field, id) so pages never overlap
    - get_reference_by_id raises ResourceNotFoundError for unknown ids
    - transaction() commits on success and rolls back on any exception;
      IntegrityError surfaces as DuplicateRecordError

Design Decisions:
    - save() flushes immediately: unique violations surface inside the
      transaction block, before the commit
    - Session is injected by the caller; the repository never opens its own
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from medicos_api.core.domain_types import (
    MAX_MEDICO_ID, MedicoId, SortDirection, SortField,
)
from medicos_api.core.errors import DuplicateRecordError, ResourceNotFoundError
from medicos_api.core.pagination import PageRequest
from medicos_api.models.medico import Medico

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    SortField.ID: Medico.id,
    SortField.NOME: Medico.nome,
    SortField.EMAIL: Medico.email,
    SortField.CRM: Medico.crm,
    SortField.ESPECIALIDADE: Medico.especialidade,
}


class SqlAlchemyMedicoRepository:
    """MedicoRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, medico: Medico) -> Medico:
        self._db.add(medico)
        await self._db.flush()
        return medico

    async def find_all_by_ativo_true(
        self, page_request: PageRequest,
    ) -> tuple[list[Medico], int]:
        column = _SORT_COLUMNS[page_request.sort]
        order = column.desc() if page_request.direction == SortDirection.DESC else column.asc()
        query = (
            select(Medico)
            .where(Medico.ativo.is_(True))
            .order_by(order, Medico.id.asc())
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        result = await self._db.execute(query)
        medicos = list(result.scalars().all())

        total = await self._db.scalar(
            select(func.count()).select_from(Medico).where(Medico.ativo.is_(True)),
        )
        return medicos, total or 0

    async def get_reference_by_id(self, medico_id: MedicoId) -> Medico:
        # Out-of-range keys overflow the driver instead of matching nothing
        if not 1 <= medico_id <= MAX_MEDICO_ID:
            raise ResourceNotFoundError("Medico", medico_id)
        medico = await self._db.get(Medico, medico_id)
        if medico is None:
            raise ResourceNotFoundError("Medico", medico_id)
        return medico

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Unit of work: commit on success, rollback on any exception."""
        try:
            yield
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            logger.warning(f"Integrity constraint violated: {e.orig}")
            raise DuplicateRecordError(
                "Medico with the same crm or email already exists",
            ) from e
        except Exception:
            await self._db.rollback()
            raise
