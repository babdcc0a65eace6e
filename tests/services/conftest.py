"""Service test fixtures: in-memory MedicoRepository fake.

Invariants:
    - FakeMedicoRepository satisfies the MedicoRepository Protocol structurally
    - transaction() snapshots state and restores it when the block raises,
      mirroring commit/rollback of the real repository
    - crm/email uniqueness enforced like the DB constraint

Design Decisions:
    - Fake over mocks: MedicoService receives it through its constructor,
      exercising the same seam production uses
"""

from contextlib import asynccontextmanager

import pytest

from medicos_api.core.domain_types import SortDirection
from medicos_api.core.errors import DuplicateRecordError, ResourceNotFoundError
from medicos_api.core.pagination import PageRequest
from medicos_api.services.medico_service import MedicoService


class FakeMedicoRepository:
    def __init__(self):
        self.rows: dict[int, object] = {}
        self.commits = 0
        self.rollbacks = 0
        self._next_id = 1

    async def save(self, medico):
        for other in self.rows.values():
            if other.crm == medico.crm or other.email == medico.email:
                raise DuplicateRecordError("duplicate crm or email")
        medico.id = self._next_id
        self._next_id += 1
        self.rows[medico.id] = medico
        return medico

    async def find_all_by_ativo_true(self, page_request: PageRequest):
        ativos = [m for m in self.rows.values() if m.ativo]
        ativos.sort(key=lambda m: m.id)
        ativos.sort(
            key=lambda m: getattr(m, page_request.sort.value),
            reverse=page_request.direction == SortDirection.DESC,
        )
        start = page_request.offset
        return ativos[start:start + page_request.size], len(ativos)

    async def get_reference_by_id(self, medico_id):
        medico = self.rows.get(medico_id)
        if medico is None:
            raise ResourceNotFoundError("Medico", medico_id)
        return medico

    @asynccontextmanager
    async def transaction(self):
        snapshot = {
            k: (m.nome, m.telefone, m.endereco, m.ativo)
            for k, m in self.rows.items()
        }
        ids = set(self.rows)
        try:
            yield
            self.commits += 1
        except Exception:
            for k in set(self.rows) - ids:
                del self.rows[k]
            for k, (nome, telefone, endereco, ativo) in snapshot.items():
                m = self.rows[k]
                m.nome, m.telefone, m.endereco, m.ativo = nome, telefone, endereco, ativo
            self.rollbacks += 1
            raise


@pytest.fixture
def repository():
    return FakeMedicoRepository()


@pytest.fixture
def service(repository):
    return MedicoService(repository)
