"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - MedicoId wraps int: the database-generated primary key, at most MAX_MEDICO_ID
    - Especialidade is the closed set of accepted specialties
    - Sortable listing fields are encoded as an Enum: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MedicoId = NewType("MedicoId", int)

# Largest key a BIGINT column can hold
MAX_MEDICO_ID = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class Especialidade(str, Enum):
    """Medical specialties a doctor can be registered with."""
    ORTOPEDIA = "ORTOPEDIA"
    CARDIOLOGIA = "CARDIOLOGIA"
    GINECOLOGIA = "GINECOLOGIA"
    DERMATOLOGIA = "DERMATOLOGIA"


class SortField(str, Enum):
    """Columns the listing endpoint may be sorted by."""
    ID = "id"
    NOME = "nome"
    EMAIL = "email"
    CRM = "crm"
    ESPECIALIDADE = "especialidade"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
