"""Medico Schemas: Pydantic DTOs with field-level validation for /medicos.

Invariants:
    - Required text fields and telefone are stripped and must be non-blank
    - cep is exactly 8 ASCII digits
    - DadosAtualizacaoMedico.id is required and not null; every other field
      is optional (None = "no change")
    - An endereco inside an update is validated exactly like on registration
    - Listing projection never exposes telefone or endereco

Design Decisions:
    - field_validator for strip/non-blank: one place for the rule, reused per model
    - [0-9] over \\d in patterns: \\d also matches non-ASCII digits
    - from_attributes on output DTOs: built straight from Medico instances
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from medicos_api.core.domain_types import Especialidade

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


def _not_blank(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("must not be blank")
    return v


class DadosEndereco(BaseModel):
    """Address payload: required fields non-blank, optional complemento/numero."""
    logradouro: str = Field(max_length=100)
    bairro: str = Field(max_length=100)
    cep: str = Field(pattern=r"^[0-9]{8}$")
    cidade: str = Field(max_length=100)
    uf: str = Field(max_length=2)
    complemento: str | None = Field(None, max_length=100)
    numero: str | None = Field(None, max_length=20)

    @field_validator("logradouro", "bairro", "cidade", "uf", mode="before")
    @classmethod
    def strip_required(cls, v):
        return _not_blank(v) if isinstance(v, str) else v


class DadosCadastroMedico(BaseModel):
    """Registration payload."""
    nome: str = Field(max_length=100)
    email: str = Field(max_length=100, pattern=EMAIL_PATTERN)
    crm: str = Field(max_length=20)
    telefone: str | None = Field(None, max_length=20)
    especialidade: Especialidade
    endereco: DadosEndereco

    @field_validator("nome", "email", "crm", "telefone", mode="before")
    @classmethod
    def strip_required(cls, v):
        return _not_blank(v) if isinstance(v, str) else v


class DadosAtualizacaoMedico(BaseModel):
    """Partial update payload: id selects the doctor, the rest is optional."""
    id: int
    telefone: str | None = Field(None, max_length=20)
    nome: str | None = Field(None, max_length=100)
    endereco: DadosEndereco | None = None

    @field_validator("nome", "telefone", mode="before")
    @classmethod
    def strip_optional(cls, v):
        return _not_blank(v) if isinstance(v, str) else v


class DadosListagemMedico(BaseModel):
    """Listing projection: id, nome, email, crm, especialidade only."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    email: str
    crm: str
    especialidade: Especialidade


class DadosEnderecoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    logradouro: str
    bairro: str
    cep: str
    cidade: str
    uf: str
    complemento: str | None = None
    numero: str | None = None


class DadosDetalhamentoMedico(BaseModel):
    """Full view of a single doctor, active or not."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    email: str
    crm: str
    telefone: str | None = None
    especialidade: Especialidade
    endereco: DadosEnderecoResponse
    ativo: bool


class PaginaListagemMedico(BaseModel):
    """One page of the active-doctor listing plus pagination metadata."""
    content: list[DadosListagemMedico]
    total_elements: int
    total_pages: int
    number: int
    size: int
