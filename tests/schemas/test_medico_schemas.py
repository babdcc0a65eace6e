"""Medico schemas: boundary validation for registration and update payloads.

Invariants:
    - Missing or blank required fields are rejected; telefone may be
      omitted but never blank
    - cep must be exactly 8 ASCII digits
    - Update requires id; all other fields optional
    - An endereco in an update is validated as a whole
"""

import pytest
from pydantic import ValidationError

from medicos_api.core.domain_types import Especialidade
from medicos_api.schemas.medico import (
    DadosAtualizacaoMedico,
    DadosCadastroMedico,
    DadosEndereco,
    DadosListagemMedico,
)
from tests.factories import make_cadastro_payload, make_endereco_payload, make_medico


# --- DadosCadastroMedico ------------------------------------------------------

def test_valid_registration_parses():
    dados = DadosCadastroMedico(**make_cadastro_payload())
    assert dados.nome == "Ana Silva"
    assert dados.especialidade == Especialidade.CARDIOLOGIA
    assert dados.telefone is None
    assert dados.endereco.complemento is None


@pytest.mark.parametrize("field", ["nome", "email", "crm", "especialidade", "endereco"])
def test_missing_required_field_rejected(field):
    payload = make_cadastro_payload()
    del payload[field]
    with pytest.raises(ValidationError):
        DadosCadastroMedico(**payload)


@pytest.mark.parametrize("field", ["nome", "email", "crm", "telefone"])
def test_blank_required_field_rejected(field):
    with pytest.raises(ValidationError):
        DadosCadastroMedico(**make_cadastro_payload(**{field: "   "}))


def test_required_fields_are_stripped():
    dados = DadosCadastroMedico(**make_cadastro_payload(nome="  Ana Silva  "))
    assert dados.nome == "Ana Silva"


def test_unknown_especialidade_rejected():
    with pytest.raises(ValidationError):
        DadosCadastroMedico(**make_cadastro_payload(especialidade="PEDIATRIA"))


def test_malformed_email_rejected():
    with pytest.raises(ValidationError):
        DadosCadastroMedico(**make_cadastro_payload(email="not-an-email"))


# --- DadosEndereco ------------------------------------------------------------

@pytest.mark.parametrize("field", ["logradouro", "bairro", "cep", "cidade", "uf"])
def test_missing_address_field_rejected(field):
    payload = make_endereco_payload()
    del payload[field]
    with pytest.raises(ValidationError):
        DadosEndereco(**payload)


@pytest.mark.parametrize("field", ["logradouro", "bairro", "cidade", "uf"])
def test_blank_address_field_rejected(field):
    with pytest.raises(ValidationError):
        DadosEndereco(**make_endereco_payload(**{field: ""}))


@pytest.mark.parametrize("cep", ["1234567", "123456789", "12345-678", "abcdefgh", "١٢٣٤٥٦٧٨"])
def test_invalid_cep_rejected(cep):
    with pytest.raises(ValidationError):
        DadosEndereco(**make_endereco_payload(cep=cep))


def test_optional_address_fields_accepted():
    endereco = DadosEndereco(**make_endereco_payload(complemento="Sala 2", numero="10"))
    assert endereco.complemento == "Sala 2"
    assert endereco.numero == "10"


# --- DadosAtualizacaoMedico ---------------------------------------------------

def test_update_requires_id():
    with pytest.raises(ValidationError):
        DadosAtualizacaoMedico(nome="Novo Nome")


def test_update_rejects_null_id():
    with pytest.raises(ValidationError):
        DadosAtualizacaoMedico(id=None, nome="Novo Nome")


def test_update_with_only_id_is_valid():
    dados = DadosAtualizacaoMedico(id=1)
    assert dados.nome is None
    assert dados.telefone is None
    assert dados.endereco is None


def test_update_rejects_blank_nome():
    with pytest.raises(ValidationError):
        DadosAtualizacaoMedico(id=1, nome="  ")


def test_update_rejects_blank_telefone():
    with pytest.raises(ValidationError):
        DadosAtualizacaoMedico(id=1, telefone="   ")


def test_update_strips_telefone():
    assert DadosAtualizacaoMedico(id=1, telefone=" 1199 ").telefone == "1199"


def test_update_rejects_partial_address():
    with pytest.raises(ValidationError):
        DadosAtualizacaoMedico(id=1, endereco={"logradouro": "Rua B"})


# --- DadosListagemMedico ------------------------------------------------------

def test_listing_projection_excludes_private_fields():
    medico = make_medico(id=3)
    view = DadosListagemMedico.model_validate(medico)
    assert view.model_dump() == {
        "id": 3,
        "nome": "Ana Silva",
        "email": "ana@x.com",
        "crm": "12345",
        "especialidade": Especialidade.CARDIOLOGIA,
    }
