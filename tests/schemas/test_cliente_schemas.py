"""Cliente Schemas: field constraints on DTOs, patch operations and query params."""

import pytest
from pydantic import ValidationError

from clientes_api.core.domain_types import PatchOperationType
from clientes_api.schemas.cliente import (
    ClienteCreate,
    ClientesResourceParameters,
    ClienteUpdate,
    PatchOperation,
)


# --- ClienteCreate / ClienteUpdate ---------------------------------------------

def test_create_requires_nome():
    with pytest.raises(ValidationError):
        ClienteCreate()


def test_create_strips_nome():
    assert ClienteCreate(nome="  Ana  ").nome == "Ana"


def test_create_rejects_whitespace_nome():
    with pytest.raises(ValidationError):
        ClienteCreate(nome="   ")


def test_create_rejects_oversized_nome():
    with pytest.raises(ValidationError):
        ClienteCreate(nome="a" * 101)


def test_contact_fields_default_to_none():
    dto = ClienteCreate(nome="Ana")
    assert dto.email is None
    assert dto.telefone is None
    assert dto.endereco is None
    assert dto.cidade is None


def test_update_rejects_null_nome():
    with pytest.raises(ValidationError):
        ClienteUpdate(nome=None)


# --- PatchOperation --------------------------------------------------------------

def test_replace_requires_value():
    with pytest.raises(ValidationError):
        PatchOperation(op="replace", path="/nome")


def test_replace_accepts_explicit_null():
    op = PatchOperation(op="replace", path="/email", value=None)
    assert op.value is None


def test_remove_needs_no_value():
    op = PatchOperation(op="remove", path="/email")
    assert op.op == PatchOperationType.REMOVE


@pytest.mark.parametrize("path", ["nome", "", "endereco/rua"])
def test_path_must_start_with_slash(path):
    with pytest.raises(ValidationError):
        PatchOperation(op="replace", path=path, value="x")


@pytest.mark.parametrize("path", ["/", "/endereco/rua", "/nome completo"])
def test_unresolvable_paths_are_left_to_patch_application(path):
    op = PatchOperation(op="replace", path=path, value="x")
    assert op.path == path


def test_unknown_op_rejected():
    with pytest.raises(ValidationError):
        PatchOperation(op="copy", path="/nome", value="x")


# --- ClientesResourceParameters --------------------------------------------------

def test_resource_parameters_defaults():
    params = ClientesResourceParameters()
    assert params.nome is None
    assert params.page_number == 1
    assert params.page_size == 10
    assert params.offset == 0


def test_resource_parameters_offset():
    params = ClientesResourceParameters(page_number=3, page_size=5)
    assert params.offset == 10


def test_blank_nome_filter_becomes_none():
    assert ClientesResourceParameters(nome="  ").nome is None
    assert ClientesResourceParameters(nome=" Ana ").nome == "Ana"


def test_page_number_must_be_positive():
    with pytest.raises(ValidationError):
        ClientesResourceParameters(page_number=0)
