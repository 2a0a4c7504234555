"""Error Hierarchy: envelope shape and 5xx opacity.

Tests cover:
    - caller errors expose code, message and category
    - server errors collapse to the generic INTERNAL_ERROR body
    - PatchValidationError carries field details
    - format_validation_errors flattens Pydantic locations
"""

from clientes_api.core.errors import (
    GENERIC_ERROR_MESSAGE,
    ErrorCategory,
    InternalServerError,
    PatchValidationError,
    PersistenceError,
    ResourceNotFoundError,
    format_validation_errors,
)


def test_not_found_response():
    exc = ResourceNotFoundError("Cliente", "abc")
    body = exc.to_response()["error"]
    assert exc.http_status == 404
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Cliente 'abc' not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value


def test_persistence_error_is_opaque_500():
    exc = PersistenceError("password authentication failed", "commit")
    body = exc.to_response()["error"]
    assert exc.http_status == 500
    assert exc.is_server_error
    assert body["code"] == "INTERNAL_ERROR"
    assert body["message"] == GENERIC_ERROR_MESSAGE
    assert "password" not in str(body)


def test_internal_server_error_records_operation():
    exc = InternalServerError("create_cliente")
    assert exc.context.operation == "create_cliente"
    assert exc.to_response()["error"]["message"] == GENERIC_ERROR_MESSAGE


def test_patch_validation_error_includes_details():
    details = [{"field": "nome", "message": "required", "type": "missing"}]
    exc = PatchValidationError(details)
    body = exc.to_response()["error"]
    assert exc.http_status == 422
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"] == details


def test_format_validation_errors_joins_location():
    errors = [
        {"loc": ("body", "nome"), "msg": "Field required", "type": "missing"},
        {"loc": ("query", "page_number"), "msg": "too small", "type": "greater_than_equal"},
    ]
    assert format_validation_errors(errors) == [
        {"field": "body.nome", "message": "Field required", "type": "missing"},
        {"field": "query.page_number", "message": "too small", "type": "greater_than_equal"},
    ]
