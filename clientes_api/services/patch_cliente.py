"""Patch Cliente: builds the validated update DTO for a PATCH request.

Invariants:
    - The entity is never touched here; only its update-shaped copy is patched
    - Patch path errors and schema errors are reported together in one
      PatchValidationError (422)
"""

from typing import Sequence

from pydantic import ValidationError

from clientes_api.core.apply_patch import apply_patch
from clientes_api.core.errors import (
    ErrorContext, PatchValidationError, format_validation_errors,
)
from clientes_api.models.cliente import Cliente
from clientes_api.schemas.cliente import ClienteUpdate, PatchOperation
from clientes_api.services import cliente_mapper


def build_patched_update(
    cliente: Cliente, operations: Sequence[PatchOperation],
) -> ClienteUpdate:
    """Apply operations to the cliente's update DTO and re-validate the result."""
    document = cliente_mapper.to_update(cliente).model_dump()
    patched, errors = apply_patch(document, operations)

    update: ClienteUpdate | None = None
    try:
        update = ClienteUpdate.model_validate(patched)
    except ValidationError as e:
        errors.extend(format_validation_errors(e.errors()))

    if errors or update is None:
        raise PatchValidationError(
            errors,
            ErrorContext(operation="update_cliente", cliente_id=str(cliente.id)),
        )
    return update
