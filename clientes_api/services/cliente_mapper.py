"""Cliente Mapper: field-by-field projections between the ORM entity and its DTOs.

Invariants:
    - Stateless and side-effect free, except apply_update which writes onto the
      entity it is given
    - No validation here: DTOs are validated before they reach the mapper
    - id and created_at are never written from a DTO
"""

from typing import Iterable

from clientes_api.models.cliente import Cliente
from clientes_api.schemas.cliente import (
    ClienteCreate, ClienteResponse, ClienteUpdate,
)


def to_entity(dto: ClienteCreate) -> Cliente:
    """Creation DTO -> new (untracked, id-less) entity."""
    return Cliente(**dto.model_dump())


def to_response(entity: Cliente) -> ClienteResponse:
    return ClienteResponse.model_validate(entity)


def to_responses(entities: Iterable[Cliente]) -> list[ClienteResponse]:
    return [to_response(e) for e in entities]


def to_update(entity: Cliente) -> ClienteUpdate:
    """Entity -> update DTO, the intermediate a patch document is applied to."""
    return ClienteUpdate.model_validate(entity)


def apply_update(dto: ClienteUpdate, entity: Cliente) -> Cliente:
    """Copy every update field onto entity in place. Returns the same entity."""
    for field_name, value in dto.model_dump().items():
        setattr(entity, field_name, value)
    return entity
