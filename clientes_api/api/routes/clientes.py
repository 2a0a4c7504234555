"""Clientes: CRUD endpoints for the cliente resource.

Invariants:
    - Input shape validated by Pydantic before the handler runs (400 on failure)
    - Every handler body runs inside handler_boundary: unexpected failures → opaque 500
    - Unknown ids → ResourceNotFoundError (404), never 500
    - PATCH validates the patched representation before touching the entity (422)
    - Storage is authoritative: nothing is cached between requests

Design Decisions:
    - Repository injected per request (Depends): routes never see AsyncSession
    - HEAD shares the GET list handler
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status

from clientes_api.api.dependencies import get_cliente_repository
from clientes_api.api.handler_boundary import handler_boundary
from clientes_api.config import Settings, get_settings
from clientes_api.core.domain_types import ClienteId
from clientes_api.core.errors import ResourceNotFoundError
from clientes_api.core.repository_protocols import ClienteRepository
from clientes_api.schemas.cliente import (
    NOME_MAX_LENGTH,
    ClienteCreate,
    ClienteResponse,
    ClientesResourceParameters,
    PatchOperation,
)
from clientes_api.services import cliente_mapper
from clientes_api.services.patch_cliente import build_patched_update

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/clientes", tags=["clientes"])


async def _get_cliente_or_404(
    repository: ClienteRepository, cliente_id: UUID,
):
    cliente = await repository.get_cliente(ClienteId(cliente_id))
    if cliente is None:
        raise ResourceNotFoundError("Cliente", str(cliente_id))
    return cliente


@router.post(
    "", response_model=ClienteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_cliente(
    body: ClienteCreate,
    request: Request,
    response: Response,
    repository: ClienteRepository = Depends(get_cliente_repository),
):
    """Register a new cliente."""
    with handler_boundary("create_cliente", cliente=body.model_dump()):
        cliente = cliente_mapper.to_entity(body)
        repository.add_cliente(cliente)
        await repository.save()

        created = cliente_mapper.to_response(cliente)
        response.headers["Location"] = str(
            request.url_for("get_cliente", cliente_id=str(created.id)),
        )
        logger.info(
            f"Cliente {created.id} created",
            extra={"operation": "create_cliente", "cliente_id": str(created.id)},
        )
        return created


@router.api_route(
    "", methods=["GET", "HEAD"], response_model=list[ClienteResponse],
)
async def get_clientes(
    nome: str | None = Query(None, max_length=NOME_MAX_LENGTH),
    page_number: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    repository: ClienteRepository = Depends(get_cliente_repository),
    settings: Settings = Depends(get_settings),
):
    """List clientes, optionally filtered by partial name. Oversized pages are clamped."""
    params = ClientesResourceParameters(
        nome=nome,
        page_number=page_number,
        page_size=min(
            page_size or settings.default_page_size, settings.max_page_size,
        ),
    )
    with handler_boundary("get_clientes", parameters=params.model_dump()):
        clientes = await repository.get_clientes(params)
        return cliente_mapper.to_responses(clientes)


@router.get(
    "/{cliente_id}", response_model=ClienteResponse, name="get_cliente",
)
async def get_cliente(
    cliente_id: UUID,
    repository: ClienteRepository = Depends(get_cliente_repository),
):
    """Get a single cliente by id."""
    with handler_boundary("get_cliente", cliente_id=cliente_id):
        cliente = await _get_cliente_or_404(repository, cliente_id)
        return cliente_mapper.to_response(cliente)


@router.delete(
    "/{cliente_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_cliente(
    cliente_id: UUID,
    repository: ClienteRepository = Depends(get_cliente_repository),
):
    """Delete a cliente."""
    with handler_boundary("delete_cliente", cliente_id=cliente_id):
        cliente = await _get_cliente_or_404(repository, cliente_id)
        await repository.delete_cliente(cliente)
        await repository.save()
        logger.info(
            f"Cliente {cliente_id} deleted",
            extra={"operation": "delete_cliente", "cliente_id": str(cliente_id)},
        )
        return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{cliente_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def update_cliente(
    cliente_id: UUID,
    operations: list[PatchOperation],
    repository: ClienteRepository = Depends(get_cliente_repository),
):
    """Partially update a cliente with an ordered list of patch operations."""
    with handler_boundary(
        "update_cliente", cliente_id=cliente_id,
        operations=[o.model_dump(mode="json") for o in operations],
    ):
        cliente = await _get_cliente_or_404(repository, cliente_id)
        update = build_patched_update(cliente, operations)

        cliente_mapper.apply_update(update, cliente)
        repository.update_cliente(cliente)
        await repository.save()
        return Response(status_code=status.HTTP_204_NO_CONTENT)
