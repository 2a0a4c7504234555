"""Boundary Protocols: contracts between the API layer and persistence.

Invariants:
    - Routes depend on ClienteRepository, never on AsyncSession directly
    - Staging methods (add/update/delete) have no storage side effect until save()
    - get_cliente returns None for unknown ids: "not found" is not an exception

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO
"""

from typing import Any, Protocol, Sequence, runtime_checkable

from clientes_api.core.domain_types import ClienteId


@runtime_checkable
class ClienteRepository(Protocol):
    """Contract for cliente persistence: implemented by repositories/."""
    def add_cliente(self, cliente: Any) -> None: ...
    async def get_clientes(self, params: Any) -> Sequence[Any]: ...
    async def get_cliente(self, cliente_id: ClienteId) -> Any | None: ...
    def update_cliente(self, cliente: Any) -> None: ...
    async def delete_cliente(self, cliente: Any) -> None: ...
    async def save(self) -> None: ...
