"""Patch Application: applies an ordered list of field operations to a flat document.

Invariants:
    - PURE: no IO, no DB, input document is never mutated (a copy is returned)
    - Operations apply in order; later operations see earlier results
    - add/replace set the field, remove clears it to None
    - A path that is not "/" plus a PATCHABLE_FIELDS name (nested paths included)
      is reported as an error entry, never raised, and the operation is skipped

Design Decisions:
    - Return (document, errors) instead of raising: the caller merges patch errors
      with schema validation errors into a single 422 response
    - Structural PatchOperationLike: core never imports the Pydantic schemas
"""

from typing import Any, Protocol, Sequence

from clientes_api.core.domain_types import PATCHABLE_FIELDS, PatchOperationType


class PatchOperationLike(Protocol):
    op: PatchOperationType
    path: str
    value: Any


def apply_patch(
    document: dict[str, Any], operations: Sequence[PatchOperationLike],
) -> tuple[dict[str, Any], list[dict]]:
    """Apply operations to a copy of document. Returns (patched, errors)."""
    patched = dict(document)
    errors: list[dict] = []
    for operation in operations:
        field_name = operation.path[1:]
        if field_name not in PATCHABLE_FIELDS:
            errors.append(_path_not_found(operation.path))
            continue
        if operation.op == PatchOperationType.REMOVE:
            patched[field_name] = None
        else:
            patched[field_name] = operation.value
    return patched, errors


def _path_not_found(path: str) -> dict:
    return {
        "field": path,
        "message": f"The target location specified by path '{path}' was not found",
        "type": "patch_path_not_found",
    }
