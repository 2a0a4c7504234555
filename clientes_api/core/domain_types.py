"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ClienteId wraps UUID: never use bare UUID in domain logic
    - PatchOperationType enumerates the only mutations a patch document may carry
    - PATCHABLE_FIELDS is the fixed schema a patch path must resolve against

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ClienteId = NewType("ClienteId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class PatchOperationType(str, Enum):
    """Patch operations accepted on a cliente. add/replace set, remove clears."""
    ADD = "add"
    REPLACE = "replace"
    REMOVE = "remove"


# ─── Field Schema ────────────────────────────────────────────────

PATCHABLE_FIELDS: tuple[str, ...] = (
    "nome", "email", "telefone", "endereco", "cidade",
)
