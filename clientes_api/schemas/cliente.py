"""Cliente Schemas: Pydantic DTOs with field-level validation for API boundaries.

Invariants:
    - ClienteCreate / ClienteUpdate: nome required, 1-100 chars, stripped, non-empty
    - Contact fields are optional and length-bounded only
    - ClienteResponse is built from ORM attributes (from_attributes)
    - PatchOperation paths name a single top-level field ("/nome")

Design Decisions:
    - Constraints live on the DTOs, never in the mapper or repository
    - ClienteUpdate mirrors ClienteCreate: it is the intermediate a patch is applied to,
      then re-validated as a whole
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from clientes_api.core.domain_types import PatchOperationType

NOME_MAX_LENGTH = 100


class ClienteBase(BaseModel):
    """Fields shared by creation and update DTOs."""
    nome: str = Field(min_length=1, max_length=NOME_MAX_LENGTH)
    email: str | None = Field(None, max_length=150)
    telefone: str | None = Field(None, max_length=20)
    endereco: str | None = Field(None, max_length=200)
    cidade: str | None = Field(None, max_length=100)

    @field_validator("nome")
    @classmethod
    def strip_nome(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("nome cannot be empty or whitespace")
        return v


class ClienteCreate(ClienteBase):
    """Cliente creation payload."""


class ClienteUpdate(ClienteBase):
    """Full updatable shape of a cliente: target of patch documents."""
    model_config = ConfigDict(from_attributes=True)


class ClienteResponse(BaseModel):
    """Cliente response: public-facing representation."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    nome: str
    email: str | None = None
    telefone: str | None = None
    endereco: str | None = None
    cidade: str | None = None
    created_at: datetime | None = None


# --- Patch documents -----------------------------------------------------------

class PatchOperation(BaseModel):
    """One entry of a patch document: {"op": ..., "path": "/field", "value": ...}."""
    op: PatchOperationType
    path: str = Field(pattern=r"^/")
    value: Any = None

    @model_validator(mode="after")
    def validate_value_present(self):
        if self.op != PatchOperationType.REMOVE and "value" not in self.model_fields_set:
            raise ValueError(f"'{self.op.value}' operation requires a value")
        return self


# --- Query parameters ------------------------------------------------------------

class ClientesResourceParameters(BaseModel):
    """Filter and paging parameters for listing clientes."""
    nome: str | None = Field(None, max_length=NOME_MAX_LENGTH)
    page_number: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)

    @field_validator("nome")
    @classmethod
    def blank_nome_means_no_filter(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size
