"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

Reference fields accept both spellings found in client payloads:
``id_cliente`` / ``clienteId``, ``id_pedido`` / ``pedidoId`` and
``id_produto`` / ``produtoId``.

- ``CreateOrderDTO``: input for order creation.
- ``UpdateOrderDTO``: input for partial order updates.
- ``CreateOrderItemDTO``: input for order item creation.
- ``UpdateOrderItemDTO``: input for order item updates.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_validator,
)

from modules.core.identifiers import MAX_ID

# Upper bound of a PositiveIntegerField on every supported backend.
MAX_QUANTIDADE = 2**31 - 1


def _date_part(value: object) -> object:
    """Accept full ISO timestamps (``2024-08-15T10:00:00.000Z``) as dates."""
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    return value


OrderDate = Annotated[date, BeforeValidator(_date_part)]


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    The customer reference is not checked for existence (RN-PED-001).
    """

    model_config = ConfigDict(frozen=True)

    data: OrderDate
    id_cliente: Optional[int] = Field(
        default=None,
        ge=1,
        le=MAX_ID,
        validation_alias=AliasChoices("id_cliente", "clienteId"),
    )


class UpdateOrderDTO(BaseModel):
    """Immutable DTO for order update requests.

    Only supplied fields are written; ``model_fields_set`` tells an
    explicit ``"id_cliente": null`` apart from an omitted key.
    """

    model_config = ConfigDict(frozen=True)

    data: Optional[OrderDate] = None
    id_cliente: Optional[int] = Field(
        default=None,
        ge=1,
        le=MAX_ID,
        validation_alias=AliasChoices("id_cliente", "clienteId"),
    )


# ---------------------------------------------------------------------------
# Order items
# ---------------------------------------------------------------------------


class CreateOrderItemDTO(BaseModel):
    """Immutable DTO for a single order item creation request."""

    model_config = ConfigDict(frozen=True)

    id_pedido: int = Field(
        ge=1, le=MAX_ID, validation_alias=AliasChoices("id_pedido", "pedidoId")
    )
    id_produto: int = Field(
        ge=1, le=MAX_ID, validation_alias=AliasChoices("id_produto", "produtoId")
    )
    quantidade: int = Field(le=MAX_QUANTIDADE)

    @field_validator("quantidade")
    @classmethod
    def quantidade_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantidade deve ser no mínimo 1.")
        return v


class UpdateOrderItemDTO(BaseModel):
    """Immutable DTO for order item updates (quantity only)."""

    model_config = ConfigDict(frozen=True)

    quantidade: int = Field(le=MAX_QUANTIDADE)

    @field_validator("quantidade")
    @classmethod
    def quantidade_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantidade deve ser no mínimo 1.")
        return v
