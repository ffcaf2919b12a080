"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Exclusive bound: larger inputs round past DecimalField(max_digits=10, decimal_places=2).
PRECO_LIMIT = Decimal("99999999.995")


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``descricao`` is a non-empty string.
    - ``preco`` is optional and non-negative (RN-PRO-001).
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    descricao: str
    preco: Optional[Decimal] = Field(default=None, lt=PRECO_LIMIT)

    @field_validator("descricao")
    @classmethod
    def descricao_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Descrição é obrigatória.")
        return v

    @field_validator("preco")
    @classmethod
    def preco_must_not_be_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is not None and v < 0:
            raise ValueError("Preço não pode ser negativo.")
        return v


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Omitted (or ``null``) fields keep their stored value.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    descricao: Optional[str] = None
    preco: Optional[Decimal] = Field(default=None, lt=PRECO_LIMIT)

    @field_validator("descricao")
    @classmethod
    def descricao_must_not_be_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v:
            raise ValueError("Descrição é obrigatória.")
        return v

    @field_validator("preco")
    @classmethod
    def preco_must_not_be_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is not None and v < 0:
            raise ValueError("Preço não pode ser negativo.")
        return v
