"""Customer DTOs for the Service Layer.

Data transfer objects using Pydantic v2.  CPF input is normalised
with ``Customer.sanitize_cpf``, the same rule the model applies on save.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer creation.
- ``UpdateCustomerDTO``: input for partial customer updates.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from modules.customers.models import Customer


def _digits(value: object) -> object:
    if not isinstance(value, str):
        return value
    return Customer.sanitize_cpf(value)


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    Validates:
    - ``nome`` is a non-empty string.
    - ``cpf`` is sanitised (non-digits stripped) and has 11 digits.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    nome: str
    sobrenome: str = ""
    cpf: str

    @field_validator("nome")
    @classmethod
    def nome_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Nome é obrigatório.")
        return v

    @field_validator("cpf", mode="before")
    @classmethod
    def sanitize_cpf(cls, v: object) -> object:
        """Strip non-digit characters (accept formatted or raw input)."""
        return _digits(v)

    @field_validator("cpf")
    @classmethod
    def cpf_must_have_eleven_digits(cls, v: str) -> str:
        if len(v) != 11:
            raise ValueError("CPF deve conter 11 dígitos.")
        return v


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer update requests.

    Omitted (or ``null``) fields keep their stored value.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    nome: Optional[str] = None
    sobrenome: Optional[str] = None
    cpf: Optional[str] = None

    @field_validator("nome")
    @classmethod
    def nome_must_not_be_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v:
            raise ValueError("Nome é obrigatório.")
        return v

    @field_validator("cpf", mode="before")
    @classmethod
    def sanitize_cpf(cls, v: object) -> object:
        return _digits(v)

    @field_validator("cpf")
    @classmethod
    def cpf_must_have_eleven_digits(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) != 11:
            raise ValueError("CPF deve conter 11 dígitos.")
        return v
