"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- RN-CLI-001: CPF must be unique.
- RN-CLI-003: Customers referenced by orders are not removed; the
  database ``PROTECT`` constraint is translated into ``CustomerHasOrders``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.conf import settings
from django.db import transaction
from django.db.models import ProtectedError
from validate_docbr import CPF

from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerHasOrders,
    CustomerNotFound,
    InvalidCpf,
)
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    def _check_cpf(self, cpf: str) -> None:
        if getattr(settings, "CPF_STRICT_VALIDATION", False) and not CPF().validate(cpf):
            logger.warning("customer.invalid_cpf", cpf_suffix=cpf[-4:])
            raise InvalidCpf("CPF inválido")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer after enforcing uniqueness rules.

        Raises:
            InvalidCpf: if strict validation is on and the checksum fails.
            CustomerAlreadyExists: if the CPF is already taken (RN-CLI-001).
        """
        self._check_cpf(dto.cpf)

        if self._repo.get_by_cpf(dto.cpf):
            logger.warning("customer.duplicate_cpf")
            raise CustomerAlreadyExists("CPF já cadastrado")

        customer = Customer(nome=dto.nome, sobrenome=dto.sobrenome, cpf=dto.cpf)
        customer = self._repo.save(customer)
        logger.info("customer.created", customer_id=customer.id)
        return customer

    @transaction.atomic
    def update_customer(self, id: int, dto: UpdateCustomerDTO) -> Customer:
        """Update an existing customer with the supplied fields.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if the new CPF belongs to another customer.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound("Cliente não encontrado")

        if dto.cpf is not None and dto.cpf != customer.cpf:
            self._check_cpf(dto.cpf)
            other = self._repo.get_by_cpf(dto.cpf)
            if other and other.id != customer.id:
                logger.warning("customer.duplicate_cpf", customer_id=id)
                raise CustomerAlreadyExists("CPF já cadastrado")

        for field in ("nome", "sobrenome", "cpf"):
            value = getattr(dto, field)
            if value is not None:
                setattr(customer, field, value)

        customer = self._repo.save(customer)
        logger.info("customer.updated", customer_id=id)
        return customer

    @transaction.atomic
    def delete_customer(self, id: int) -> None:
        """Remove a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerHasOrders: if orders still reference the customer.
        """
        if not self._repo.get_by_id(id):
            raise CustomerNotFound("Cliente não encontrado")
        try:
            self._repo.delete(id)
        except ProtectedError as exc:
            logger.warning("customer.delete_blocked", customer_id=id)
            raise CustomerHasOrders(
                "Cliente não pode ser removido devido a pedidos associados"
            ) from exc
        logger.info("customer.deleted", customer_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self, filters: Optional[Dict[str, Any]] = None) -> List[Customer]:
        """Return all customers, optionally filtered."""
        return self._repo.list(filters)

    def get_customer(self, id: int) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound("Cliente não encontrado")
        return customer
