"""Django ORM implementation of the Customer repository.

Look-ups return ``None`` for a missing customer; turning that into a
404 is left to the service and view layers.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.db import transaction

from modules.customers.filters import CustomerFilter
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key, ``None`` if absent."""
        return Customer.objects.filter(id=id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Customer]:
        """List customers, narrowed by ``CustomerFilter`` query parameters.

        Examples of valid filters::

            {"cpf": "98765432100"}
            {"nome": "ana"}
        """
        queryset = Customer.objects.all()
        if filters:
            queryset = CustomerFilter(filters, queryset=queryset).qs
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer."""
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Remove a customer by ID.

        Raises ``django.db.models.ProtectedError`` when orders still
        reference the customer.
        """
        customer = self.get_by_id(id)
        if not customer:
            return False
        customer.delete()
        return True

    def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by CPF (digits only)."""
        return Customer.objects.filter(cpf=Customer.sanitize_cpf(cpf)).first()
