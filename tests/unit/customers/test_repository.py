"""Unit tests for CustomerDjangoRepository."""

from __future__ import annotations

from datetime import date

import pytest
from django.db.models import ProtectedError

from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.repositories.interfaces import ICustomerRepository
from modules.orders.models import Order

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo() -> CustomerDjangoRepository:
    return CustomerDjangoRepository()


class TestCustomerRepository:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, ICustomerRepository)

    def test_get_by_id_returns_none_when_absent(self, repo):
        assert repo.get_by_id(999999) is None

    def test_get_by_id(self, repo, cliente):
        assert repo.get_by_id(cliente.id) == cliente

    def test_save_sanitises_cpf(self, repo):
        customer = repo.save(Customer(nome="Ana", cpf="111.444.777-35"))
        customer.refresh_from_db()
        assert customer.cpf == "11144477735"

    def test_get_by_cpf_accepts_formatted_input(self, repo, cliente):
        assert repo.get_by_cpf("529.982.247-25") == cliente

    def test_list_without_filters(self, repo, cliente):
        assert repo.list() == [cliente]

    def test_list_with_filters(self, repo, cliente):
        Customer.objects.create(nome="João", sobrenome="Souza", cpf="11144477735")
        assert repo.list({"sobrenome": "silv"}) == [cliente]

    def test_delete(self, repo, cliente):
        assert repo.delete(cliente.id) is True
        assert not Customer.objects.filter(id=cliente.id).exists()

    def test_delete_absent_returns_false(self, repo):
        assert repo.delete(999999) is False

    def test_delete_with_orders_raises_protected_error(self, repo, cliente):
        Order.objects.create(data=date(2024, 1, 1), cliente=cliente)
        with pytest.raises(ProtectedError):
            repo.delete(cliente.id)
