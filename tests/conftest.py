from datetime import date
from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.customers.models import Customer
from modules.orders.models import Order, OrderItem
from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def cliente():
    """A persisted customer."""
    return Customer.objects.create(nome="Maria", sobrenome="Silva", cpf="52998224725")


@pytest.fixture()
def produto():
    """A persisted product with a price."""
    return Product.objects.create(descricao="Teclado Mecânico", preco=Decimal("150.00"))


@pytest.fixture()
def pedido(cliente):
    """A persisted order owned by ``cliente``."""
    return Order.objects.create(data=date(2024, 8, 15), cliente=cliente)


@pytest.fixture()
def item(pedido, produto):
    """A persisted order item linking ``pedido`` and ``produto``."""
    return OrderItem.objects.create(pedido=pedido, produto=produto, quantidade=2)
