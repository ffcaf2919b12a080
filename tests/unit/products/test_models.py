"""Unit tests for the Product model."""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductModel:
    def test_price_is_optional(self):
        product = Product.objects.create(descricao="Brinde")
        product.refresh_from_db()
        assert product.preco is None

    def test_clean_rejects_negative_price(self):
        product = Product(descricao="X", preco=Decimal("-1.00"))
        with pytest.raises(ValidationError):
            product.full_clean()

    def test_database_rejects_negative_price(self):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Product.objects.create(descricao="X", preco=Decimal("-1.00"))

    def test_str(self):
        product = Product.objects.create(descricao="Mouse")
        assert str(product) == f"#{product.id} - Mouse"

    def test_table_name(self):
        assert Product._meta.db_table == "produtos"
