from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


class TestProductSerializer:
    def test_price_rendered_as_string(self, produto):
        assert ProductSerializer(produto).data == {
            "id": produto.id,
            "descricao": "Teclado Mecânico",
            "preco": "150.00",
        }

    def test_missing_price_rendered_as_null(self):
        product = Product.objects.create(descricao="Brinde")
        assert ProductSerializer(product).data["preco"] is None

    def test_price_is_quantised(self):
        product = Product(id=5, descricao="Cabo", preco=Decimal("9.9"))
        assert ProductSerializer(product).data["preco"] == "9.90"
