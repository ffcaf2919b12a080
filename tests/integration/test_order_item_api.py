"""Integration tests for order item (itensDoPedido) endpoints."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.orders.models import Order, OrderItem
from modules.products.models import Product

pytestmark = pytest.mark.integration


class TestOrderItemRetrieve:
    def test_non_numeric_id_returns_400(self, api_client):
        response = api_client.get("/itensDoPedido/abc")
        assert response.status_code == 400
        assert response.json() == {"message": "ID deve ser um número"}

    def test_unknown_id_returns_404(self, api_client):
        response = api_client.get("/itensDoPedido/999999")
        assert response.status_code == 404
        assert response.json() == {"message": "Item do Pedido não encontrado"}

    def test_returns_item_with_order_and_product(self, api_client, item, pedido, produto):
        response = api_client.get(f"/itensDoPedido/{item.id}")
        assert response.status_code == 200
        assert response.json() == {
            "id": item.id,
            "quantidade": 2,
            "pedido": {
                "id": pedido.id,
                "data": "2024-08-15",
                "clienteId": pedido.cliente_id,
            },
            "produto": {
                "id": produto.id,
                "descricao": "Teclado Mecânico",
                "preco": "150.00",
            },
        }

    def test_loads_relations_in_a_single_query(
        self, api_client, item, django_assert_max_num_queries
    ):
        with django_assert_max_num_queries(1):
            response = api_client.get(f"/itensDoPedido/{item.id}")
        assert response.status_code == 200

    def test_product_price_is_rendered_with_two_decimals(self, api_client, pedido):
        produto = Product.objects.create(descricao="Cabo", preco=Decimal("9.9"))
        item = OrderItem.objects.create(pedido=pedido, produto=produto, quantidade=1)
        response = api_client.get(f"/itensDoPedido/{item.id}")
        assert response.json()["produto"]["preco"] == "9.90"


class TestOrderItemList:
    def test_list_empty(self, api_client):
        response = api_client.get("/itensDoPedido")
        assert response.status_code == 200
        assert response.json() == {"itensDoPedido": []}

    def test_filter_by_order(self, api_client, item, produto):
        other_order = Order.objects.create(data=item.pedido.data)
        OrderItem.objects.create(pedido=other_order, produto=produto, quantidade=1)

        response = api_client.get("/itensDoPedido", {"id_pedido": item.pedido_id})

        itens = response.json()["itensDoPedido"]
        assert [i["id"] for i in itens] == [item.id]
        assert itens[0]["produto"]["descricao"] == "Teclado Mecânico"


class TestOrderItemCreate:
    def test_create_with_snake_case_keys(self, api_client, pedido, produto):
        response = api_client.post(
            "/incluirItemDoPedido",
            {"id_pedido": pedido.id, "id_produto": produto.id, "quantidade": 3},
            format="json",
        )
        assert response.status_code == 201
        body = response.json()
        assert body["id_pedido"] == pedido.id
        assert body["id_produto"] == produto.id
        assert body["quantidade"] == 3
        assert OrderItem.objects.filter(id=body["id"]).exists()

    def test_create_with_camel_case_keys(self, api_client, pedido, produto):
        response = api_client.post(
            "/incluirItemDoPedido",
            {"pedidoId": pedido.id, "produtoId": produto.id, "quantidade": 1},
            format="json",
        )
        assert response.status_code == 201

    @pytest.mark.parametrize("quantidade", [0, -2])
    def test_non_positive_quantity_returns_400(self, api_client, pedido, produto, quantidade):
        response = api_client.post(
            "/incluirItemDoPedido",
            {"id_pedido": pedido.id, "id_produto": produto.id, "quantidade": quantidade},
            format="json",
        )
        assert response.status_code == 400
        assert "Quantidade deve ser no mínimo 1." in response.json()["message"]
        assert OrderItem.objects.count() == 0

    @pytest.mark.parametrize(
        "field, value",
        [
            ("id_pedido", 10**30),
            ("id_produto", 2**63),
            ("id_pedido", 0),
            ("quantidade", 2**31),
        ],
    )
    def test_out_of_range_value_returns_400(self, api_client, pedido, produto, field, value):
        payload = {"id_pedido": pedido.id, "id_produto": produto.id, "quantidade": 1}
        payload[field] = value
        response = api_client.post("/incluirItemDoPedido", payload, format="json")
        assert response.status_code == 400
        assert response.json()["message"].startswith(field)
        assert OrderItem.objects.count() == 0

    def test_update_quantity_beyond_column_returns_400(self, api_client, item):
        response = api_client.put(
            f"/itensDoPedido/{item.id}", {"quantidade": 10**12}, format="json"
        )
        assert response.status_code == 400
        item.refresh_from_db()
        assert item.quantidade == 2

    def test_unknown_order_returns_404(self, api_client, produto):
        response = api_client.post(
            "/incluirItemDoPedido",
            {"id_pedido": 999999, "id_produto": produto.id, "quantidade": 1},
            format="json",
        )
        assert response.status_code == 404
        assert response.json() == {"message": "Pedido não encontrado"}

    def test_unknown_product_returns_404(self, api_client, pedido):
        response = api_client.post(
            "/incluirItemDoPedido",
            {"id_pedido": pedido.id, "id_produto": 999999, "quantidade": 1},
            format="json",
        )
        assert response.status_code == 404
        assert response.json() == {"message": "Produto não encontrado"}


class TestOrderItemUpdate:
    def test_update_quantity(self, api_client, item):
        response = api_client.put(
            f"/itensDoPedido/{item.id}", {"quantidade": 7}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["quantidade"] == 7
        item.refresh_from_db()
        assert item.quantidade == 7

    def test_update_not_found(self, api_client):
        response = api_client.put("/itensDoPedido/999999", {"quantidade": 1}, format="json")
        assert response.status_code == 404
        assert response.json() == {"message": "Item do Pedido não encontrado"}


class TestOrderItemDelete:
    def test_delete_item_then_product_becomes_removable(self, api_client, item):
        produto_id = item.produto_id

        response = api_client.delete(f"/itensDoPedido/{item.id}")
        assert response.status_code == 200
        assert response.json() == {"message": "Item do Pedido excluído com sucesso"}

        response = api_client.delete(f"/excluirProduto/{produto_id}")
        assert response.status_code == 200
        assert not Product.objects.filter(id=produto_id).exists()

    def test_delete_not_found(self, api_client):
        response = api_client.delete("/itensDoPedido/999999")
        assert response.status_code == 404
