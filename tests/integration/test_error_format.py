"""Integration tests for the ``{"message": ...}`` error body."""

import pytest

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_malformed_json_has_message_only(self, api_client):
        response = api_client.post(
            "/incluirProduto", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert list(data) == ["message"]
        assert data["message"]

    def test_method_not_allowed_has_message(self, api_client):
        response = api_client.get("/incluirProduto")
        assert response.status_code == 405
        assert list(response.json()) == ["message"]

    def test_unsupported_media_type_has_message(self, api_client):
        response = api_client.post(
            "/incluirProduto", data="descricao=x", content_type="text/plain"
        )
        assert response.status_code == 415
        assert list(response.json()) == ["message"]

    @pytest.mark.parametrize(
        "path",
        [
            "/produtos/abc",
            "/pedidos/1a",
            "/clientes/-1",
            "/itensDoPedido/abc",
            "/clientes/abc/pedidos",
            "/itensDoPedido/%C2%B2",
            "/produtos/%D9%A1",
            "/pedidos/99999999999999999999",
        ],
    )
    def test_non_numeric_identifier(self, api_client, path):
        response = api_client.get(path)
        assert response.status_code == 400
        assert response.json() == {"message": "ID deve ser um número"}

    def test_validation_error_names_the_field(self, api_client):
        response = api_client.post(
            "/incluirItemDoPedido",
            {"id_pedido": "x", "id_produto": 1, "quantidade": 1},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["message"].startswith("id_pedido")
