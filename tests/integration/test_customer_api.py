"""Integration tests for Customer API endpoints.

Covers:
- CRUD operations via /clientes and /incluirCliente.
- CPF uniqueness (409) and strict checksum validation.
- Orders of a customer via /clientes/{id}/pedidos.
- Deletion blocked while orders reference the customer.
"""

from __future__ import annotations

from datetime import date

import pytest

from modules.customers.models import Customer
from modules.orders.models import Order

pytestmark = pytest.mark.integration


# ===========================================================================
# LIST / RETRIEVE
# ===========================================================================


class TestCustomerList:
    def test_list_empty(self, api_client):
        response = api_client.get("/clientes")
        assert response.status_code == 200
        assert response.json() == {"clientes": []}

    def test_list_returns_public_fields(self, api_client, cliente):
        response = api_client.get("/clientes")
        assert response.json()["clientes"] == [
            {
                "id": cliente.id,
                "nome": "Maria",
                "sobrenome": "Silva",
                "cpf": "52998224725",
            }
        ]

    def test_filter_by_nome(self, api_client, cliente):
        Customer.objects.create(nome="João", sobrenome="Souza", cpf="11144477735")
        response = api_client.get("/clientes", {"nome": "mar"})
        assert [c["id"] for c in response.json()["clientes"]] == [cliente.id]

    def test_filter_by_cpf(self, api_client, cliente):
        other = Customer.objects.create(nome="João", cpf="11144477735")
        response = api_client.get("/clientes", {"cpf": "11144477735"})
        assert [c["id"] for c in response.json()["clientes"]] == [other.id]


class TestCustomerRetrieve:
    def test_retrieve_existing(self, api_client, cliente):
        response = api_client.get(f"/clientes/{cliente.id}")
        assert response.status_code == 200
        assert response.json()["nome"] == "Maria"

    def test_retrieve_not_found(self, api_client):
        response = api_client.get("/clientes/999999")
        assert response.status_code == 404
        assert response.json() == {"message": "Cliente não encontrado"}

    def test_retrieve_non_numeric_id(self, api_client):
        response = api_client.get("/clientes/abc")
        assert response.status_code == 400
        assert response.json() == {"message": "ID deve ser um número"}


# ===========================================================================
# CREATE
# ===========================================================================


class TestCustomerCreate:
    def test_create_sanitises_cpf(self, api_client):
        response = api_client.post(
            "/incluirCliente",
            {"nome": "João", "sobrenome": "Souza", "cpf": "111.444.777-35"},
            format="json",
        )
        assert response.status_code == 201
        body = response.json()
        assert body["cpf"] == "11144477735"
        assert Customer.objects.get(id=body["id"]).cpf == "11144477735"

    def test_create_duplicate_cpf_returns_409(self, api_client, cliente):
        response = api_client.post(
            "/incluirCliente",
            {"nome": "Outra", "cpf": "529.982.247-25"},
            format="json",
        )
        assert response.status_code == 409
        assert response.json() == {"message": "CPF já cadastrado"}
        assert Customer.objects.count() == 1

    def test_create_missing_nome_returns_400(self, api_client):
        response = api_client.post("/incluirCliente", {"cpf": "11144477735"}, format="json")
        assert response.status_code == 400
        assert "nome" in response.json()["message"]

    def test_create_short_cpf_returns_400(self, api_client):
        response = api_client.post(
            "/incluirCliente", {"nome": "João", "cpf": "123"}, format="json"
        )
        assert response.status_code == 400
        assert "CPF deve conter 11 dígitos." in response.json()["message"]

    def test_strict_mode_rejects_invalid_checksum(self, api_client, settings):
        settings.CPF_STRICT_VALIDATION = True
        response = api_client.post(
            "/incluirCliente", {"nome": "João", "cpf": "12345678900"}, format="json"
        )
        assert response.status_code == 400
        assert response.json() == {"message": "CPF inválido"}

    def test_strict_mode_accepts_valid_checksum(self, api_client, settings):
        settings.CPF_STRICT_VALIDATION = True
        response = api_client.post(
            "/incluirCliente", {"nome": "João", "cpf": "12345678909"}, format="json"
        )
        assert response.status_code == 201

    def test_lenient_mode_accepts_invalid_checksum(self, api_client):
        response = api_client.post(
            "/incluirCliente", {"nome": "João", "cpf": "12345678900"}, format="json"
        )
        assert response.status_code == 201


# ===========================================================================
# UPDATE
# ===========================================================================


class TestCustomerUpdate:
    def test_partial_update(self, api_client, cliente):
        response = api_client.put(
            f"/clientes/{cliente.id}", {"sobrenome": "Oliveira"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["sobrenome"] == "Oliveira"
        cliente.refresh_from_db()
        assert cliente.nome == "Maria"
        assert cliente.cpf == "52998224725"

    def test_update_to_taken_cpf_returns_409(self, api_client, cliente):
        other = Customer.objects.create(nome="João", cpf="11144477735")
        response = api_client.put(
            f"/clientes/{other.id}", {"cpf": "52998224725"}, format="json"
        )
        assert response.status_code == 409
        assert response.json() == {"message": "CPF já cadastrado"}

    def test_update_not_found(self, api_client):
        response = api_client.put("/clientes/999999", {"nome": "X"}, format="json")
        assert response.status_code == 404
        assert response.json() == {"message": "Cliente não encontrado"}


# ===========================================================================
# DELETE
# ===========================================================================


class TestCustomerDelete:
    def test_delete_without_orders(self, api_client, cliente):
        response = api_client.delete(f"/clientes/{cliente.id}")
        assert response.status_code == 200
        assert response.json() == {"message": "Cliente excluído com sucesso"}
        assert not Customer.objects.filter(id=cliente.id).exists()

    def test_delete_with_orders_is_refused(self, api_client, pedido):
        cliente_id = pedido.cliente_id
        response = api_client.delete(f"/clientes/{cliente_id}")
        assert response.status_code == 400
        assert response.json() == {
            "message": "Cliente não pode ser removido devido a pedidos associados"
        }
        assert Customer.objects.filter(id=cliente_id).exists()
        assert Order.objects.filter(id=pedido.id).exists()

    def test_delete_not_found(self, api_client):
        response = api_client.delete("/clientes/999999")
        assert response.status_code == 404


# ===========================================================================
# ORDERS OF A CUSTOMER
# ===========================================================================


class TestCustomerOrders:
    def test_created_order_is_listed_exactly_once(self, api_client, cliente):
        created = api_client.post(
            "/incluirPedido",
            {"data": "2024-09-01", "id_cliente": cliente.id},
            format="json",
        )
        assert created.status_code == 201
        order_id = created.json()["id"]

        response = api_client.get(f"/clientes/{cliente.id}/pedidos")

        assert response.status_code == 200
        ids = [p["id"] for p in response.json()["pedidos"]]
        assert ids.count(order_id) == 1

    def test_only_the_customers_orders_are_returned(self, api_client, cliente, pedido):
        other = Customer.objects.create(nome="João", cpf="11144477735")
        Order.objects.create(data=date(2024, 1, 1), cliente=other)

        response = api_client.get(f"/clientes/{cliente.id}/pedidos")

        body = response.json()
        assert body["pedidos"] == [
            {"id": pedido.id, "data": "2024-08-15", "id_cliente": cliente.id}
        ]
        assert body["orders"] == body["pedidos"]

    def test_customer_without_orders(self, api_client, cliente):
        response = api_client.get(f"/clientes/{cliente.id}/pedidos")
        assert response.status_code == 200
        assert response.json()["pedidos"] == []

    def test_unknown_customer_returns_404(self, api_client):
        response = api_client.get("/clientes/999999/pedidos")
        assert response.status_code == 404
        assert response.json() == {"message": "Cliente não encontrado"}

    def test_non_numeric_customer_id(self, api_client):
        response = api_client.get("/clientes/abc/pedidos")
        assert response.status_code == 400
        assert response.json() == {"message": "ID deve ser um número"}
