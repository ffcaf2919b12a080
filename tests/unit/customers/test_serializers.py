import pytest

from modules.customers.serializers import CustomerSerializer

pytestmark = pytest.mark.unit


class TestCustomerSerializer:
    def test_public_fields_only(self, cliente):
        data = CustomerSerializer(cliente).data
        assert data == {
            "id": cliente.id,
            "nome": "Maria",
            "sobrenome": "Silva",
            "cpf": "52998224725",
        }
