"""Order DRF serializers for API output.

Input is validated by the Pydantic DTOs in ``dtos.py``; these
serializers render the response shapes consumed by the front-end:

- ``OrderSerializer``: flat order record ``{id, data, id_cliente}``.
- ``OrderWithCustomerSerializer``: ``{pedido: {id, data}, cliente: {...} | null}``.
- ``OrderItemSerializer``: flat item record.
- ``OrderItemDetailSerializer``: item with nested ``pedido`` and ``produto``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.serializers import CustomerSerializer
from modules.orders.models import Order, OrderItem
from modules.products.serializers import ProductSerializer

# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


class OrderSerializer(serializers.ModelSerializer):
    """Flat order record, as returned by create/update and per-customer listings."""

    id_cliente = serializers.IntegerField(source="cliente_id", read_only=True, allow_null=True)

    class Meta:
        model = Order
        fields = ["id", "data", "id_cliente"]
        read_only_fields = fields


class OrderHeaderSerializer(serializers.ModelSerializer):
    """The ``pedido`` half of an order listing entry."""

    class Meta:
        model = Order
        fields = ["id", "data"]
        read_only_fields = fields


class OrderWithCustomerSerializer(serializers.Serializer):
    """Order paired with its customer's public fields.

    ``cliente`` renders as ``null`` when the order has no customer.
    """

    pedido = OrderHeaderSerializer(source="*", read_only=True)
    cliente = CustomerSerializer(read_only=True, allow_null=True)


# ---------------------------------------------------------------------------
# Order items
# ---------------------------------------------------------------------------


class OrderSummarySerializer(serializers.ModelSerializer):
    """The ``pedido`` nested inside an order item."""

    clienteId = serializers.IntegerField(source="cliente_id", read_only=True, allow_null=True)

    class Meta:
        model = Order
        fields = ["id", "data", "clienteId"]
        read_only_fields = fields


class OrderItemSerializer(serializers.ModelSerializer):
    """Flat item record, as returned by create/update."""

    id_pedido = serializers.IntegerField(source="pedido_id", read_only=True)
    id_produto = serializers.IntegerField(source="produto_id", read_only=True)

    class Meta:
        model = OrderItem
        fields = ["id", "id_pedido", "id_produto", "quantidade"]
        read_only_fields = fields


class OrderItemDetailSerializer(serializers.ModelSerializer):
    """Item enriched with its order (and the order's customer id) and product.

    Shape: ``{id, quantidade, pedido: {id, data, clienteId}, produto: {id, descricao, preco}}``;
    a missing relation renders as ``null``.
    """

    pedido = OrderSummarySerializer(read_only=True, allow_null=True)
    produto = ProductSerializer(read_only=True, allow_null=True)

    class Meta:
        model = OrderItem
        fields = ["id", "quantidade", "pedido", "produto"]
        read_only_fields = fields
