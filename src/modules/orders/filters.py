import django_filters

from modules.orders.models import Order, OrderItem


class OrderFilter(django_filters.FilterSet):
    id_cliente = django_filters.NumberFilter(field_name="cliente_id")
    data_inicio = django_filters.DateFilter(field_name="data", lookup_expr="gte")
    data_fim = django_filters.DateFilter(field_name="data", lookup_expr="lte")

    class Meta:
        model = Order
        fields = ["id_cliente", "data_inicio", "data_fim"]


class OrderItemFilter(django_filters.FilterSet):
    id_pedido = django_filters.NumberFilter(field_name="pedido_id")
    id_produto = django_filters.NumberFilter(field_name="produto_id")

    class Meta:
        model = OrderItem
        fields = ["id_pedido", "id_produto"]
