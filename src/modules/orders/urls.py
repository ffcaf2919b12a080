"""Order and order-item URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.orders.views import OrderItemViewSet, OrderViewSet

order_list = OrderViewSet.as_view({"get": "list"})
order_detail = OrderViewSet.as_view(
    {"get": "retrieve", "put": "update", "delete": "destroy"}
)
order_create = OrderViewSet.as_view({"post": "create"})
customer_orders = OrderViewSet.as_view({"get": "customer_orders"})

item_list = OrderItemViewSet.as_view({"get": "list"})
item_detail = OrderItemViewSet.as_view(
    {"get": "retrieve", "put": "update", "delete": "destroy"}
)
item_create = OrderItemViewSet.as_view({"post": "create"})

urlpatterns = [
    path("pedidos", order_list, name="order-list"),
    path("pedidos/<str:pk>", order_detail, name="order-detail"),
    path("incluirPedido", order_create, name="order-create"),
    path("clientes/<str:pk>/pedidos", customer_orders, name="customer-orders"),
    path("itensDoPedido", item_list, name="order-item-list"),
    path("itensDoPedido/<str:pk>", item_detail, name="order-item-detail"),
    path("incluirItemDoPedido", item_create, name="order-item-create"),
]
