"""Customer URL configuration.

Routes are explicit (no router) because the public paths mix
resource-style URLs (``/clientes/<id>``) with action-style ones
(``/incluirCliente``).
"""

from __future__ import annotations

from django.urls import path

from modules.customers.views import CustomerViewSet

customer_list = CustomerViewSet.as_view({"get": "list"})
customer_detail = CustomerViewSet.as_view(
    {"get": "retrieve", "put": "update", "delete": "destroy"}
)
customer_create = CustomerViewSet.as_view({"post": "create"})

urlpatterns = [
    path("clientes", customer_list, name="customer-list"),
    path("clientes/<str:pk>", customer_detail, name="customer-detail"),
    path("incluirCliente", customer_create, name="customer-create"),
]
