"""Product URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductViewSet

product_list = ProductViewSet.as_view({"get": "list"})
product_detail = ProductViewSet.as_view({"get": "retrieve", "delete": "destroy"})
product_create = ProductViewSet.as_view({"post": "create"})
product_update = ProductViewSet.as_view({"put": "update"})
product_delete = ProductViewSet.as_view({"delete": "destroy"})

urlpatterns = [
    path("produtos", product_list, name="product-list"),
    path("produtos/<str:pk>", product_detail, name="product-detail"),
    path("incluirProduto", product_create, name="product-create"),
    path("atualizarProduto/<str:pk>", product_update, name="product-update"),
    path("excluirProduto/<str:pk>", product_delete, name="product-delete"),
]
