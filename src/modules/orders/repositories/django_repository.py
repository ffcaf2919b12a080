"""Django ORM implementation of the Order and OrderItem repositories.

Reads eager-load the relations rendered by the API in a single query
(``select_related``): order → customer, and item → order / product.
A missing relation comes back as ``None`` and is rendered as ``null``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.db import transaction

from modules.orders.filters import OrderFilter, OrderItemFilter
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import (
    IOrderItemRepository,
    IOrderRepository,
)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Order]:
        """Retrieve an order with the customer joined in.

        Returns ``None`` when no order matches.
        """
        return Order.objects.select_related("cliente").filter(id=id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        """List orders (customer joined in), narrowed by ``OrderFilter``."""
        queryset = Order.objects.select_related("cliente")
        if filters:
            queryset = OrderFilter(filters, queryset=queryset).qs
        return list(queryset)

    def list_by_customer(self, customer_id: int) -> List[Order]:
        return list(Order.objects.filter(cliente_id=customer_id))

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist (create or update) an order."""
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Remove an order by ID.

        Raises ``django.db.models.ProtectedError`` while items reference it.
        """
        deleted, _ = Order.objects.filter(id=id).delete()
        return bool(deleted)

    def has_items(self, id: int) -> bool:
        return OrderItem.objects.filter(pedido_id=id).exists()


class OrderItemDjangoRepository(IOrderItemRepository):
    """Concrete OrderItem repository backed by Django ORM."""

    def _queryset(self):
        return OrderItem.objects.select_related("pedido", "produto")

    def get_by_id(self, id: int) -> Optional[OrderItem]:
        """Retrieve an item with its order and product joined in.

        Returns ``None`` when no item matches.
        """
        return self._queryset().filter(id=id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[OrderItem]:
        """List items (order and product joined in), narrowed by ``OrderItemFilter``."""
        queryset = self._queryset()
        if filters:
            queryset = OrderItemFilter(filters, queryset=queryset).qs
        return list(queryset)

    @transaction.atomic
    def save(self, entity: OrderItem) -> OrderItem:
        """Persist (create or update) an order item."""
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Remove an order item by ID."""
        deleted, _ = OrderItem.objects.filter(id=id).delete()
        return bool(deleted)
