"""Order and OrderItem repository interfaces.

Extend ``IRepository`` with the look-ups the order use-cases need:
eager loading of related rows, listing by customer, and the
dependent-items check that guards order removal.

The Service Layer depends exclusively on these contracts (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order, OrderItem


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Order]:
        """Retrieve an order with its customer eager-loaded."""

    @abstractmethod
    def list_by_customer(self, customer_id: int) -> List[Order]:
        """List every order whose customer reference equals *customer_id*."""

    @abstractmethod
    def has_items(self, id: int) -> bool:
        """Return ``True`` if at least one order item references the order."""


class IOrderItemRepository(IRepository["OrderItem"]):
    """Repository contract for order items."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[OrderItem]:
        """Retrieve an item with its order and product eager-loaded."""
