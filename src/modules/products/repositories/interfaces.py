"""Product repository interface.

Extends ``IRepository[Product]`` with the look-up required by
business rule RN-PRO-002 (no removal while order items reference it).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product  # noqa: F401


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def has_order_items(self, id: int) -> bool:
        """Return ``True`` if at least one order item references the product."""
