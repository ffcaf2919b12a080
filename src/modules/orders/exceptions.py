"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """The requested order does not exist."""


class OrderHasItems(Exception):
    """The order is referenced by items and cannot be removed (RN-PED-002)."""


class OrderItemNotFound(Exception):
    """The requested order item does not exist."""


class CustomerNotFound(Exception):
    """The customer whose orders were requested does not exist."""


class ProductNotFound(Exception):
    """The product referenced by an order item does not exist."""
