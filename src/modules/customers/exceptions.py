"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class CustomerAlreadyExists(Exception):
    """A customer with the same CPF already exists (RN-CLI-001)."""


class CustomerNotFound(Exception):
    """The requested customer does not exist."""


class InvalidCpf(Exception):
    """The CPF failed checksum validation (strict mode only)."""


class CustomerHasOrders(Exception):
    """The customer is referenced by orders and cannot be removed (RN-CLI-003)."""
