"""Parsing of numeric path identifiers.

Routes capture ``<id>`` as a plain string so that non-numeric input
reaches the view and is reported as a client error instead of a
routing miss.
"""

from __future__ import annotations

import re

from rest_framework import status
from rest_framework.exceptions import APIException

INVALID_ID_MESSAGE = "ID deve ser um número"

# Upper bound of a BigAutoField primary key.
MAX_ID = 2**63 - 1

_ASCII_DIGITS = re.compile(r"[0-9]+")


class InvalidIdentifier(APIException):
    """The path identifier is not a non-negative integer."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = INVALID_ID_MESSAGE
    default_code = "invalid_id"


def parse_id(value: str | int | None) -> int:
    """Return *value* as an ``int`` or raise :class:`InvalidIdentifier`.

    Only ASCII digits are accepted, and the result must fit a
    ``BigAutoField``.
    """
    if isinstance(value, int):
        number = value
    elif value is None or not _ASCII_DIGITS.fullmatch(value.strip()):
        raise InvalidIdentifier()
    else:
        number = int(value.strip())
    if not 0 <= number <= MAX_ID:
        raise InvalidIdentifier()
    return number
