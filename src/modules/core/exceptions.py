"""DRF exception handler producing the ``{"message": ...}`` error body.

Errors leaving the API carry a single human-readable ``message`` key,
whether they are domain errors translated in the views or framework
errors such as malformed JSON, an unknown method or an invalid path
identifier.
"""

from __future__ import annotations

import functools
from typing import Any, Callable

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


def _flatten(data: Any) -> str:
    if isinstance(data, dict):
        if "detail" in data and len(data) == 1:
            return _flatten(data["detail"])
        return "; ".join(f"{key}: {_flatten(value)}" for key, value in data.items())
    if isinstance(data, (list, tuple)):
        return " ".join(_flatten(item) for item in data)
    return str(data)


def exception_handler(exc: Exception, context: dict) -> Any:
    """Delegate to DRF, then rewrite the payload as ``{"message": ...}``."""
    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    message = _flatten(response.data)
    view = context.get("view")
    logger.warning(
        "api.request_rejected",
        view=type(view).__name__ if view else None,
        status_code=response.status_code,
        message=message,
    )
    response.data = {"message": message}
    return response


def validation_message(exc: Exception) -> str:
    """Render a Pydantic ``ValidationError`` (or ``ValueError``) as one line."""
    errors = getattr(exc, "errors", None)
    if not callable(errors):
        return str(exc)
    parts = []
    for error in errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        message = error.get("msg", "")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


def handle_persistence_errors(message: str) -> Callable:
    """Translate unexpected persistence failures raised by a view into a 500.

    The response carries the generic per-entity *message*; the original
    error is logged with its traceback.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self, request, *args, **kwargs):
            try:
                return func(self, request, *args, **kwargs)
            except (DatabaseError, OverflowError):
                logger.exception(
                    "api.persistence_failure",
                    view=type(self).__name__,
                    action=func.__name__,
                )
                return Response(
                    {"message": message},
                    status=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )

        return wrapper

    return decorator
