import re
import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

# Accepted incoming ids: printable token characters, bounded length.
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:\-]{1,128}$")

logger = structlog.get_logger()


def _incoming_request_id(request: HttpRequest) -> str | None:
    value = request.META.get("HTTP_X_REQUEST_ID") or request.META.get(
        "HTTP_X_CORRELATION_ID"
    )
    if value and _VALID_REQUEST_ID.match(value):
        return value
    return None


class CorrelationIdMiddleware:
    """Tag every request with a correlation id.

    The id comes from ``X-Request-ID`` (or ``X-Correlation-ID``) when the
    caller supplies a well-formed one; otherwise a UUID4 is generated.
    It is bound into structlog's contextvars together with the method and
    path, so every log line emitted while serving the request carries it,
    and it is echoed back in the ``X-Request-ID`` response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = _incoming_request_id(request) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid,
            method=request.method,
            path=request.path,
        )
        logger.info("request_started")

        start = time.monotonic()
        response = self.get_response(request)

        logger.info(
            "request_finished",
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )
        response[REQUEST_ID_HEADER] = cid
        structlog.contextvars.clear_contextvars()
        return response
