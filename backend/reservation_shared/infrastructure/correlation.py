"""
Request ids for log correlation.

Every request is served under an id taken from the X-Request-ID header when
the caller sends a usable one, or minted otherwise. The id is echoed back in
the response and stamped on every log record emitted while serving it.
"""

import logging
import re
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from reservation_shared.config.constants import REQUEST_ID_HEADER

_ACCEPTED_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")

current_request_id: ContextVar[str | None] = ContextVar("current_request_id", default=None)


def get_request_id() -> str | None:
    return current_request_id.get()


def accept_request_id(incoming: str | None) -> str:
    """
    Reuse the caller's id if it is short and log-safe, else mint a UUID4.
    """
    if incoming and _ACCEPTED_ID.fullmatch(incoming):
        return incoming
    return str(uuid.uuid4())


@contextmanager
def bind_request_id(request_id: str) -> Iterator[str]:
    """Make request_id current for the duration of the block."""
    token = current_request_id.set(request_id)
    try:
        yield request_id
    finally:
        current_request_id.reset(token)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = accept_request_id(request.headers.get(REQUEST_ID_HEADER))
        with bind_request_id(request_id):
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class CorrelationIdFilter(logging.Filter):
    """Stamp records with the current request id ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_request_id.get() or "-"
        return True
