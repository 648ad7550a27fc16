"""Correlation middleware to attach a correlation id per request.

- Reads the configured correlation header or generates a new id
- Stores the id on request.state for the dispatcher and exception handlers
- Echoes the id on the response header
- Logs one line per handled request (method, path, status, duration)
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from gateway.core.config import settings
from gateway.domain.protocols.logger_protocol import LoggerProtocol

_STATE_KEY = "correlation_id"
_HEADER_STATE_KEY = "correlation_header"


def _header_name(request: Request) -> str:
    app_state = getattr(request.scope.get("app"), "state", None)
    return getattr(app_state, _HEADER_STATE_KEY, None) or settings.correlation_header


def correlation_id_from_request(request: Request) -> str:
    """Return the request's correlation id, creating one if needed.

    Order: id stored by CorrelationMiddleware, then the header configured on
    the application (app.state.correlation_header, falling back to global
    settings), then a freshly generated UUID. The result is stored on
    request.state so every later reader sees the same value.

    Args:
        request: Incoming request.

    Returns:
        str: Correlation id for this request.
    """
    correlation_id = getattr(request.state, _STATE_KEY, None)
    if not correlation_id:
        correlation_id = request.headers.get(_header_name(request)) or str(uuid4())
        setattr(request.state, _STATE_KEY, correlation_id)
    return correlation_id


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that attaches a correlation id to each request.

    Args:
        app: Downstream ASGI application.
        logger: Logger used for the per-request access line.
        header_name: Correlation header (defaults to settings).
    """

    def __init__(
        self,
        app: ASGIApp,
        logger: LoggerProtocol | None = None,
        header_name: str | None = None,
    ) -> None:
        super().__init__(app)
        if logger is None:
            from gateway.core.container import get_logger

            logger = get_logger()
        self._logger = logger
        self._header_name = header_name or settings.correlation_header

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Attach the correlation id, run the request and echo the id.

        Args:
            request (Request): Incoming request.
            call_next (Callable[[Request], Awaitable[Response]]): Next handler.

        Returns:
            Response: Response with the correlation header added.
        """
        correlation_id = request.headers.get(self._header_name) or str(uuid4())
        setattr(request.state, _STATE_KEY, correlation_id)

        started = time.perf_counter()
        response = await call_next(request)
        response.headers[self._header_name] = correlation_id

        self._logger.info(
            "request handled",
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response
