"""Per-request context handed to business handlers.

RequestContext is built by the dispatcher after routing and before the
handler runs, and is read-only afterwards. It replaces ambient per-request
values: a handler receives identity, logger and correlation id explicitly.

Usage:
    async def get_app(request: Request, context: RequestContext) -> HandlerResult:
        context.logger.info("Fetching app", app_guid=request.path_params["guid"])
        record = await repo.get_app(context.identity, request.path_params["guid"])
        ...
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from starlette.requests import Request

from gateway.core.errors import HandlerError
from gateway.core.result import Result
from gateway.domain.protocols.logger_protocol import LoggerProtocol
from gateway.domain.value_objects.identity import Identity
from gateway.presentation.api.routing.response import HandlerResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestContext:
    """Request-scoped collaborators for a handler.

    Attributes:
        identity: Caller identity. Never None on authenticated routes; on
            unauthenticated routes it is whatever upstream attached (possibly
            None).
        logger: Logger bound to the correlation id and route.
        correlation_id: Per-request correlation token.
    """

    identity: Identity | None
    logger: LoggerProtocol
    correlation_id: str


type HandlerResult = Result[HandlerResponse, HandlerError]

type Handler = Callable[[Request, RequestContext], Awaitable[HandlerResult] | HandlerResult]
