"""Routing core: handler contract, route registry and dispatcher.

Exports:
    HandlerResponse: Success envelope returned by handlers
    RequestContext / Handler / HandlerResult: Handler contract
    Route / RouteMetadata / HTTPMethod / AuthLevel: Route declarations
    Routable / RouteRegistry / DuplicateRouteError: Routing table
    Dispatcher: Registers the routing table on a FastAPI router
"""

from gateway.presentation.api.routing.context import (
    Handler,
    HandlerResult,
    RequestContext,
)
from gateway.presentation.api.routing.dispatcher import Dispatcher
from gateway.presentation.api.routing.metadata import (
    AuthLevel,
    HTTPMethod,
    Route,
    RouteMetadata,
)
from gateway.presentation.api.routing.registry import (
    DuplicateRouteError,
    Routable,
    RouteRegistry,
)
from gateway.presentation.api.routing.response import (
    HandlerResponse,
    render_response,
)

__all__ = [
    "AuthLevel",
    "Dispatcher",
    "DuplicateRouteError",
    "HTTPMethod",
    "Handler",
    "HandlerResponse",
    "HandlerResult",
    "RequestContext",
    "Routable",
    "Route",
    "RouteMetadata",
    "RouteRegistry",
    "render_response",
]
