"""Route metadata types.

A Route is what a resource handler group declares: method, path pattern and
handler. The registry classifies each route as authenticated or
unauthenticated depending on which collection it came from, producing
RouteMetadata entries that the dispatcher turns into FastAPI routes.

Path patterns use Starlette's brace convention for named parameters
("/v3/apps/{guid}"); it is the only convention the gateway supports.

Usage:
    Route(method=HTTPMethod.GET, path="/v3/apps/{guid}", handler=self.get)
"""

import re
from dataclasses import dataclass
from enum import Enum

from gateway.presentation.api.routing.context import Handler

_PATH_PARAM = re.compile(r"\{[^}]*\}")


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        AUTHENTICATED: Requires an Identity before the handler runs.
        UNAUTHENTICATED: Identity irrelevant; passed through when present.
    """

    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


@dataclass(frozen=True, kw_only=True)
class Route:
    """Route declared by a handler group.

    Attributes:
        method: HTTP method.
        path: Path pattern with {named} parameters.
        handler: Callable implementing the handler contract.
        name: Stable route name used in logs (defaults to the handler's
            qualified name).
    """

    method: HTTPMethod
    path: str
    handler: Handler
    name: str | None = None

    @property
    def route_name(self) -> str:
        if self.name:
            return self.name
        return getattr(self.handler, "__qualname__", repr(self.handler))


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Registered route (immutable registry entry).

    Attributes:
        route: The declared route.
        auth_level: Classification taken from the declaring collection.
    """

    route: Route
    auth_level: AuthLevel

    @property
    def key(self) -> tuple[str, str]:
        """(method, path shape) pair that must be unique across the registry.

        Parameter names are erased: "/v3/apps/{guid}" -> "/v3/apps/{}".
        """
        return (self.route.method.value, _PATH_PARAM.sub("{}", self.route.path))

    @property
    def requires_identity(self) -> bool:
        return self.auth_level is AuthLevel.AUTHENTICATED
