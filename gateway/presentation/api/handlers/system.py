"""System handler group for non-versioned endpoints.

Serves the root document and the health check. Both routes are
unauthenticated and side-effect free so load balancers and clients can
check the gateway without credentials.
"""

from collections.abc import Sequence
from http import HTTPStatus

from starlette.requests import Request

from gateway.core.config import Settings
from gateway.core.result import Success
from gateway.presentation.api.routing.context import HandlerResult, RequestContext
from gateway.presentation.api.routing.metadata import HTTPMethod, Route
from gateway.presentation.api.routing.response import HandlerResponse

ROOT_PATH = "/"
HEALTH_PATH = "/health"


class SystemHandler:
    """Root and health endpoints.

    Args:
        settings: Application settings (name and version are reported).
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def root(self, request: Request, context: RequestContext) -> HandlerResult:
        """Report the API name, status and version."""
        return Success(
            value=HandlerResponse(status_code=HTTPStatus.OK).with_body(
                {
                    "message": self._settings.app_name,
                    "status": "operational",
                    "version": self._settings.app_version,
                }
            )
        )

    async def health(self, request: Request, context: RequestContext) -> HandlerResult:
        return Success(
            value=HandlerResponse(status_code=HTTPStatus.OK).with_body(
                {"status": "healthy"}
            )
        )

    def authenticated_routes(self) -> Sequence[Route]:
        return ()

    def unauthenticated_routes(self) -> Sequence[Route]:
        return (
            Route(
                method=HTTPMethod.GET,
                path=ROOT_PATH,
                handler=self.root,
                name="system.root",
            ),
            Route(
                method=HTTPMethod.GET,
                path=HEALTH_PATH,
                handler=self.health,
                name="system.health",
            ),
        )
