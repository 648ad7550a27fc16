"""
Main FastAPI application entry point.

create_app() is the composition root: it builds the immutable route
registry from the handler groups, registers it through the dispatcher and
wires the request-scoped middleware and global exception handlers.

Middleware order (outermost first):
    CorrelationMiddleware -> AuthenticationMiddleware -> router

Usage:
    uvicorn gateway.main:app

    app = create_app(AppHandler(repo), OrgHandler(repo))
"""

from fastapi import APIRouter, FastAPI

from gateway.core.config import Settings, settings as default_settings
from gateway.core.container import get_logger
from gateway.domain.protocols.logger_protocol import LoggerProtocol
from gateway.presentation.api.errors import register_exception_handlers
from gateway.presentation.api.handlers import SystemHandler
from gateway.presentation.api.middleware import (
    AuthenticationMiddleware,
    CorrelationMiddleware,
)
from gateway.presentation.api.routing import Dispatcher, Routable, RouteRegistry


def create_app(
    *routables: Routable,
    settings: Settings | None = None,
    logger: LoggerProtocol | None = None,
) -> FastAPI:
    """Build the gateway application.

    Args:
        *routables: Resource handler groups, registered after the system
            routes in the given order.
        settings: Settings override (defaults to the global settings).
        logger: Logger override (defaults to the container logger).

    Returns:
        FastAPI: Configured application.

    Raises:
        DuplicateRouteError: If two handler groups register the same
            method and path.
    """
    settings = settings or default_settings
    logger = logger or get_logger()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.correlation_header = settings.correlation_header

    app.add_middleware(AuthenticationMiddleware)
    app.add_middleware(
        CorrelationMiddleware,
        logger=logger,
        header_name=settings.correlation_header,
    )

    register_exception_handlers(app, logger)

    registry = RouteRegistry.from_routables(SystemHandler(settings), *routables)
    dispatcher = Dispatcher(registry=registry, logger=logger)
    app.include_router(dispatcher.register(APIRouter()))

    logger.info("Gateway routes registered", routes=len(registry))
    return app


app = create_app()
