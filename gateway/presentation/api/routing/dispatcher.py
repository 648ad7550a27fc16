"""Dispatcher - turns registered routes into FastAPI endpoints.

Every route in the registry gets one endpoint that runs the same pipeline:

    Routed -> ContextPrepared -> Dispatched -> (Succeeded | Failed) -> Written

- ContextPrepared: correlation id ensured, logger bound (correlation id,
  route, method, path), identity resolved according to the route's
  classification. Authenticated routes without an identity fail here and
  the handler never runs.
- Dispatched: the handler is awaited inline (sync handlers run in the
  threadpool). Raised exceptions are treated as failures.
- Failed: the failure is folded into a taxonomy member, logged with every
  piece of wrap context (error level for CF-UnknownError, info otherwise)
  and presented as the error envelope.

The dispatcher never rewrites taxonomy members; translation is handler
policy (see gateway.core.errors.translation).

Usage:
    registry = RouteRegistry.from_routables(SystemHandler(settings), *handlers)
    router = Dispatcher(registry=registry, logger=get_logger()).register(APIRouter())
    app.include_router(router)
"""

import inspect
from typing import Any

from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import Response

from gateway.core.enums import ErrorKind
from gateway.core.errors import (
    HandlerError,
    as_api_error,
    error_context,
    not_authenticated_error,
)
from gateway.core.result import Failure, Result, Success
from gateway.domain.protocols.logger_protocol import LoggerProtocol
from gateway.domain.value_objects.identity import Identity
from gateway.presentation.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from gateway.presentation.api.middleware.authentication_middleware import (
    auth_error_from_request,
    identity_from_request,
)
from gateway.presentation.api.middleware.correlation_middleware import (
    correlation_id_from_request,
)
from gateway.presentation.api.routing.context import (
    Handler,
    HandlerResult,
    RequestContext,
)
from gateway.presentation.api.routing.metadata import RouteMetadata
from gateway.presentation.api.routing.registry import RouteRegistry
from gateway.presentation.api.routing.response import HandlerResponse, render_response


class Dispatcher:
    """Bridge between the route registry and FastAPI.

    Args:
        registry: Immutable routing table.
        logger: Application logger; bound per request.
    """

    def __init__(self, *, registry: RouteRegistry, logger: LoggerProtocol) -> None:
        self._registry = registry
        self._logger = logger

    @property
    def registry(self) -> RouteRegistry:
        return self._registry

    def register(self, router: APIRouter) -> APIRouter:
        """Add one endpoint per registered route to the router.

        Args:
            router: Router to populate (routes are added in registry order).

        Returns:
            APIRouter: The same router, for chaining.
        """
        for entry in self._registry:
            router.add_api_route(
                entry.route.path,
                self._endpoint(entry),
                methods=[entry.route.method.value],
                name=entry.route.route_name,
                response_model=None,
            )
        return router

    def _endpoint(self, entry: RouteMetadata):
        async def endpoint(request: Request) -> Response:
            return await self.dispatch(entry, request)

        endpoint.__name__ = entry.route.route_name.replace(".", "_")
        return endpoint

    async def dispatch(self, entry: RouteMetadata, request: Request) -> Response:
        """Run one request through the pipeline and write exactly one response.

        Args:
            entry: Matched route.
            request: Incoming request.

        Returns:
            Response: Rendered success envelope or error envelope.
        """
        correlation_id = correlation_id_from_request(request)
        logger = self._logger.bind(
            correlation_id=correlation_id,
            route=entry.route.route_name,
            method=request.method,
            path=request.url.path,
        )

        match self._resolve_identity(entry, request):
            case Failure(error=auth_error):
                return self._render_failure(auth_error, logger)
            case Success(value=identity):
                pass

        context = RequestContext(
            identity=identity,
            logger=logger,
            correlation_id=correlation_id,
        )

        try:
            result = await self._invoke(entry.route.handler, request, context)
        except Exception as e:
            return self._render_failure(e, logger)

        match result:
            case Success(value=HandlerResponse() as envelope):
                try:
                    return render_response(envelope)
                except Exception as e:
                    return self._render_failure(e, logger)
            case Failure(error=error):
                return self._render_failure(error, logger)
            case _:
                return self._render_failure(
                    TypeError(
                        f"handler returned {type(result).__name__}, "
                        "expected Success[HandlerResponse] or Failure"
                    ),
                    logger,
                )

    @staticmethod
    def _resolve_identity(
        entry: RouteMetadata, request: Request
    ) -> Result[Identity | None, HandlerError]:
        identity = identity_from_request(request)
        if not entry.requires_identity:
            return Success(value=identity)

        auth_error = auth_error_from_request(request)
        if auth_error is not None:
            return Failure(error=auth_error)
        if identity is None:
            return Failure(error=not_authenticated_error(None))
        return Success(value=identity)

    @staticmethod
    async def _invoke(
        handler: Handler, request: Request, context: RequestContext
    ) -> HandlerResult:
        if inspect.iscoroutinefunction(handler):
            return await handler(request, context)

        result: Any = await run_in_threadpool(handler, request, context)
        if inspect.isawaitable(result):
            result = await result
        return result

    @staticmethod
    def _render_failure(error: HandlerError, logger: LoggerProtocol) -> Response:
        api_error = as_api_error(error)
        log_context: dict[str, Any] = {
            **error_context(error),
            "title": api_error.title,
            "code": api_error.code,
            "status": api_error.http_status,
        }

        if api_error.kind is ErrorKind.UNKNOWN:
            cause = api_error.cause
            log_context.pop("error", None)
            log_context["cause"] = str(cause)
            logger.error(
                "Request failed",
                error=cause if isinstance(cause, BaseException) else None,
                **log_context,
            )
        else:
            log_context["error"] = str(error)
            logger.info("Request failed", **log_context)

        return ErrorResponseBuilder.from_api_error(api_error)
