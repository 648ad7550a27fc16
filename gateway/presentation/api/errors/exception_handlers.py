"""Global exception handlers for the FastAPI application.

Everything that escapes the dispatcher (router misses, framework request
validation, unexpected exceptions) is converted into the same error
envelope the handlers use.

Handlers:
    http_exception_handler: Router 404/405 and stray HTTPExceptions
    validation_exception_handler: FastAPI RequestValidationError
    generic_exception_handler: Anything else (CF-UnknownError)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway.core.errors import (
    ApiError,
    invalid_auth_error,
    invalid_request_error,
    message_parse_error,
    not_authenticated_error,
    not_found_error,
    unknown_error,
    unprocessable_entity_error,
)
from gateway.domain.protocols.logger_protocol import LoggerProtocol
from gateway.presentation.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from gateway.presentation.api.middleware.correlation_middleware import (
    correlation_id_from_request,
)
from gateway.presentation.api.validation.request_validator import aggregate_messages

_UNKNOWN_REQUEST = "Unknown request"
_LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")


def _api_error_for_status(exc: StarletteHTTPException) -> ApiError:
    match exc.status_code:
        # Unsupported methods are indistinguishable from unknown paths
        case HTTPStatus.NOT_FOUND | HTTPStatus.METHOD_NOT_ALLOWED:
            return not_found_error(exc, _UNKNOWN_REQUEST)
        case HTTPStatus.BAD_REQUEST:
            return message_parse_error(exc)
        case HTTPStatus.UNAUTHORIZED:
            return not_authenticated_error(exc)
        case HTTPStatus.FORBIDDEN:
            return invalid_auth_error(exc)
        case HTTPStatus.UNPROCESSABLE_ENTITY:
            return unprocessable_entity_error(exc, str(exc.detail))
        case status if 400 <= status < 500:
            return invalid_request_error(exc, str(exc.detail))
        case _:
            return unknown_error(exc)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert a Starlette/FastAPI HTTPException to the error envelope.

    Args:
        request: Incoming request.
        exc: HTTPException raised by the router or a dependency.

    Returns:
        JSONResponse with the error envelope.

    Example:
        >>> # GET /v3/unknown
        >>> # 404 {"errors": [{"title": "CF-ResourceNotFound",
        >>> #   "detail": "Unknown request not found. Ensure it exists and you have access to it.",
        >>> #   "code": 10010}]}
    """
    # Type narrowing: registered only for HTTPException
    assert isinstance(exc, StarletteHTTPException)
    return ErrorResponseBuilder.from_api_error(_api_error_for_status(exc))


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert RequestValidationError to a CF-UnprocessableEntity envelope.

    Messages are built, sorted and joined exactly as RequestValidator does.
    """
    # Type narrowing: registered only for RequestValidationError
    assert isinstance(exc, RequestValidationError)

    errors = [
        {**error, "loc": tuple(p for p in error["loc"] if p not in _LOCATION_PREFIXES)}
        for error in exc.errors()
    ]
    detail = aggregate_messages(errors) or "Request validation failed"
    return ErrorResponseBuilder.from_api_error(unprocessable_entity_error(exc, detail))


def make_generic_exception_handler(logger: LoggerProtocol):
    """Build the catch-all handler bound to the application logger.

    Args:
        logger: Logger used to record the unhandled exception.

    Returns:
        Exception handler presenting CF-UnknownError.
    """

    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.error(
            "Unhandled exception",
            error=exc,
            correlation_id=correlation_id_from_request(request),
            method=request.method,
            path=request.url.path,
        )
        return ErrorResponseBuilder.from_api_error(unknown_error(exc))

    return generic_exception_handler


def register_exception_handlers(app: FastAPI, logger: LoggerProtocol) -> None:
    """Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance.
        logger: Logger for unhandled exceptions.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app, get_logger())
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, make_generic_exception_handler(logger))
