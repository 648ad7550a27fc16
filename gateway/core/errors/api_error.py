"""API error taxonomy member and wrapping types.

ApiError is the single error type the dispatcher knows how to emit. It is a
tagged variant: the ErrorKind enumerator selects the wire contract (status,
title, code) and the detail carries the occurrence-specific message. The
optional cause is kept for logging only and is never rendered to clients.

Like the rest of the Result-based stack, ApiError does NOT inherit from
Exception: it flows through Failure values. Code that has to raise (deep
helpers, third-party callbacks) raises ApiException, which carries an
ApiError and is unwrapped by the matcher.

Architecture:
- ApiError: taxonomy member (kind + detail + optional cause)
- WrappedError: context added by handlers/log helpers around any error
- ApiException: raisable carrier for an ApiError
- HandlerError: everything a handler may fail with

Usage:
    from gateway.core.errors import not_found_error, wrap

    error = not_found_error(cause, "App")
    return Failure(error=wrap(error, "failed to fetch app", app_guid=guid))
"""

from dataclasses import dataclass, field
from typing import Any

from gateway.core.enums import ErrorKind


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiError:
    """Member of the error taxonomy.

    Attributes:
        kind: Taxonomy kind (selects status, title and code).
        detail: Human-readable message for the client.
        cause: Underlying error, logged but never exposed.
        resource_type: Resource the error refers to (used when rewriting
            forbidden errors into not-found errors).
    """

    kind: ErrorKind
    detail: str
    cause: "HandlerError | None" = None
    resource_type: str | None = None

    @property
    def title(self) -> str:
        """Stable error title (e.g. "CF-ResourceNotFound")."""
        return self.kind.title

    @property
    def code(self) -> int:
        """Stable numeric error code."""
        return self.kind.code

    @property
    def http_status(self) -> int:
        """HTTP status code for this error."""
        return self.kind.http_status

    def unwrap(self) -> "HandlerError | None":
        """Return the wrapped cause (None when the error has no cause)."""
        return self.cause

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.title}: {self.detail}"


@dataclass(frozen=True, slots=True, kw_only=True)
class WrappedError:
    """Error annotated with a message and structured context.

    Wrapping never hides the taxonomy: find_api_error() walks through any
    number of WrappedError layers.

    Attributes:
        message: What the caller was doing when the error occurred.
        cause: The wrapped error.
        context: Key/value pairs logged alongside the error.
    """

    message: str
    cause: "HandlerError"
    context: dict[str, Any] = field(default_factory=dict)

    def unwrap(self) -> "HandlerError":
        """Return the wrapped cause."""
        return self.cause

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.message}: {self.cause}"


class ApiException(Exception):
    """Raisable carrier for an ApiError.

    Example:
        >>> raise ApiException(not_found_error(None, "Space")) from exc
    """

    def __init__(self, error: ApiError) -> None:
        super().__init__(str(error))
        self.error = error


type HandlerError = ApiError | WrappedError | BaseException


def wrap(error: HandlerError, message: str, **context: Any) -> WrappedError:
    """Wrap an error with a message and optional key/value context.

    Args:
        error: Error to wrap.
        message: Description of the failed operation.
        **context: Structured context (e.g. app_guid="...").

    Returns:
        WrappedError around the original error.
    """
    return WrappedError(message=message, cause=error, context=context)


# =============================================================================
# Constructors (one per taxonomy kind)
# =============================================================================


def unknown_error(cause: HandlerError | None) -> ApiError:
    return ApiError(
        kind=ErrorKind.UNKNOWN,
        detail="An unknown error occurred.",
        cause=cause,
    )


def invalid_auth_error(cause: HandlerError | None) -> ApiError:
    return ApiError(
        kind=ErrorKind.INVALID_AUTH_TOKEN,
        detail="Invalid Auth Token",
        cause=cause,
    )


def not_authenticated_error(cause: HandlerError | None) -> ApiError:
    return ApiError(
        kind=ErrorKind.NOT_AUTHENTICATED,
        detail="Authentication error",
        cause=cause,
    )


def forbidden_error(cause: HandlerError | None, resource_type: str) -> ApiError:
    return ApiError(
        kind=ErrorKind.NOT_AUTHORIZED,
        detail="You are not authorized to perform the requested action",
        cause=cause,
        resource_type=resource_type,
    )


def not_found_error(cause: HandlerError | None, resource_type: str) -> ApiError:
    return ApiError(
        kind=ErrorKind.RESOURCE_NOT_FOUND,
        detail=(
            f"{resource_type} not found. "
            "Ensure it exists and you have access to it."
        ),
        cause=cause,
        resource_type=resource_type,
    )


def message_parse_error(cause: HandlerError | None) -> ApiError:
    return ApiError(
        kind=ErrorKind.MESSAGE_PARSE_ERROR,
        detail="Request invalid due to parse error: invalid request body",
        cause=cause,
    )


def unknown_key_error(cause: HandlerError | None, valid_keys: list[str]) -> ApiError:
    """Build an unknown query key error.

    Valid keys are listed alphabetically so the detail is deterministic
    regardless of the order a payload declares them in.
    """
    keys = ", ".join(sorted(valid_keys))
    return ApiError(
        kind=ErrorKind.UNKNOWN_QUERY_KEY,
        detail=f"The query parameter is invalid: Valid parameters are: '{keys}'",
        cause=cause,
    )


def unprocessable_entity_error(cause: HandlerError | None, detail: str) -> ApiError:
    return ApiError(
        kind=ErrorKind.UNPROCESSABLE_ENTITY,
        detail=detail,
        cause=cause,
    )


def invalid_request_error(cause: HandlerError | None, detail: str) -> ApiError:
    return ApiError(
        kind=ErrorKind.INVALID_REQUEST,
        detail=detail,
        cause=cause,
    )


def uniqueness_error(cause: HandlerError | None, detail: str) -> ApiError:
    return ApiError(
        kind=ErrorKind.UNIQUENESS_ERROR,
        detail=detail,
        cause=cause,
    )


def backend_unavailable_error(cause: HandlerError | None) -> ApiError:
    return ApiError(
        kind=ErrorKind.BACKEND_UNAVAILABLE,
        detail="Error uploading source package to the container registry",
        cause=cause,
    )


def package_bits_already_uploaded_error(cause: HandlerError | None) -> ApiError:
    return ApiError(
        kind=ErrorKind.PACKAGE_BITS_ALREADY_UPLOADED,
        detail=(
            "Bits may be uploaded only once. "
            "Create a new package to upload different bits."
        ),
        cause=cause,
    )
