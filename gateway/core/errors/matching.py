"""Taxonomy discovery through wrapped causes.

Handlers and shared helpers wrap errors for context before returning them,
and deep code may raise exceptions chained onto an ApiException. The
functions here find the taxonomy member behind any such chain, so a kind
check reads as a switch over ErrorKind instead of type introspection.

Chains followed, outermost first:
- WrappedError.cause
- ApiException.error
- BaseException.__cause__ (explicit `raise ... from` only)
"""

from typing import Any

from gateway.core.enums import ErrorKind
from gateway.core.errors.api_error import (
    ApiError,
    ApiException,
    HandlerError,
    WrappedError,
    unknown_error,
)


def _next_link(error: Any) -> Any:
    match error:
        case WrappedError(cause=cause):
            return cause
        case BaseException():
            return error.__cause__
        case _:
            return None


def find_api_error(error: HandlerError | None) -> ApiError | None:
    """Return the outermost ApiError in the error chain.

    Args:
        error: Any handler error (possibly wrapped several layers deep).

    Returns:
        The first ApiError found, or None when the chain has none.
    """
    seen: set[int] = set()
    current: Any = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, ApiError):
            return current
        if isinstance(current, ApiException):
            return current.error
        current = _next_link(current)
    return None


def error_kind(error: HandlerError | None) -> ErrorKind | None:
    """Return the taxonomy kind behind an error, if any."""
    api_error = find_api_error(error)
    return api_error.kind if api_error is not None else None


def is_kind(error: HandlerError | None, *kinds: ErrorKind) -> bool:
    """Check whether an error is (through wrapping) one of the given kinds.

    Example:
        >>> is_kind(wrap(not_found_error(None, "App"), "lookup"), ErrorKind.RESOURCE_NOT_FOUND)
        True
    """
    return error_kind(error) in kinds


def as_api_error(error: HandlerError) -> ApiError:
    """Fold any error into a taxonomy member.

    Errors without a taxonomy member become UNKNOWN with the original error
    kept as cause; its message never reaches the client.
    """
    api_error = find_api_error(error)
    if api_error is None:
        return unknown_error(error)
    return api_error


def error_context(error: HandlerError | None) -> dict[str, Any]:
    """Collect key/value context from every WrappedError in the chain.

    Inner context is applied first so outer wrappers win on key clashes.
    """
    layers: list[dict[str, Any]] = []
    seen: set[int] = set()
    current: Any = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, WrappedError):
            layers.append(current.context)
        if isinstance(current, ApiError):
            current = current.cause
        else:
            current = _next_link(current)

    context: dict[str, Any] = {}
    for layer in reversed(layers):
        context.update(layer)
    return context
