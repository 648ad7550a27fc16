"""Translation rules between taxonomy members.

These rules are explicit policy applied by handlers BEFORE returning a
failure; the dispatcher never rewrites errors itself.

Rules:
- forbidden_as_not_found: hide "exists but forbidden" behind not-found
- droplet_forbidden_as_not_found: same, with the exact "Droplet not found"
  detail clients match on
- as_unprocessable_entity: a failed dependency lookup is a client input
  problem, not a server problem
- from_backend_error: map backing store statuses onto the taxonomy
- log_and_return: log a failure with context and hand it back wrapped
"""

from typing import TYPE_CHECKING, Any

from gateway.core.enums import ErrorKind
from gateway.core.errors.api_error import (
    ApiError,
    HandlerError,
    backend_unavailable_error,
    forbidden_error,
    invalid_auth_error,
    not_found_error,
    unprocessable_entity_error,
    wrap,
)
from gateway.core.errors.backend_error import BackendError, BackendStatus
from gateway.core.errors.matching import find_api_error

if TYPE_CHECKING:
    from gateway.domain.protocols.logger_protocol import LoggerProtocol


def forbidden_as_not_found(error: HandlerError | None) -> HandlerError | None:
    """Rewrite a forbidden error into a not-found error.

    Used where a caller must not learn whether a resource exists when it has
    no access to it. Any other error (and None) passes through unchanged.

    Args:
        error: Error returned by a repository or helper.

    Returns:
        RESOURCE_NOT_FOUND for the same resource type when the error is
        NOT_AUTHORIZED (through any wrapping), otherwise the error itself.
    """
    api_error = find_api_error(error)
    if api_error is None or api_error.kind is not ErrorKind.NOT_AUTHORIZED:
        return error
    return not_found_error(api_error.cause, api_error.resource_type or "Resource")


def droplet_forbidden_as_not_found(error: HandlerError | None) -> HandlerError | None:
    """Rewrite forbidden and not-found droplet errors to "Droplet not found".

    The CLI matches this exact detail, so the generic resource message cannot
    be used here.
    """
    api_error = find_api_error(error)
    if api_error is None or api_error.kind not in (
        ErrorKind.NOT_AUTHORIZED,
        ErrorKind.RESOURCE_NOT_FOUND,
    ):
        return error
    return ApiError(
        kind=ErrorKind.RESOURCE_NOT_FOUND,
        detail="Droplet not found",
        cause=api_error.cause,
        resource_type="Droplet",
    )


def as_unprocessable_entity(
    error: HandlerError | None, detail: str, *kinds: ErrorKind
) -> HandlerError | None:
    """Rewrite a dependency lookup failure into an unprocessable entity error.

    Args:
        error: Error returned by the dependency lookup.
        detail: Client-facing message, e.g. "Invalid space. Ensure that the
            space exists and you have access to it."
        *kinds: Kinds to rewrite (typically RESOURCE_NOT_FOUND and
            NOT_AUTHORIZED).

    Returns:
        UNPROCESSABLE_ENTITY keeping the underlying cause when the error
        matches one of the kinds, otherwise the error itself.

    Example:
        >>> as_unprocessable_entity(
        ...     err,
        ...     "Invalid space. Ensure that the space exists and you have access to it.",
        ...     ErrorKind.RESOURCE_NOT_FOUND,
        ...     ErrorKind.NOT_AUTHORIZED,
        ... )
    """
    api_error = find_api_error(error)
    if api_error is None or api_error.kind not in kinds:
        return error
    return unprocessable_entity_error(api_error.cause, detail)


def from_backend_error(error: HandlerError | None, resource_type: str) -> HandlerError | None:
    """Map a backing store error onto the taxonomy.

    Args:
        error: Error raised by the store client.
        resource_type: Resource being accessed (e.g. "App").

    Returns:
        Matching taxonomy member, or the error unchanged when it is not a
        BackendError with a mapped status.
    """
    if not isinstance(error, BackendError):
        return error

    match error.status:
        case BackendStatus.UNAUTHORIZED:
            return invalid_auth_error(error)
        case BackendStatus.NOT_FOUND:
            return not_found_error(error, resource_type)
        case BackendStatus.FORBIDDEN:
            return forbidden_error(error, resource_type)
        case BackendStatus.UNAVAILABLE:
            return backend_unavailable_error(error)
        case _:
            return error


def log_and_return(
    logger: "LoggerProtocol",
    error: HandlerError,
    message: str,
    **context: Any,
) -> HandlerError:
    """Log a failure at info level and return it wrapped with the context.

    The dispatcher logs the final outcome; this helper records where in the
    handler the failure surfaced.

    Args:
        logger: Request-scoped logger.
        error: Error to log and wrap.
        message: Description of the failed operation.
        **context: Key/value context (e.g. org_guid="...").

    Returns:
        WrappedError carrying message and context.
    """
    logger.info(message, **{**context, "error": str(error)})
    return wrap(error, message, **context)
