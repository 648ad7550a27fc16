"""Core errors package.

Exports the error taxonomy, its constructors, matching helpers and
translation rules.

Usage:
    from gateway.core.errors import ApiError, not_found_error, forbidden_as_not_found
"""

from gateway.core.errors.api_error import (
    ApiError,
    ApiException,
    HandlerError,
    WrappedError,
    backend_unavailable_error,
    forbidden_error,
    invalid_auth_error,
    invalid_request_error,
    message_parse_error,
    not_authenticated_error,
    not_found_error,
    package_bits_already_uploaded_error,
    uniqueness_error,
    unknown_error,
    unknown_key_error,
    unprocessable_entity_error,
    wrap,
)
from gateway.core.errors.backend_error import BackendError, BackendStatus
from gateway.core.errors.matching import (
    as_api_error,
    error_context,
    error_kind,
    find_api_error,
    is_kind,
)
from gateway.core.errors.translation import (
    as_unprocessable_entity,
    droplet_forbidden_as_not_found,
    forbidden_as_not_found,
    from_backend_error,
    log_and_return,
)

__all__ = [
    "ApiError",
    "ApiException",
    "BackendError",
    "BackendStatus",
    "HandlerError",
    "WrappedError",
    "as_api_error",
    "as_unprocessable_entity",
    "backend_unavailable_error",
    "droplet_forbidden_as_not_found",
    "error_context",
    "error_kind",
    "find_api_error",
    "forbidden_as_not_found",
    "forbidden_error",
    "from_backend_error",
    "invalid_auth_error",
    "invalid_request_error",
    "is_kind",
    "log_and_return",
    "message_parse_error",
    "not_authenticated_error",
    "not_found_error",
    "package_bits_already_uploaded_error",
    "uniqueness_error",
    "unknown_error",
    "unknown_key_error",
    "unprocessable_entity_error",
    "wrap",
]
