"""HTTP middleware.

Exports:
    CorrelationMiddleware: Attaches and echoes the per-request correlation id
    AuthenticationMiddleware: Attaches the caller Identity
    correlation_id_from_request / identity_from_request / auth_error_from_request:
        request-scoped accessors used by the dispatcher
"""

from gateway.presentation.api.middleware.authentication_middleware import (
    AuthenticationMiddleware,
    attach_identity,
    auth_error_from_request,
    identity_from_request,
    parse_authorization_header,
)
from gateway.presentation.api.middleware.correlation_middleware import (
    CorrelationMiddleware,
    correlation_id_from_request,
)

__all__ = [
    "AuthenticationMiddleware",
    "CorrelationMiddleware",
    "attach_identity",
    "auth_error_from_request",
    "correlation_id_from_request",
    "identity_from_request",
    "parse_authorization_header",
]
