"""Authentication context carrier.

Parses the Authorization header into an opaque Identity and attaches it to
the request before routing. Nothing here verifies the credential: the
backing store does that when the handler uses the identity.

Accepted schemes (case-insensitive):
    Authorization: bearer <token>
    Authorization: clientcert <base64 PEM certificate and key>

States observed by the dispatcher:
    - identity attached                 -> handler receives it
    - no Authorization header           -> nothing attached
    - unusable header (unknown scheme,  -> CF-InvalidAuthToken recorded;
      empty credential, bad base64)        emitted only on authenticated routes

Usage:
    app.add_middleware(AuthenticationMiddleware)

    identity = identity_from_request(request)
"""

from __future__ import annotations

import base64
import binascii
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from gateway.core.errors import ApiError, invalid_auth_error
from gateway.core.result import Failure, Result, Success
from gateway.domain.value_objects.identity import AuthScheme, Identity

_IDENTITY_KEY = "identity"
_AUTH_ERROR_KEY = "auth_error"


class AuthorizationHeaderError(ValueError):
    """Authorization header present but unusable."""


def parse_authorization_header(header: str) -> Result[Identity, ApiError]:
    """Parse an Authorization header value into an Identity.

    Args:
        header: Raw header value.

    Returns:
        Success with the Identity, or Failure with CF-InvalidAuthToken.
    """
    scheme, _, credential = header.strip().partition(" ")
    credential = credential.strip()

    if not credential:
        return Failure(
            error=invalid_auth_error(AuthorizationHeaderError("missing credential"))
        )

    match scheme.lower():
        case AuthScheme.BEARER.value:
            return Success(value=Identity(scheme=AuthScheme.BEARER, token=credential))
        case AuthScheme.CLIENT_CERT.value:
            try:
                cert_data = base64.b64decode(credential, validate=True)
            except (binascii.Error, ValueError) as e:
                return Failure(
                    error=invalid_auth_error(
                        AuthorizationHeaderError(f"undecodable client certificate: {e}")
                    )
                )
            return Success(
                value=Identity(scheme=AuthScheme.CLIENT_CERT, cert_data=cert_data)
            )
        case _:
            return Failure(
                error=invalid_auth_error(
                    AuthorizationHeaderError(
                        f"unsupported authorization scheme: {scheme!r}"
                    )
                )
            )


def attach_identity(request: Request, identity: Identity) -> None:
    """Attach an identity to the request (once, before routing)."""
    setattr(request.state, _IDENTITY_KEY, identity)


def identity_from_request(request: Request) -> Identity | None:
    """Return the identity attached to the request, if any."""
    return getattr(request.state, _IDENTITY_KEY, None)


def auth_error_from_request(request: Request) -> ApiError | None:
    """Return the Authorization header error recorded for the request, if any."""
    return getattr(request.state, _AUTH_ERROR_KEY, None)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that attaches the caller Identity to each request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Parse the Authorization header and continue.

        Args:
            request (Request): Incoming request.
            call_next (Callable[[Request], Awaitable[Response]]): Next handler.

        Returns:
            Response: Downstream response (never short-circuited here; the
            dispatcher decides per route whether identity is required).
        """
        header = request.headers.get("Authorization")
        if header is not None:
            match parse_authorization_header(header):
                case Success(value=identity):
                    attach_identity(request, identity)
                case Failure(error=error):
                    setattr(request.state, _AUTH_ERROR_KEY, error)

        return await call_next(request)
