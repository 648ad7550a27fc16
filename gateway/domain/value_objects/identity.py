"""Caller identity attached to a request.

The gateway never verifies credentials; it only carries them from the
Authorization header to the handler, which passes them on to the backing
store. Identity is therefore opaque: a scheme plus either a bearer token or
client-certificate bytes.
"""

from dataclasses import dataclass
from enum import Enum


class AuthScheme(str, Enum):
    """Authorization header schemes accepted by the gateway."""

    BEARER = "bearer"
    CLIENT_CERT = "clientcert"


@dataclass(frozen=True, slots=True, kw_only=True)
class Identity:
    """Opaque caller credential.

    Attributes:
        scheme: Scheme the credential was presented with.
        token: Bearer token (BEARER scheme only).
        cert_data: Decoded client certificate/key PEM bytes (CLIENT_CERT
            scheme only).
    """

    scheme: AuthScheme
    token: str | None = None
    cert_data: bytes | None = None

    def __repr__(self) -> str:
        # Credentials must not end up in logs or tracebacks
        return f"Identity(scheme={self.scheme.value!r})"
