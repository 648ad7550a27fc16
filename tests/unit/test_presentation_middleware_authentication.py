"""Unit tests for the authentication context carrier.

Tests cover:
- Authorization header parsing (bearer, clientcert, bad input)
- AuthenticationMiddleware attaching identity or recording the header error
- Identity never exposing credentials in its repr
"""

import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from gateway.core.enums import ErrorKind
from gateway.core.result import Failure, Success
from gateway.domain.value_objects.identity import AuthScheme, Identity
from gateway.presentation.api.middleware import (
    AuthenticationMiddleware,
    attach_identity,
    auth_error_from_request,
    identity_from_request,
    parse_authorization_header,
)

CERT_PEM = b"-----BEGIN CERTIFICATE-----\nMIIB\n-----END CERTIFICATE-----\n"


def _request(headers: dict[str, str] | None = None) -> MagicMock:
    request = MagicMock()
    request.headers = headers or {}
    request.state = SimpleNamespace()
    return request


@pytest.mark.unit
class TestParseAuthorizationHeader:
    def test_bearer_token(self):
        result = parse_authorization_header("Bearer my-token")

        assert result == Success(value=Identity(scheme=AuthScheme.BEARER, token="my-token"))

    def test_scheme_is_case_insensitive(self):
        result = parse_authorization_header("bearer my-token")

        assert isinstance(result, Success)
        assert result.value.token == "my-token"

    def test_client_cert(self):
        encoded = base64.b64encode(CERT_PEM).decode()

        result = parse_authorization_header(f"ClientCert {encoded}")

        assert isinstance(result, Success)
        assert result.value.scheme is AuthScheme.CLIENT_CERT
        assert result.value.cert_data == CERT_PEM
        assert result.value.token is None

    def test_undecodable_client_cert(self):
        result = parse_authorization_header("ClientCert not*base64")

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.INVALID_AUTH_TOKEN

    @pytest.mark.parametrize("header", ["Basic dXNlcjpwYXNz", "Bearer", "Bearer   ", ""])
    def test_unusable_headers(self, header):
        result = parse_authorization_header(header)

        assert isinstance(result, Failure)
        assert result.error.kind is ErrorKind.INVALID_AUTH_TOKEN
        assert result.error.detail == "Invalid Auth Token"


@pytest.mark.unit
class TestAuthenticationMiddleware:
    @pytest.mark.asyncio
    async def test_attaches_identity(self):
        request = _request({"Authorization": "Bearer t-1"})
        call_next = AsyncMock(return_value=MagicMock())

        await AuthenticationMiddleware(app=MagicMock()).dispatch(request, call_next)

        assert identity_from_request(request).token == "t-1"
        assert auth_error_from_request(request) is None
        call_next.assert_awaited_once_with(request)

    @pytest.mark.asyncio
    async def test_missing_header_attaches_nothing(self):
        request = _request()
        call_next = AsyncMock(return_value=MagicMock())

        await AuthenticationMiddleware(app=MagicMock()).dispatch(request, call_next)

        assert identity_from_request(request) is None
        assert auth_error_from_request(request) is None
        call_next.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_bad_header_records_error_and_continues(self):
        request = _request({"Authorization": "Negotiate abc"})
        call_next = AsyncMock(return_value=MagicMock())

        await AuthenticationMiddleware(app=MagicMock()).dispatch(request, call_next)

        assert identity_from_request(request) is None
        assert auth_error_from_request(request).kind is ErrorKind.INVALID_AUTH_TOKEN
        call_next.assert_awaited_once()


@pytest.mark.unit
class TestIdentity:
    def test_attach_and_read(self):
        request = _request()
        identity = Identity(scheme=AuthScheme.BEARER, token="t")

        attach_identity(request, identity)

        assert identity_from_request(request) is identity

    def test_repr_hides_credentials(self):
        identity = Identity(scheme=AuthScheme.BEARER, token="super-secret")

        assert "super-secret" not in repr(identity)
        assert "bearer" in repr(identity)
