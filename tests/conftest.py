"""Pytest configuration shared by unit and API tests.

Sets the testing environment before the gateway package reads its
settings, and provides a mock logger plus a small app factory that wires
arbitrary handler groups through the real dispatcher.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")

from collections.abc import Callable, Sequence  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from gateway.core.config import Settings  # noqa: E402
from gateway.main import create_app  # noqa: E402
from gateway.presentation.api.routing import Route  # noqa: E402


class StaticRoutes:
    """Handler group built from fixed route collections (test double)."""

    def __init__(
        self,
        authenticated: Sequence[Route] = (),
        unauthenticated: Sequence[Route] = (),
    ) -> None:
        self._authenticated = tuple(authenticated)
        self._unauthenticated = tuple(unauthenticated)

    def authenticated_routes(self) -> Sequence[Route]:
        return self._authenticated

    def unauthenticated_routes(self) -> Sequence[Route]:
        return self._unauthenticated


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; bind() returns the same mock so calls are observable."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="testing",
        app_name="Test Gateway",
        app_version="9.9.9",
    )


@pytest.fixture
def make_client(
    mock_logger: MagicMock, test_settings: Settings
) -> Callable[..., TestClient]:
    """Build a TestClient around create_app() with the given handler groups."""

    def _make(*routables, raise_server_exceptions: bool = True) -> TestClient:
        app: FastAPI = create_app(
            *routables, settings=test_settings, logger=mock_logger
        )
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make
