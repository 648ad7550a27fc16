"""Composition-root factories.

Centralizes construction of process-wide collaborators so the dispatcher,
middleware and tests obtain them the same way.

Usage:
    from gateway.core.container import get_logger, get_request_validator

    logger = get_logger()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from gateway.core.config import settings

if TYPE_CHECKING:
    from gateway.domain.protocols.logger_protocol import LoggerProtocol
    from gateway.presentation.api.validation import RequestValidator


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here:
    - development/production: ConsoleAdapter (human-readable unless log_json)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from gateway.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
        configure_structlog,
    )

    configure_structlog(use_json=settings.use_json_logs, level=settings.log_level)
    return ConsoleAdapter()


@lru_cache()
def get_request_validator() -> "RequestValidator":
    """Return the shared request validator.

    The validator is stateless, so one instance serves all handlers.
    """
    from gateway.presentation.api.validation import RequestValidator

    return RequestValidator()
