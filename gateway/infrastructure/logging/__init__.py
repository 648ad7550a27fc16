"""Logging adapters.

Usage:
    from gateway.infrastructure.logging import ConsoleAdapter, configure_structlog
"""

from gateway.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
    configure_structlog,
)

__all__ = ["ConsoleAdapter", "configure_structlog"]
