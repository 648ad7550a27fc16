"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI (or LOG_JSON=true): JSON renderer for machine parsing

structlog is configured once per process through configure_structlog(); the
container does this before building the first adapter. Adapters only wrap a
(possibly bound) structlog logger.

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping). Any object with the same call signatures is compatible
with LoggerProtocol.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# structlog passes the message as ``event``; context may not reuse the name.
_RESERVED_KEYS = frozenset({"event"})


def configure_structlog(*, use_json: bool = False, level: str = "INFO") -> None:
    """Configure the process-wide structlog pipeline.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name (DEBUG, INFO, ...).
    """
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


def _fields(context: dict[str, Any]) -> dict[str, Any]:
    """Rename context keys structlog claims for itself (``event`` -> ``ctx_event``)."""
    if _RESERVED_KEYS.isdisjoint(context):
        return context
    return {
        (f"ctx_{key}" if key in _RESERVED_KEYS else key): value
        for key, value in context.items()
    }


class ConsoleAdapter:
    """Console logger.

    Args:
        logger: structlog logger to write through. Defaults to
            ``structlog.get_logger()`` under the current configuration.
    """

    def __init__(self, logger: Any = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **_fields(context))

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **_fields(context))

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **_fields(context))

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception details.

        Args:
            message (str): Message text.
            error (BaseException | None): Optional exception instance.
            **context: Structured key-value context.
        """
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.error(message, **_fields(context))

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.critical(message, **_fields(context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter instance with bound context.
        """
        return ConsoleAdapter(self._logger.bind(**_fields(context)))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context (alias for bind)."""
        return self.bind(**context)
