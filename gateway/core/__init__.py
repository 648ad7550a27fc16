"""Core shared kernel.

Foundational pieces used across all layers:
- Result types for railway-oriented programming
- The error taxonomy and its translation rules
- Settings

The core module has NO dependencies on other application layers.
"""

from gateway.core.enums import ErrorKind
from gateway.core.errors import ApiError, HandlerError, WrappedError
from gateway.core.result import Failure, Result, Success

__all__ = [
    "ApiError",
    "ErrorKind",
    "Failure",
    "HandlerError",
    "Result",
    "Success",
    "WrappedError",
]
