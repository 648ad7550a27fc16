"""Core enums package.

Usage:
    from gateway.core.enums import ErrorKind, Environment
"""

from gateway.core.enums.environment import Environment
from gateway.core.enums.error_kind import ERROR_CONTRACTS, ErrorContract, ErrorKind

__all__ = ["ERROR_CONTRACTS", "Environment", "ErrorContract", "ErrorKind"]
