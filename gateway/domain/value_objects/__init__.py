"""Domain value objects.

Usage:
    from gateway.domain.value_objects import AuthScheme, Identity
"""

from gateway.domain.value_objects.identity import AuthScheme, Identity

__all__ = ["AuthScheme", "Identity"]
