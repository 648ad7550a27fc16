"""Built-in handler groups."""

from gateway.presentation.api.handlers.system import SystemHandler

__all__ = ["SystemHandler"]
