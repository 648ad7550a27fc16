"""Error presentation: envelope schema, response builder and global handlers."""

from gateway.presentation.api.errors.error_envelope import (
    ErrorsResponse,
    PresentedError,
)
from gateway.presentation.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from gateway.presentation.api.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "ErrorResponseBuilder",
    "ErrorsResponse",
    "PresentedError",
    "register_exception_handlers",
]
