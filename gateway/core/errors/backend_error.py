"""Errors raised by the backing store client.

The cluster-orchestration store is an external collaborator; its client
raises BackendError with a coarse status. from_backend_error() (see
translation) maps these statuses onto the taxonomy.
"""

from enum import Enum


class BackendStatus(Enum):
    """Coarse outcome reported by the backing store."""

    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


class BackendError(Exception):
    """Failure reported by the backing store.

    Attributes:
        status: Coarse failure status.
        message: Message reported by the store.
    """

    def __init__(self, status: BackendStatus, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
