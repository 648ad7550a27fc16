"""Request decoding and validation.

Exports:
    Payload / KeyedPayload: Base models for bodies and query strings
    RequestValidator: Decodes requests into payloads or taxonomy members
"""

from gateway.presentation.api.validation.payload import (
    KeyedPayload,
    Payload,
    split_list_param,
)
from gateway.presentation.api.validation.request_validator import (
    RequestValidator,
    aggregate_messages,
)

__all__ = [
    "KeyedPayload",
    "Payload",
    "RequestValidator",
    "aggregate_messages",
    "split_list_param",
]
