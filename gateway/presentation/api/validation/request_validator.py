"""Request decoding and validation.

RequestValidator turns a request body or query string into an immutable
payload, or into exactly one taxonomy member describing why it could not.

JSON bodies:
    unparsable (including empty)   -> CF-MessageParseError (400)
    unknown field                  -> CF-UnprocessableEntity
                                      'invalid request body: json: unknown field "<name>"'
    value of the wrong JSON type   -> CF-UnprocessableEntity '<Field> must be a <type>'
    anything else                  -> CF-UnprocessableEntity, every message
                                      sorted and joined with ", "

Query strings:
    unsupported key                -> CF-BadQueryParameter listing the supported keys
    value not parsable to its type -> CF-MessageParseError (400)
    constraint violations          -> CF-UnprocessableEntity as above

Decoding is pure; the same input always yields an equal payload.
"""

from typing import TypeVar

from pydantic import ValidationError
from pydantic_core import ErrorDetails
from starlette.datastructures import QueryParams
from starlette.requests import Request

from gateway.core.errors import (
    ApiError,
    message_parse_error,
    unknown_key_error,
    unprocessable_entity_error,
)
from gateway.core.result import Failure, Result, Success
from gateway.presentation.api.validation.payload import KeyedPayload, Payload

P = TypeVar("P", bound=Payload)
K = TypeVar("K", bound=KeyedPayload)

# Pydantic error type prefix -> type name used in client messages
_TYPE_NAMES: dict[str, str] = {
    "string": "string",
    "int": "int",
    "float": "float",
    "bool": "bool",
    "list": "array",
    "set": "array",
    "frozen_set": "array",
    "tuple": "array",
    "dict": "object",
    "model": "object",
    "model_attributes": "object",
}
_TYPE_ERROR_SUFFIXES = ("_type", "_parsing", "_from_float")


def _type_name(error_type: str) -> str | None:
    for suffix in _TYPE_ERROR_SUFFIXES:
        if error_type.endswith(suffix):
            return _TYPE_NAMES.get(error_type.removesuffix(suffix))
    return None


def _field_path(error: ErrorDetails) -> str:
    return ".".join(str(part) for part in error["loc"])


def _titled(path: str) -> str:
    return ".".join(part[:1].upper() + part[1:] for part in path.split("."))


def _message(error: ErrorDetails) -> str:
    message = "cannot be blank" if error["type"] == "missing" else error["msg"]
    path = _field_path(error)
    return f"{path} {message}" if path else message


def aggregate_messages(errors: list[ErrorDetails]) -> str:
    """Join validation messages, sorted, into one detail string."""
    return ", ".join(sorted(_message(error) for error in errors))


class RequestValidator:
    """Decode request bodies and query strings into payloads.

    Stateless; one shared instance serves every handler (see
    gateway.core.container.get_request_validator).
    """

    async def decode_json_payload(
        self, request: Request, payload_type: type[P]
    ) -> Result[P, ApiError]:
        """Decode and validate the JSON body of a request.

        Args:
            request: Incoming request.
            payload_type: Payload model to decode into.

        Returns:
            Success with the payload, or Failure with the taxonomy member.
        """
        return self.decode_json_bytes(await request.body(), payload_type)

    def decode_json_bytes(
        self, body: bytes | str, payload_type: type[P]
    ) -> Result[P, ApiError]:
        """Decode and validate a raw JSON document.

        Values are never coerced between JSON types ("1" is not an int).
        """
        try:
            payload = payload_type.model_validate_json(body, strict=True)
        except ValidationError as e:
            return Failure(error=self._json_failure(e))
        return Success(value=payload)

    def decode_url_values(
        self, request: Request, payload_type: type[K]
    ) -> Result[K, ApiError]:
        """Decode and validate the query string of a request."""
        return self.decode_query(request.query_params, payload_type)

    def decode_query(
        self, values: QueryParams, payload_type: type[K]
    ) -> Result[K, ApiError]:
        """Decode and validate query parameters.

        Args:
            values: Query parameters.
            payload_type: Keyed payload model to decode into.

        Returns:
            Success with the payload, or Failure with the taxonomy member.
        """
        for key in values.keys():
            if not payload_type.is_accepted_key(key):
                return Failure(
                    error=unknown_key_error(
                        ValueError(f"unsupported query parameter: {key}"),
                        payload_type.supported_keys(),
                    )
                )

        try:
            data = payload_type.decode_from_url_values(values)
        except ValueError as e:
            return Failure(error=message_parse_error(e))

        try:
            payload = payload_type.model_validate(data)
        except ValidationError as e:
            errors = e.errors()
            if any(_type_name(error["type"]) for error in errors):
                return Failure(error=message_parse_error(e))
            return Failure(error=unprocessable_entity_error(e, aggregate_messages(errors)))
        return Success(value=payload)

    @staticmethod
    def _json_failure(exc: ValidationError) -> ApiError:
        errors = exc.errors()

        for error in errors:
            if error["type"] == "json_invalid":
                return message_parse_error(exc)
            # Document is valid JSON but not an object
            if not error["loc"] and _type_name(error["type"]) is not None:
                return message_parse_error(exc)

        for error in errors:
            if error["type"] == "extra_forbidden":
                name = error["loc"][-1]
                return unprocessable_entity_error(
                    exc, f'invalid request body: json: unknown field "{name}"'
                )

        for error in errors:
            type_name = _type_name(error["type"])
            if type_name is not None:
                field = _titled(_field_path(error))
                return unprocessable_entity_error(exc, f"{field} must be a {type_name}")

        return unprocessable_entity_error(exc, aggregate_messages(errors))

