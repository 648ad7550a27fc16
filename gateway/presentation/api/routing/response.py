"""Handler response envelope.

Handlers never write status, headers or body to the wire. They return a
HandlerResponse inside a Success and the dispatcher renders it exactly once.

Rules:
- Headers are an ordered list of pairs; repeated names are kept (e.g.
  several pagination Link headers) and with_header() never replaces.
- The body is serialized as JSON and Content-Type: application/json is set
  only when a body is present; a bodyless response (e.g. 204) carries no
  content type.

Usage:
    return Success(
        value=HandlerResponse(status_code=201)
        .with_body(presenter.for_org(record))
        .with_header("Location", location)
    )
"""

from dataclasses import dataclass, field, replace
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.responses import Response


@dataclass(frozen=True, slots=True)
class HandlerResponse:
    """Status, optional body and ordered multi-valued headers.

    Attributes:
        status_code: HTTP status of the response.
        body: Value to serialize as JSON (None means no body).
        headers: Ordered (name, value) pairs.
    """

    status_code: int
    body: Any = None
    headers: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    def with_body(self, body: Any) -> "HandlerResponse":
        """Return a copy of the envelope carrying the given body."""
        return replace(self, body=body)

    def with_header(self, name: str, value: str) -> "HandlerResponse":
        """Return a copy of the envelope with one more header value.

        Args:
            name: Header name.
            value: Header value; added after any existing values.
        """
        return replace(self, headers=(*self.headers, (name, value)))

    def header_values(self, name: str) -> list[str]:
        """All values set for a header name (case-insensitive), in order."""
        return [v for k, v in self.headers if k.lower() == name.lower()]

    @property
    def has_body(self) -> bool:
        return self.body is not None


def serialize_body(body: Any) -> Any:
    """Convert a response body into JSON-compatible data.

    Pydantic models are dumped by alias in JSON mode; anything else goes
    through FastAPI's jsonable_encoder.
    """
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    return jsonable_encoder(body)


def render_response(envelope: HandlerResponse) -> Response:
    """Render an envelope to a Starlette response.

    Args:
        envelope: Envelope returned by a handler.

    Returns:
        JSONResponse when a body is present, otherwise a bodyless Response
        without Content-Type.
    """
    if envelope.has_body:
        response: Response = JSONResponse(
            status_code=envelope.status_code,
            content=serialize_body(envelope.body),
        )
    else:
        response = Response(status_code=envelope.status_code)

    for name, value in envelope.headers:
        response.headers.append(name, value)
    return response
