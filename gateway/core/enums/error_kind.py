"""Error taxonomy kinds and their wire contract.

Every failure the gateway emits resolves to exactly one ErrorKind. Each kind
has a fixed HTTP status, title and numeric code; these three values are part
of the public API contract and must never change for an existing kind.

Kinds:
- UNKNOWN: Uncategorized failure (500). Detail is never taken from the cause.
- INVALID_AUTH_TOKEN: Credential present but unusable (401)
- NOT_AUTHENTICATED: No identity on an authenticated route (401)
- NOT_AUTHORIZED: Forbidden (403)
- RESOURCE_NOT_FOUND: Missing resource or unknown route (404)
- MESSAGE_PARSE_ERROR: Malformed request body (400)
- UNKNOWN_QUERY_KEY: Unsupported query parameter (400)
- INVALID_REQUEST: Request rejected before business validation (400)
- UNPROCESSABLE_ENTITY: Semantic validation failure (422)
- UNIQUENESS_ERROR: Uniqueness constraint violated (422)
- BACKEND_UNAVAILABLE: Downstream storage outage (502)
- PACKAGE_BITS_ALREADY_UPLOADED: Second upload of package bits (400)
"""

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus


@dataclass(frozen=True, slots=True)
class ErrorContract:
    """Fixed wire contract of an error kind.

    Attributes:
        http_status: HTTP status code of the response.
        title: Stable error title (e.g. "CF-ResourceNotFound").
        code: Stable numeric error code.
    """

    http_status: int
    title: str
    code: int


class ErrorKind(Enum):
    """Closed set of error kinds understood by the dispatcher."""

    UNKNOWN = "unknown"
    INVALID_AUTH_TOKEN = "invalid_auth_token"
    NOT_AUTHENTICATED = "not_authenticated"
    NOT_AUTHORIZED = "not_authorized"
    RESOURCE_NOT_FOUND = "resource_not_found"
    MESSAGE_PARSE_ERROR = "message_parse_error"
    UNKNOWN_QUERY_KEY = "unknown_query_key"
    INVALID_REQUEST = "invalid_request"
    UNPROCESSABLE_ENTITY = "unprocessable_entity"
    UNIQUENESS_ERROR = "uniqueness_error"
    BACKEND_UNAVAILABLE = "backend_unavailable"
    PACKAGE_BITS_ALREADY_UPLOADED = "package_bits_already_uploaded"

    @property
    def contract(self) -> ErrorContract:
        """Wire contract (status, title, code) for this kind."""
        return ERROR_CONTRACTS[self]

    @property
    def http_status(self) -> int:
        return ERROR_CONTRACTS[self].http_status

    @property
    def title(self) -> str:
        return ERROR_CONTRACTS[self].title

    @property
    def code(self) -> int:
        return ERROR_CONTRACTS[self].code


ERROR_CONTRACTS: dict[ErrorKind, ErrorContract] = {
    ErrorKind.UNKNOWN: ErrorContract(
        HTTPStatus.INTERNAL_SERVER_ERROR, "UnknownError", 10001
    ),
    ErrorKind.INVALID_AUTH_TOKEN: ErrorContract(
        HTTPStatus.UNAUTHORIZED, "CF-InvalidAuthToken", 1000
    ),
    ErrorKind.NOT_AUTHENTICATED: ErrorContract(
        HTTPStatus.UNAUTHORIZED, "CF-NotAuthenticated", 10002
    ),
    ErrorKind.NOT_AUTHORIZED: ErrorContract(
        HTTPStatus.FORBIDDEN, "CF-NotAuthorized", 10003
    ),
    ErrorKind.RESOURCE_NOT_FOUND: ErrorContract(
        HTTPStatus.NOT_FOUND, "CF-ResourceNotFound", 10010
    ),
    ErrorKind.MESSAGE_PARSE_ERROR: ErrorContract(
        HTTPStatus.BAD_REQUEST, "CF-MessageParseError", 1001
    ),
    ErrorKind.UNKNOWN_QUERY_KEY: ErrorContract(
        HTTPStatus.BAD_REQUEST, "CF-BadQueryParameter", 10005
    ),
    ErrorKind.INVALID_REQUEST: ErrorContract(
        HTTPStatus.BAD_REQUEST, "CF-InvalidRequest", 10004
    ),
    ErrorKind.UNPROCESSABLE_ENTITY: ErrorContract(
        HTTPStatus.UNPROCESSABLE_ENTITY, "CF-UnprocessableEntity", 10008
    ),
    ErrorKind.UNIQUENESS_ERROR: ErrorContract(
        HTTPStatus.UNPROCESSABLE_ENTITY, "CF-UniquenessError", 10016
    ),
    ErrorKind.BACKEND_UNAVAILABLE: ErrorContract(
        HTTPStatus.BAD_GATEWAY, "CF-BlobstoreUnavailable", 150006
    ),
    ErrorKind.PACKAGE_BITS_ALREADY_UPLOADED: ErrorContract(
        HTTPStatus.BAD_REQUEST, "CF-PackageBitsAlreadyUploaded", 150004
    ),
}
