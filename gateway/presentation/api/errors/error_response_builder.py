"""Error response builder for the CF error envelope.

Converts taxonomy members into JSON responses. The status, title and code
come from the error kind; only the detail varies per occurrence. Causes
and wrap context never reach the client.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from fastapi.responses import JSONResponse

from gateway.core.errors import ApiError, HandlerError, as_api_error
from gateway.presentation.api.errors.error_envelope import (
    ErrorsResponse,
    PresentedError,
)


class ErrorResponseBuilder:
    """Build error envelope responses.

    Example:
        >>> response = ErrorResponseBuilder.from_api_error(
        ...     not_found_error(None, "App")
        ... )
        >>> response.status_code
        404
    """

    @staticmethod
    def envelope(error: ApiError) -> ErrorsResponse:
        """Build the envelope model for a taxonomy member."""
        return ErrorsResponse(errors=[PresentedError.from_api_error(error)])

    @staticmethod
    def from_api_error(error: ApiError) -> JSONResponse:
        """Convert an ApiError to a JSON response.

        Args:
            error: Taxonomy member to present.

        Returns:
            JSONResponse with the kind's status and the one-entry envelope.
        """
        return JSONResponse(
            status_code=error.http_status,
            content=ErrorResponseBuilder.envelope(error).model_dump(mode="json"),
        )

    @staticmethod
    def from_error(error: HandlerError) -> JSONResponse:
        """Convert any handler error (wrapped or foreign) to a JSON response.

        Errors with no taxonomy member behind them are presented as
        CF-UnknownError.
        """
        return ErrorResponseBuilder.from_api_error(as_api_error(error))
