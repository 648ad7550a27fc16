"""Error envelope schema.

Every failure leaves the gateway as:

    {"errors": [{"title": "CF-ResourceNotFound",
                 "detail": "App not found. Ensure it exists and you have access to it.",
                 "code": 10010}]}

The list always holds exactly one entry, and key order is title, detail,
code.
"""

from pydantic import BaseModel, ConfigDict, Field

from gateway.core.errors import ApiError


class PresentedError(BaseModel):
    """Single entry of the error envelope."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Stable error title", examples=["CF-ResourceNotFound"])
    detail: str = Field(..., description="Human-readable detail")
    code: int = Field(..., description="Stable numeric error code", examples=[10010])

    @classmethod
    def from_api_error(cls, error: ApiError) -> "PresentedError":
        return cls(title=error.title, detail=error.detail, code=error.code)


class ErrorsResponse(BaseModel):
    """Error envelope wrapping the presented error."""

    model_config = ConfigDict(frozen=True)

    errors: list[PresentedError]
