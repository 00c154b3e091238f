"""Error envelope returned by the API on a non-success status."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetailItem(BaseModel):
    """Structured detail attached to an error."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., alias="@type", description="Type URL of the detail")
    reason: str | None = Field(default=None, description="Error reason")
    domain: str | None = Field(default=None, description="Error domain")
    metadata: dict[str, str] | None = Field(default=None, description="Extra metadata")


class ErrorDetail(BaseModel):
    """Error detail in response."""

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    status: str | None = Field(default=None, description="Error status")
    details: list[ErrorDetailItem] | None = Field(default=None, description="Error details")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: ErrorDetail = Field(..., description="Error details")
