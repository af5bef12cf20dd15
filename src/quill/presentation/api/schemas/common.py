"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "Post 'abc' not found", "code": "POST_NOT_FOUND"},
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    api_versions: list[str] = Field(..., description="Mounted API versions")
