"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request model for registration and referrer update."""

    referrer: str | None = Field(
        default=None, min_length=1, description="Identity of the referrer, if any"
    )


class RegistrationResponse(BaseModel):
    """Response model for a registration record."""

    address: str
    referrer: str | None


class ConfigResponse(BaseModel):
    """Response model for the service configuration."""

    admin: str
    deadline: int


class UpdateConfigRequest(BaseModel):
    """Request model for changing the registration deadline."""

    deadline: int = Field(..., description="Registration deadline in epoch milliseconds")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
