"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Any, Dict, Optional
from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict

from taskflow.domain.models.base import utc_now


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        # Reject unknown fields unless a DTO opts out
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""

    def to_changes(self) -> Dict[str, Any]:
        """Return only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateRequestDTO(RequestDTO):
    """Base class for creation request DTOs."""
    pass


class UpdateRequestDTO(RequestDTO):
    """Base class for update request DTOs."""
    pass


class MessageResponseDTO(BaseDTO):
    """Plain acknowledgement response."""

    message: str = Field(description="Human readable outcome")


class HealthCheckResponseDTO(BaseDTO):
    """Health check response DTO."""

    status: str = Field(description="Service status")
    timestamp: datetime = Field(default_factory=utc_now, description="Check timestamp")
    environment: Optional[str] = Field(default=None, description="Deployment environment")
    version: Optional[str] = Field(default=None, description="Application version")


class ErrorResponseDTO(BaseDTO):
    """Error response DTO."""

    error: str = Field(description="Error type")
    message: str = Field(description="Error message")
    code: Optional[str] = Field(default=None, description="Machine readable error code")
    status_code: int = Field(description="HTTP status code")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(default_factory=utc_now, description="Error timestamp")
