"""
Base DTOs for the application layer.
Provides common configuration for response data transfer objects.
"""

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        extra="forbid",
    )


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""
    pass
