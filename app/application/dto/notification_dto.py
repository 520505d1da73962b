"""
Response DTOs for the notification endpoints.
Field aliases match the camelCase wire format.
"""

from typing import Optional
from pydantic import Field

from .base_dto import ResponseDTO


class NotificationResponseDTO(ResponseDTO):
    """Outcome of POST /send-confirmation."""

    success: bool
    message_id: Optional[str] = Field(default=None, alias="messageId")
    recipient: Optional[str] = None
    error: Optional[str] = None
    timestamp: Optional[str] = None


class TestEmailResponseDTO(ResponseDTO):
    """Outcome of GET /test."""

    success: bool
    message: Optional[str] = None
    to: Optional[str] = None
    error: Optional[str] = None


class HealthResponseDTO(ResponseDTO):
    """Liveness information."""

    status: str = "ok"
    service: str
    timestamp: str


class ErrorResponseDTO(ResponseDTO):
    """Generic error body for 404/429/500 responses."""

    error: str
