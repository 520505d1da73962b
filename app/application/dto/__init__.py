"""
Data transfer objects for the application layer.
"""

from .base_dto import BaseDTO, ResponseDTO
from .notification_dto import (
    NotificationResponseDTO,
    TestEmailResponseDTO,
    HealthResponseDTO,
    ErrorResponseDTO,
)

__all__ = [
    "BaseDTO",
    "ResponseDTO",
    "NotificationResponseDTO",
    "TestEmailResponseDTO",
    "HealthResponseDTO",
    "ErrorResponseDTO",
]
