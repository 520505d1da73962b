"""
Application layer use cases.
Business logic for booking notifications.
"""

from .base_use_case import BaseUseCase
from .notification_use_cases import (
    BookingEmailComposer,
    SendBookingNotificationUseCase,
    SendTestEmailUseCase,
    build_test_booking,
)

__all__ = [
    "BaseUseCase",
    "BookingEmailComposer",
    "SendBookingNotificationUseCase",
    "SendTestEmailUseCase",
    "build_test_booking",
]
