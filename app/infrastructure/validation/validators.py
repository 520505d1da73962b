"""
Inbound payload validation for booking notifications.
The contract is deliberately loose: only the booking and its email are required.
"""

from typing import Any

from app.domain.models.base import Email, ValidationError
from app.domain.models.booking import BookingRecord, NotificationRequest, NotificationStatus


MISSING_BOOKING_DATA = "Missing required booking data"
INVALID_EMAIL = "Invalid email address"


class BookingRequestValidator:
    """Turns a raw request body into a NotificationRequest or raises ValidationError."""

    @staticmethod
    def validate(body: Any) -> NotificationRequest:
        """
        Validate a `{booking, status}` body.

        Raises:
            ValidationError: booking or booking.email missing, or email malformed
        """
        if not isinstance(body, dict):
            raise ValidationError(MISSING_BOOKING_DATA, "booking")

        booking = body.get("booking")
        if not isinstance(booking, dict) or not booking:
            raise ValidationError(MISSING_BOOKING_DATA, "booking")

        email = booking.get("email")
        if not email:
            raise ValidationError(MISSING_BOOKING_DATA, "booking.email")

        try:
            Email(str(email))
        except ValidationError:
            raise ValidationError(INVALID_EMAIL, "booking.email")

        return NotificationRequest(
            booking=BookingRecord.from_payload(booking),
            status=NotificationStatus.from_value(body.get("status")),
        )
