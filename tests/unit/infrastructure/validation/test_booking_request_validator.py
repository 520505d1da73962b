"""
Unit tests for inbound booking payload validation.
"""

import pytest

from app.domain.models.base import ValidationError
from app.domain.models.booking import NotificationStatus
from app.infrastructure.validation import BookingRequestValidator


class TestBookingRequestValidator:
    """Test cases for BookingRequestValidator."""

    def test_valid_confirmation(self, booking_payload):
        request = BookingRequestValidator.validate({"booking": booking_payload, "status": "confirmed"})

        assert request.status == NotificationStatus.CONFIRMED
        assert request.booking.email == "ana@example.com"

    def test_status_defaults_to_reminder(self):
        request = BookingRequestValidator.validate({"booking": {"email": "ana@example.com"}})

        assert request.status == NotificationStatus.REMINDER
        assert request.booking.name is None

    @pytest.mark.parametrize("body", [None, [], "booking", {}, {"status": "confirmed"}, {"booking": None}])
    def test_missing_booking(self, body):
        with pytest.raises(ValidationError, match="Missing required booking data") as exc_info:
            BookingRequestValidator.validate(body)
        assert exc_info.value.field == "booking"

    @pytest.mark.parametrize("booking", [{"name": "Ana"}, {"email": ""}, {"email": None}])
    def test_missing_email(self, booking):
        with pytest.raises(ValidationError, match="Missing required booking data") as exc_info:
            BookingRequestValidator.validate({"booking": booking})
        assert exc_info.value.field == "booking.email"

    @pytest.mark.parametrize("email", [
        "not-an-email",
        "ana@localhost",
        "ana @example.com",
        "ana@@example.com",
        "ana@exa mple.com",
        "ana@example.com\n",
        "\nana@example.com",
        "ana@example.com\r\nBcc: x@evil.com",
    ])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError, match="Invalid email address"):
            BookingRequestValidator.validate({"booking": {"email": email}})

    def test_other_fields_are_not_checked(self):
        """The contract is loose: odd values elsewhere still pass."""
        request = BookingRequestValidator.validate({
            "booking": {"email": "ana@example.com", "date": "someday", "time": "later", "servicePrice": "free"},
            "status": "confirmed",
        })

        assert request.booking.date == "someday"
        assert request.booking.service_price == "free"
