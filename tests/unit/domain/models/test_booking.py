"""
Unit tests for booking notification domain models.
"""

import re
from datetime import datetime, timezone

import pytest

from app.domain.models.base import Email, ValidationError
from app.domain.models.booking import (
    BookingRecord,
    NotificationRequest,
    NotificationResult,
    NotificationStatus,
    utc_timestamp,
)


class TestBookingRecord:
    """Test cases for BookingRecord."""

    def test_from_payload_maps_camel_case_fields(self, booking_payload):
        """Test building a record from the wire payload."""
        booking = BookingRecord.from_payload(booking_payload)

        assert booking.booking_id == "LM1714560000000"
        assert booking.name == "Ana Torres"
        assert booking.email == "ana@example.com"
        assert booking.date == "2024-05-01"
        assert booking.time == "14:00"
        assert booking.service_price == 120
        assert booking.crypto == "ETH"
        assert booking.crypto_amount == "0.04"
        assert booking.special_requests == "Extra pillow, please"

    def test_from_payload_only_email(self):
        """Test that every field but email may be absent."""
        booking = BookingRecord.from_payload({"email": "solo@example.com"})

        assert booking.email == "solo@example.com"
        assert booking.booking_id is None
        assert booking.date is None
        assert booking.service_price is None
        assert booking.has_special_requests is False

    def test_from_payload_ignores_unknown_keys_and_stringifies(self):
        """Test unknown keys are dropped and scalar values become strings."""
        booking = BookingRecord.from_payload({
            "email": "a@b.co",
            "bookingId": 42,
            "cryptoAmount": 0.5,
            "unexpected": "value",
        })

        assert booking.booking_id == "42"
        assert booking.crypto_amount == "0.5"
        assert not hasattr(booking, "unexpected")

    def test_record_is_immutable(self):
        """Test that a received booking cannot be changed."""
        booking = BookingRecord(email="a@b.co")
        with pytest.raises(Exception):
            booking.email = "other@b.co"

    def test_special_requests_flag(self):
        """Test special requests detection."""
        assert BookingRecord(email="a@b.co", special_requests="Quiet room").has_special_requests
        assert not BookingRecord(email="a@b.co", special_requests="").has_special_requests


class TestNotificationStatus:
    """Test cases for NotificationStatus."""

    @pytest.mark.parametrize("value", ["reminder", "pending", None, "", "CONFIRMED"])
    def test_anything_but_confirmed_is_reminder(self, value):
        assert NotificationStatus.from_value(value) == NotificationStatus.REMINDER

    def test_confirmed(self):
        status = NotificationStatus.from_value("confirmed")
        request = NotificationRequest(booking=BookingRecord(email="a@b.co"), status=status)

        assert status == NotificationStatus.CONFIRMED
        assert request.is_confirmation is True


class TestNotificationResult:
    """Test cases for NotificationResult."""

    def test_delivered_result(self):
        result = NotificationResult.delivered("<abc@lunamassage.test>", "ana@example.com")
        body = result.to_dict()

        assert body["success"] is True
        assert body["messageId"] == "<abc@lunamassage.test>"
        assert body["recipient"] == "ana@example.com"
        assert "timestamp" in body
        assert "error" not in body

    def test_failed_result(self):
        body = NotificationResult.failed("Connection refused").to_dict()

        assert body == {
            "success": False,
            "error": "Connection refused",
            "timestamp": body["timestamp"],
        }


class TestUtcTimestamp:
    """Test cases for timestamp formatting."""

    def test_fixed_moment(self):
        moment = datetime(2024, 5, 1, 12, 30, 5, 123456, tzinfo=timezone.utc)
        assert utc_timestamp(moment) == "2024-05-01T12:30:05.123Z"

    def test_now_has_millisecond_precision(self):
        assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", utc_timestamp())


class TestEmail:
    """Test cases for the Email value object."""

    @pytest.mark.parametrize("value", ["ana@example.com", "first.last+tag@mail.example.org"])
    def test_valid_addresses(self, value):
        assert str(Email(value)) == value

    @pytest.mark.parametrize("value", [
        "not-an-email",
        "no-dot@domain",
        "two words@example.com",
        "@example.com",
        "ana@example.com\n",
    ])
    def test_invalid_addresses(self, value):
        with pytest.raises(ValidationError, match="Invalid email address"):
            Email(value)

    def test_empty_address(self):
        with pytest.raises(ValidationError, match="Email cannot be empty"):
            Email("")

    def test_domain(self):
        assert Email("ana@example.com").domain == "example.com"
