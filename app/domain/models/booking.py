"""
Booking notification domain models.
A booking only lives for the duration of one request; nothing here is persisted.
"""

from datetime import datetime, timezone
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class NotificationStatus(str, Enum):
    """Kinds of booking notification."""
    CONFIRMED = "confirmed"
    REMINDER = "reminder"

    @classmethod
    def from_value(cls, value: Any) -> "NotificationStatus":
        """Anything other than 'confirmed' is treated as a reminder."""
        return cls.CONFIRMED if value == cls.CONFIRMED.value else cls.REMINDER


@dataclass(frozen=True)
class BookingRecord:
    """
    A client's reserved appointment with its payment and contact details.
    Only the email is guaranteed; every other field may be absent.
    """

    email: str
    booking_id: Optional[str] = None
    name: Optional[str] = None
    service: Optional[str] = None
    date: Optional[str] = None  # calendar date, YYYY-MM-DD
    time: Optional[str] = None  # HH:MM, 24h
    service_price: Optional[Union[int, float, str]] = None
    crypto: Optional[str] = None  # currency code, e.g. BTC
    crypto_amount: Optional[str] = None
    special_requests: Optional[str] = None

    # Wire name -> attribute name
    FIELD_ALIASES = {
        "bookingId": "booking_id",
        "name": "name",
        "email": "email",
        "service": "service",
        "date": "date",
        "time": "time",
        "servicePrice": "service_price",
        "crypto": "crypto",
        "cryptoAmount": "crypto_amount",
        "specialRequests": "special_requests",
    }

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "BookingRecord":
        """Build a record from the camelCase JSON payload, ignoring unknown keys."""
        values = {}
        for wire_name, attr in cls.FIELD_ALIASES.items():
            value = data.get(wire_name)
            if value is None:
                continue
            if attr != "service_price" and not isinstance(value, str):
                value = str(value)
            values[attr] = value
        return cls(**values)

    @property
    def has_special_requests(self) -> bool:
        return bool(self.special_requests)


@dataclass(frozen=True)
class NotificationRequest:
    """A booking plus the kind of notification to send for it."""

    booking: BookingRecord
    status: NotificationStatus = NotificationStatus.REMINDER

    @property
    def is_confirmation(self) -> bool:
        return self.status == NotificationStatus.CONFIRMED


@dataclass
class NotificationResult:
    """Outcome of one notification attempt, returned to the caller."""

    success: bool
    message_id: Optional[str] = None
    recipient: Optional[str] = None
    error: Optional[str] = None
    timestamp: Optional[str] = None

    @classmethod
    def delivered(cls, message_id: str, recipient: str) -> "NotificationResult":
        return cls(success=True, message_id=message_id, recipient=recipient, timestamp=utc_timestamp())

    @classmethod
    def failed(cls, error: str) -> "NotificationResult":
        return cls(success=False, error=error, timestamp=utc_timestamp())

    def to_dict(self) -> Dict[str, Any]:
        """camelCase response body; unset fields are left out."""
        data = {
            "success": self.success,
            "messageId": self.message_id,
            "recipient": self.recipient,
            "error": self.error,
            "timestamp": self.timestamp,
        }
        return {key: value for key, value in data.items() if value is not None}
