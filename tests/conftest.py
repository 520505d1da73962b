"""
Shared fixtures: settings isolated from the environment and a recording mail transport.
"""

import pytest

from app.config import Settings
from app.domain.models.base import TransportError
from app.domain.services.mail_transport import MailTransport, OutgoingMessage, SendReceipt


class RecordingTransport(MailTransport):
    """Mail transport double that records messages instead of sending them."""

    def __init__(self, fail_with: Exception = None):
        self.sent = []
        self.fail_with = fail_with

    @property
    def call_count(self) -> int:
        return len(self.sent)

    def send(self, message: OutgoingMessage) -> SendReceipt:
        self.sent.append(message)
        if self.fail_with is not None:
            raise self.fail_with
        return SendReceipt(message_id=f"<mock-{len(self.sent)}@lunamassage.test>")


def make_settings(**overrides) -> Settings:
    values = {
        "environment": "testing",
        "email_user": "bookings@lunamassage.test",
        "email_app_password": "app-password",
        "test_email": "owner@lunamassage.test",
        "verify_transport_on_startup": False,
        "rate_limit_requests": 50,
        "rate_limit_period": 900,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def failing_transport():
    return RecordingTransport(fail_with=TransportError("Invalid login: 535-5.7.8 Username and Password not accepted"))


@pytest.fixture
def booking_payload():
    return {
        "bookingId": "LM1714560000000",
        "name": "Ana Torres",
        "email": "ana@example.com",
        "service": "Hot Stone Massage",
        "date": "2024-05-01",
        "time": "14:00",
        "servicePrice": 120,
        "crypto": "ETH",
        "cryptoAmount": "0.04",
        "specialRequests": "Extra pillow, please",
    }


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def transport_factory():
    return RecordingTransport
