"""
Booking notification use cases.
Validate -> render -> deliver -> report, once per call and without retries.
"""

import logging
import time
from datetime import date, timedelta
from typing import Any, Dict, Optional

from starlette.concurrency import run_in_threadpool

from app.config import Settings
from app.application.use_cases.base_use_case import BaseUseCase
from app.domain.models.base import TransportError
from app.domain.models.booking import (
    BookingRecord,
    NotificationRequest,
    NotificationResult,
    NotificationStatus,
)
from app.domain.services.mail_transport import MailTransport, OutgoingMessage, SendReceipt
from app.infrastructure.email.template_loader import EmailTemplateLoader
from app.infrastructure.validation import BookingRequestValidator


logger = logging.getLogger(__name__)

CONFIRMATION_TEMPLATE = "booking_confirmed.html"
REMINDER_TEMPLATE = "booking_reminder.html"


class BookingEmailComposer:
    """Chooses subject and template for a notification and renders it."""

    def __init__(self, template_loader: EmailTemplateLoader, settings: Settings):
        self.template_loader = template_loader
        self.settings = settings

    def subject_for(self, request: NotificationRequest) -> str:
        name = self.settings.email_from_name
        if request.is_confirmation:
            return f"✨ Payment Confirmed - {name} Booking {request.booking.booking_id or ''}".rstrip()
        return f"📅 Reminder - Your {name} Appointment"

    def render(self, request: NotificationRequest) -> str:
        template = CONFIRMATION_TEMPLATE if request.is_confirmation else REMINDER_TEMPLATE
        return self.template_loader.render_template(template, {"booking": request.booking})

    def compose(self, request: NotificationRequest) -> OutgoingMessage:
        return OutgoingMessage(
            to=request.booking.email,
            subject=self.subject_for(request),
            html=self.render(request),
            from_name=self.settings.email_from_name,
            from_address=self.settings.email_user,
            reply_to=self.settings.support_email,
        )


class SendBookingNotificationUseCase(BaseUseCase[Any, NotificationResult]):
    """Use case for sending a booking confirmation or reminder."""

    def __init__(self, transport: MailTransport, template_loader: EmailTemplateLoader, settings: Settings):
        super().__init__()
        self.transport = transport
        self.composer = BookingEmailComposer(template_loader, settings)

    async def _execute_business_logic(self, payload: Any) -> NotificationResult:
        # Raises ValidationError before anything is rendered or sent
        request = BookingRequestValidator.validate(payload)

        recipient = request.booking.email
        logger.info(f"Sending {request.status.value} email to: {recipient}")

        # Rendering and delivery failures are both reported to the caller
        try:
            message = self.composer.compose(request)
            receipt: SendReceipt = await run_in_threadpool(self.transport.send, message)
        except TransportError as e:
            logger.error(f"Error sending email to {recipient}: {e.message}")
            return NotificationResult.failed(e.message)
        except Exception as e:
            logger.error(f"Error sending email to {recipient}: {e}", exc_info=True)
            return NotificationResult.failed(str(e))

        logger.info(f"Email sent successfully: {receipt.message_id}")
        return NotificationResult.delivered(receipt.message_id, recipient)


def build_test_booking(recipient: Optional[str], today: Optional[date] = None) -> Dict[str, Any]:
    """Synthetic booking one week out, used to check the whole delivery path."""
    today = today or date.today()
    return {
        "bookingId": f"LM{int(time.time() * 1000)}",
        "name": "Test Client",
        "email": recipient,
        "service": "Swedish Massage",
        "date": (today + timedelta(days=7)).isoformat(),
        "time": "14:00",
        "servicePrice": 80,
        "crypto": "BTC",
        "cryptoAmount": "0.0015",
        "specialRequests": "Test booking - please ignore",
    }


class SendTestEmailUseCase(BaseUseCase[Optional[str], str]):
    """Use case for sending the hardcoded test booking through the real transport."""

    def __init__(self, transport: MailTransport, template_loader: EmailTemplateLoader, settings: Settings):
        super().__init__()
        self.transport = transport
        self.settings = settings
        self.composer = BookingEmailComposer(template_loader, settings)

    async def _execute_business_logic(self, recipient: Optional[str]) -> str:
        """Returns the recipient on success; raises TransportError otherwise."""
        recipient = recipient or self.settings.default_test_recipient
        if not recipient:
            raise TransportError("No recipients defined")

        booking = BookingRecord.from_payload(build_test_booking(recipient))
        request = NotificationRequest(booking=booking, status=NotificationStatus.CONFIRMED)

        message = OutgoingMessage(
            to=booking.email,
            subject=f"🧪 Test Email - {self.settings.email_from_name}",
            html=self.composer.render(request),
            from_name=self.settings.email_from_name,
            from_address=self.settings.email_user,
        )

        logger.info(f"Sending test email to: {message.to}")
        try:
            await run_in_threadpool(self.transport.send, message)
        except TransportError:
            raise
        except Exception as e:
            raise TransportError(str(e)) from e
        return booking.email
