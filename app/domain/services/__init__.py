"""
Domain services for the booking notification service.
"""

from .mail_transport import MailTransport, OutgoingMessage, SendReceipt
from .booking_formatting import format_booking_date, format_booking_time, format_amount

__all__ = [
    "MailTransport",
    "OutgoingMessage",
    "SendReceipt",
    "format_booking_date",
    "format_booking_time",
    "format_amount",
]
