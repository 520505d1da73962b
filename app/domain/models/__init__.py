"""
Domain models for the booking notification service.
This module exports the booking entities, value objects and domain errors.
"""

# Base classes
from .base import (
    DomainException,
    ValidationError,
    TransportError,
    ValueObject,
    Email,
)

# Booking notification models
from .booking import (
    BookingRecord,
    NotificationRequest,
    NotificationResult,
    NotificationStatus,
    utc_timestamp,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "TransportError",
    "ValueObject",
    "Email",
    "BookingRecord",
    "NotificationRequest",
    "NotificationResult",
    "NotificationStatus",
    "utc_timestamp",
]
