"""
Request validation package.
"""

from .validators import BookingRequestValidator, MISSING_BOOKING_DATA, INVALID_EMAIL

__all__ = [
    'BookingRequestValidator',
    'MISSING_BOOKING_DATA',
    'INVALID_EMAIL',
]
