"""
Human-readable formatting for booking fields shown in emails.
"""

from datetime import date, datetime
from typing import Any, Optional, Union

NOT_SPECIFIED = "Not specified"

# Fixed English names so output never depends on the process locale
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _parse_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def format_booking_date(value: Optional[Union[str, date]]) -> str:
    """
    Long-form en-US date, e.g. '2024-05-01' -> 'Wednesday, May 1, 2024'.
    Missing dates render as 'Not specified'; unparseable ones are shown as given.
    """
    if not value:
        return NOT_SPECIFIED

    if isinstance(value, datetime):
        parsed = value.date()
    elif isinstance(value, date):
        parsed = value
    else:
        parsed = _parse_date(str(value).strip())
        if parsed is None:
            return str(value)

    return f"{WEEKDAYS[parsed.weekday()]}, {MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def format_booking_time(value: Optional[str]) -> str:
    """
    12-hour clock with AM/PM, e.g. '14:00' -> '2:00 PM', '00:30' -> '12:30 AM'.
    Missing times render as 'Not specified'; unparseable ones are shown as given.
    """
    if not value:
        return NOT_SPECIFIED

    hours, sep, minutes = str(value).strip().partition(":")
    try:
        hour = int(hours)
    except ValueError:
        return str(value)
    if not sep or not 0 <= hour <= 23:
        return str(value)

    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minutes} {suffix}"


def format_amount(value: Any) -> str:
    """Render a price the way it was sent: 80 -> '80', 80.5 -> '80.5'."""
    if value is None or value == "":
        return NOT_SPECIFIED
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
