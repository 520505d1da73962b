"""
Base exceptions and value objects for the domain layer.
This module contains the foundational classes shared by the notification domain.
"""

import re
from typing import Optional
from abc import ABC, abstractmethod
from dataclasses import dataclass


# Local part "@" domain, domain with at least one dot, no whitespace anywhere.
# Use fullmatch: "$" would also accept a trailing newline.
EMAIL_PATTERN = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when an inbound payload fails validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class TransportError(DomainException):
    """
    Exception raised when the mail transport fails to deliver a message.
    The message is the provider's own error text and is passed through as-is.
    """

    def __init__(self, message: str):
        super().__init__(message, "TRANSPORT_ERROR")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.
    Value objects are immutable and are compared by their values.
    """

    def __post_init__(self):
        """Validate value object after creation."""
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """Validate the value object's state."""
        pass


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object with validation."""

    value: str

    def validate(self) -> None:
        """Validate email format."""
        if not self.value:
            raise ValidationError("Email cannot be empty", "email")

        if not EMAIL_PATTERN.fullmatch(self.value):
            raise ValidationError("Invalid email address", "email")

    def __str__(self) -> str:
        return self.value

    @property
    def domain(self) -> str:
        """Get the domain part of the email."""
        return self.value.rsplit('@', 1)[1]
