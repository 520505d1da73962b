"""
Mail transport capability.
The notification use cases only ever call `send` and observe success or failure.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OutgoingMessage:
    """A fully rendered message ready for delivery."""
    to: str
    subject: str
    html: str
    from_name: str
    from_address: Optional[str] = None
    reply_to: Optional[str] = None
    text: Optional[str] = None

    @property
    def sender(self) -> str:
        return f'"{self.from_name}" <{self.from_address or ""}>'


@dataclass(frozen=True)
class SendReceipt:
    """What the transport reports back after accepting a message."""
    message_id: str


class MailTransport(ABC):
    """
    Mail transport interface.
    Implementations must be safe to share across concurrent requests.
    """

    @abstractmethod
    def send(self, message: OutgoingMessage) -> SendReceipt:
        """
        Deliver a message.
        Raises TransportError on any failure (auth, network, provider rejection).
        """
        pass

    def verify(self) -> bool:
        """
        Check that the transport can reach its provider.
        Raises TransportError when it cannot.
        """
        return True
