"""
Email and notification infrastructure.
Handles email templates and SMTP delivery.
"""

from .smtp_transport import SMTPMailTransport
from .template_loader import EmailTemplateLoader

__all__ = [
    "SMTPMailTransport",
    "EmailTemplateLoader"
]
