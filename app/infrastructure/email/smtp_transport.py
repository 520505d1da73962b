"""
SMTP mail transport.
Handles SMTP connections and MIME assembly for outbound notifications.
"""

import re
import smtplib
import logging
from typing import Optional
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import formataddr, make_msgid

from app.config import Settings
from app.domain.models.base import TransportError
from app.domain.services.mail_transport import MailTransport, OutgoingMessage, SendReceipt


logger = logging.getLogger(__name__)


class SMTPMailTransport(MailTransport):
    """Delivers messages through an authenticated STARTTLS SMTP server."""

    def __init__(
        self,
        host: str,
        port: int,
        user: Optional[str],
        password: Optional[str],
        timeout: Optional[float] = None
    ):
        self.smtp_host = host
        self.smtp_port = port
        self.smtp_user = user
        self.smtp_password = password
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "SMTPMailTransport":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            user=settings.email_user,
            password=settings.email_app_password,
            timeout=settings.smtp_timeout,
        )

    def send(self, message: OutgoingMessage) -> SendReceipt:
        """
        Send an email message.

        Args:
            message: Rendered message to deliver

        Returns:
            Receipt carrying the generated Message-ID
        """
        if not self._is_smtp_configured():
            raise TransportError("SMTP credentials are not configured (EMAIL_USER / EMAIL_APP_PASSWORD)")
        if not message.to:
            raise TransportError("No recipients defined")

        mime_message = self._create_mime_message(message)

        try:
            with self._connect() as server:
                server.send_message(mime_message, to_addrs=[message.to])
        except (smtplib.SMTPException, OSError) as e:
            raise TransportError(str(e)) from e

        logger.info(f"SMTP accepted message {mime_message['Message-ID']} for {message.to}")
        return SendReceipt(message_id=mime_message["Message-ID"])

    def verify(self) -> bool:
        """Open a session and authenticate without sending anything."""
        if not self._is_smtp_configured():
            raise TransportError("SMTP credentials are not configured (EMAIL_USER / EMAIL_APP_PASSWORD)")

        try:
            with self._connect():
                pass
        except (smtplib.SMTPException, OSError) as e:
            raise TransportError(str(e)) from e
        return True

    def _connect(self) -> smtplib.SMTP:
        if self.timeout:
            server = smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout)
        else:
            server = smtplib.SMTP(self.smtp_host, self.smtp_port)
        try:
            server.starttls()
            server.login(self.smtp_user, self.smtp_password)
        except Exception:
            server.close()
            raise
        return server

    def _create_mime_message(self, message: OutgoingMessage) -> MIMEMultipart:
        """Create MIME message from email data."""
        from_address = message.from_address or self.smtp_user

        mime_msg = MIMEMultipart("alternative")

        # Headers
        mime_msg["Subject"] = message.subject
        mime_msg["From"] = formataddr((message.from_name, from_address))
        mime_msg["To"] = message.to
        if message.reply_to:
            mime_msg["Reply-To"] = message.reply_to
        mime_msg["Message-ID"] = make_msgid(domain=from_address.rsplit("@", 1)[-1])

        # Content
        text_content = message.text or self._html_to_text(message.html)
        mime_msg.attach(MIMEText(text_content, "plain", "utf-8"))
        mime_msg.attach(MIMEText(message.html, "html", "utf-8"))

        return mime_msg

    @staticmethod
    def _html_to_text(html_content: str) -> str:
        """Strip HTML tags for the plain-text alternative."""
        without_styles = re.sub(r'<style[^>]*>.*?</style>', '', html_content, flags=re.S | re.I)
        text = re.sub(r'<[^>]+>', '', without_styles)
        return re.sub(r'\n\s*\n+', '\n\n', text).strip()

    def _is_smtp_configured(self) -> bool:
        """Check if SMTP is properly configured."""
        return all([
            self.smtp_host,
            self.smtp_user,
            self.smtp_password
        ])
