"""E-mail delivery of finished reports."""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from njt_departures.domain.ports.report_notifier import ReportNotifier

logger = logging.getLogger(__name__)


class EmailNotifier(ReportNotifier):
    """Sends the report text as a plain-text e-mail over SMTP."""

    def __init__(
        self,
        sender: str,
        recipient: str,
        host: str = "localhost",
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
    ) -> None:
        """Initialize with addresses and SMTP connection settings."""
        self._sender = sender
        self._recipient = recipient
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._use_tls = use_tls

    def build_message(self, subject: str, body: str) -> EmailMessage:
        """Build the message carrying the report unchanged."""
        message = EmailMessage()
        message["From"] = self._sender
        message["To"] = self._recipient
        message["Subject"] = subject
        message.set_content(body)
        return message

    def _send_blocking(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port) as smtp:
            if self._use_tls:
                smtp.starttls()
            if self._username and self._password:
                smtp.login(self._username, self._password)
            smtp.send_message(message)

    async def send(self, subject: str, body: str) -> None:
        """Send the report; SMTP errors propagate to the caller."""
        message = self.build_message(subject, body)
        await asyncio.to_thread(self._send_blocking, message)
        logger.info(f"Report sent to {self._recipient}")
