"""
Async SMTP email delivery via aiosmtplib (default provider).

Sends multipart/alternative (plain text + HTML) messages with STARTTLS.
Returns the generated Message-ID on success and raises TransportFailure on any
SMTP or connection error.
"""
from __future__ import annotations

from email.message import EmailMessage
from email.utils import formataddr, make_msgid

import aiosmtplib

from app.config import Settings
from app.exceptions import TransportFailure
from app.orders.schemas import OutboundEmail


def is_configured(settings: Settings) -> bool:
    """Return True when SMTP host and credentials are present."""
    return bool(settings.smtp_host and settings.smtp_username)


def build_message(message: OutboundEmail, from_name: str) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = formataddr((from_name, message.sender)) if from_name else message.sender
    msg["To"] = message.recipient
    msg["Subject"] = message.subject
    domain = message.sender.rpartition("@")[2] or None
    msg["Message-ID"] = make_msgid(domain=domain)
    msg.set_content(message.text)
    msg.add_alternative(message.html, subtype="html")
    return msg


class SmtpTransport:
    name = "smtp"

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def send(self, message: OutboundEmail) -> str:
        s = self._settings
        msg = build_message(message, s.mail_from_name)
        try:
            await aiosmtplib.send(
                msg,
                hostname=s.smtp_host,
                port=s.smtp_port,
                username=s.smtp_username or None,
                password=s.smtp_password or None,
                start_tls=s.smtp_start_tls,
                timeout=s.mail_timeout_seconds,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            raise TransportFailure(self.name, str(exc)) from exc
        return msg["Message-ID"]

    async def aclose(self) -> None:
        # aiosmtplib.send opens and closes its own connection per message
        return None
