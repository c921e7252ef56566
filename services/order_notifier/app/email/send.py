"""
Mail transport selection.

The transport is built once per process from Settings.mail_provider:
  smtp   aiosmtplib against SMTP_HOST (default: Gmail with an App Password)
  brevo  Brevo transactional REST API

Missing credentials are only warned about here; a send attempt with them
missing fails with TransportFailure and is logged by the notifier.
"""
from __future__ import annotations

import logging
from typing import Protocol

from app.config import Settings
from app.email import brevo, smtp
from app.orders.schemas import OutboundEmail

logger = logging.getLogger(__name__)


class MailTransport(Protocol):
    name: str

    async def send(self, message: OutboundEmail) -> str:
        """Deliver the message and return the transport-assigned message id."""
        ...

    async def aclose(self) -> None:
        ...


def build_transport(settings: Settings) -> MailTransport:
    if settings.mail_provider == "brevo":
        if not brevo.is_configured(settings):
            logger.warning("BREVO_API_KEY is not set; order emails will fail to send")
        return brevo.BrevoTransport(settings)

    if not smtp.is_configured(settings):
        logger.warning("SMTP credentials are not set; order emails will fail to send")
    return smtp.SmtpTransport(settings)
