"""
Brevo (Sendinblue) transactional email client: async httpx REST calls.

One httpx.AsyncClient is held for the life of the process and closed from the
app lifespan. Any HTTP error status or connection problem raises
TransportFailure; the caller decides what to do with it.
"""
from __future__ import annotations

import httpx

from app.config import Settings
from app.exceptions import TransportFailure
from app.orders.schemas import OutboundEmail

BREVO_URL = "https://api.brevo.com/v3/smtp/email"


def is_configured(settings: Settings) -> bool:
    return bool(settings.brevo_api_key)


def build_payload(message: OutboundEmail, from_name: str) -> dict:
    sender = {"email": message.sender}
    if from_name:
        sender["name"] = from_name
    return {
        "sender": sender,
        "to": [{"email": message.recipient}],
        "subject": message.subject,
        "htmlContent": message.html,
        "textContent": message.text,
    }


class BrevoTransport:
    name = "brevo"

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._client = client or httpx.AsyncClient(timeout=settings.mail_timeout_seconds)

    async def send(self, message: OutboundEmail) -> str:
        payload = build_payload(message, self._settings.mail_from_name)
        try:
            r = await self._client.post(
                BREVO_URL,
                json=payload,
                headers={"api-key": self._settings.brevo_api_key, "Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise TransportFailure(self.name, f"request failed: {exc}") from exc

        if r.status_code >= 400:
            raise TransportFailure(self.name, f"HTTP {r.status_code}: {r.text[:300]}")
        return r.json().get("messageId", "")

    async def aclose(self) -> None:
        await self._client.aclose()
