import json

import httpx
import pytest

from app.config import Settings
from app.email import brevo
from app.email.send import build_transport
from app.exceptions import TransportFailure
from app.orders.schemas import OutboundEmail

MESSAGE = OutboundEmail(
    sender="orders@vintrade.test",
    recipient="a@x.com",
    subject="Order Confirmation - Desk Lamp",
    html="<p>RM 45.00</p>",
    text="RM 45.00",
)


@pytest.fixture
def brevo_settings() -> Settings:
    return Settings(
        _env_file=None,
        mail_provider="brevo",
        brevo_api_key="xkeysib-test",
        mail_from_email="orders@vintrade.test",
    )


def _transport(settings: Settings, handler) -> brevo.BrevoTransport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return brevo.BrevoTransport(settings, client=client)


@pytest.mark.asyncio
async def test_send_posts_payload_and_returns_message_id(brevo_settings: Settings) -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"messageId": "<2026@smtp-relay.brevo.com>"})

    transport = _transport(brevo_settings, handler)
    message_id = await transport.send(MESSAGE)
    await transport.aclose()

    assert message_id == "<2026@smtp-relay.brevo.com>"
    request = seen[0]
    assert str(request.url) == brevo.BREVO_URL
    assert request.headers["api-key"] == "xkeysib-test"
    body = json.loads(request.content)
    assert body["to"] == [{"email": "a@x.com"}]
    assert body["sender"] == {"email": "orders@vintrade.test", "name": "VinTrade"}
    assert body["subject"] == "Order Confirmation - Desk Lamp"
    assert body["htmlContent"] == "<p>RM 45.00</p>"
    assert body["textContent"] == "RM 45.00"


@pytest.mark.asyncio
async def test_error_status_raises_transport_failure(brevo_settings: Settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"code": "unauthorized", "message": "Key not found"})

    transport = _transport(brevo_settings, handler)
    with pytest.raises(TransportFailure) as exc_info:
        await transport.send(MESSAGE)
    await transport.aclose()
    assert "401" in str(exc_info.value)


@pytest.mark.asyncio
async def test_connection_error_raises_transport_failure(brevo_settings: Settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = _transport(brevo_settings, handler)
    with pytest.raises(TransportFailure):
        await transport.send(MESSAGE)
    await transport.aclose()


def test_build_transport_selects_brevo(brevo_settings: Settings) -> None:
    assert build_transport(brevo_settings).name == "brevo"
