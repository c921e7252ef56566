from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.exceptions import TransportFailure
from app.main import create_app
from app.orders.notifier import OrderNotifier
from app.orders.schemas import OutboundEmail


class FakeStore:
    """In-memory DocumentStore: {collection: {doc_id: fields}}."""

    def __init__(self, docs: dict[str, dict[str, dict[str, Any]]] | None = None) -> None:
        self.docs = docs or {}
        self.lookups: list[tuple[str, str]] = []
        self.error: Exception | None = None
        self.closed = False

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        self.lookups.append((collection, doc_id))
        if self.error is not None:
            raise self.error
        doc = self.docs.get(collection, {}).get(doc_id)
        return dict(doc) if doc is not None else None

    async def aclose(self) -> None:
        self.closed = True


class FakeTransport:
    name = "fake"

    def __init__(self) -> None:
        self.sent: list[OutboundEmail] = []
        self.error: Exception | None = None
        self.closed = False

    async def send(self, message: OutboundEmail) -> str:
        if self.error is not None:
            raise self.error
        self.sent.append(message)
        return f"<msg-{len(self.sent)}@test>"

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        smtp_username="orders@vintrade.test",
        smtp_password="app-password",
    )


@pytest.fixture
def store() -> FakeStore:
    return FakeStore(
        {
            "users": {
                "u1": {"email": "a@x.com", "displayName": "Amy"},
                "u2": {"displayName": "Sam"},
                "u3": {"email": "seller@x.com"},
                "u4": {"displayName": "No Email"},
                "u5": {},
            }
        }
    )


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def failing_transport() -> FakeTransport:
    t = FakeTransport()
    t.error = TransportFailure("fake", "535 authentication failed")
    return t


@pytest.fixture
def notifier(store: FakeStore, transport: FakeTransport, settings: Settings) -> OrderNotifier:
    return OrderNotifier(store, transport, settings)


@pytest.fixture
def client(notifier: OrderNotifier, settings: Settings) -> Generator[TestClient, None, None]:
    app = create_app(settings=settings, notifier=notifier)
    with TestClient(app) as c:
        yield c
