import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import BaseModel

from app.config import Settings
from app.email.send import build_transport
from app.orders.notifier import OrderNotifier
from app.orders.router import router as orders_router
from app.store.documents import FirestoreDocumentStore
from shared.middleware.error_handler import error_envelope_middleware
from shared.middleware.event_id import event_id_middleware

logger = logging.getLogger(__name__)


_DESCRIPTION = """
## Order Notifier

Receives order-created events from the document-store trigger and emails the
buyer an order confirmation (HTML + plain text).

The trigger endpoint answers `204` for every well-formed event. Whether the
email went out is only visible in the logs: a failed notification must never
make the trigger host retry or flag the order.
"""


# ── Health schema ─────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: str
    service: str


# ── App factory ───────────────────────────────────────────────────────────────

def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s:%(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    if app.state.notifier is not None:
        yield
        return

    # Built once per process; every invocation shares these handles.
    store = FirestoreDocumentStore.from_settings(settings)
    transport = build_transport(settings)
    app.state.notifier = OrderNotifier(store, transport, settings)
    logger.info("Order notifier ready (mail provider: %s)", transport.name)
    try:
        yield
    finally:
        try:
            await transport.aclose()
        finally:
            await store.aclose()


def create_app(
    settings: Settings | None = None,
    notifier: OrderNotifier | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)
    app = FastAPI(
        title="Order Notifier",
        version="1.0.0",
        description=_DESCRIPTION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.notifier = notifier

    # Last added = outermost: error envelope sees the event id set inside it.
    app.middleware("http")(event_id_middleware)
    app.middleware("http")(error_envelope_middleware)

    app.include_router(orders_router, prefix="/api/v1")

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="order-notifier")

    return app


app = create_app()
