from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status

from app.dependencies import get_notifier
from app.orders.notifier import OrderNotifier
from shared.events.schemas import OrderCreated

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/triggers/orders", tags=["triggers"])


@router.post(
    "/created",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Trigger: send the buyer an order confirmation email.",
)
async def order_created(
    body: OrderCreated,
    request: Request,
    notifier: OrderNotifier = Depends(get_notifier),
) -> None:
    # Always 204: a failed email must not make the trigger host redeliver.
    logger.info(
        "Received %s for order %s (event %s)",
        body.event_type, body.order_id, getattr(request.state, "event_id", None),
    )
    await notifier.handle_order_created(body.order_id, body.fields)
