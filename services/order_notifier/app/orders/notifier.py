"""
Order confirmation notifier.

Flow per order-created event:
  1. Parse the order snapshot (defaults: productTitle "Product", amount 0).
  2. Look up the buyer; no buyerId, no document or no email ends the run.
  3. Look up the seller when sellerId is set; any gap falls back to "Seller".
  4. Render subject + HTML + text and hand one OutboundEmail to the transport.
  5. Log recipient and message id.

handle_order_created() never raises. Every failure is caught by the single
boundary in that method, logged with the order id and dropped, because the
order is already committed and a failed email must not fail the trigger.
Redelivered triggers send the email again; there is no dedup.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from app.config import Settings
from app.email.send import MailTransport
from app.exceptions import (
    MissingBuyerId,
    MissingContact,
    NotificationError,
    RecordNotFound,
    TransportFailure,
)
from app.orders import templates
from app.orders.formatting import buyer_greeting_name, format_price, seller_label
from app.orders.schemas import OrderEvent, OutboundEmail, UserRecord
from app.store.documents import DocumentStore

logger = logging.getLogger(__name__)


class OrderNotifier:
    def __init__(
        self,
        store: DocumentStore,
        transport: MailTransport,
        settings: Settings,
    ) -> None:
        self._store = store
        self._transport = transport
        self._settings = settings

    async def handle_order_created(self, order_id: str, fields: Mapping[str, Any]) -> None:
        try:
            recipient, message_id = await self._notify(order_id, fields)
        except TransportFailure as exc:
            logger.error(
                "Order %s: confirmation email not sent (%s): %s", order_id, exc.kind, exc
            )
        except NotificationError as exc:
            logger.warning(
                "Order %s: confirmation email skipped (%s): %s", order_id, exc.kind, exc
            )
        except Exception:
            logger.exception("Order %s: unexpected error sending confirmation email", order_id)
        else:
            logger.info(
                "Order %s: confirmation email sent to %s (message id %s)",
                order_id, recipient, message_id,
            )

    async def _notify(self, order_id: str, fields: Mapping[str, Any]) -> tuple[str, str]:
        event = OrderEvent.model_validate(dict(fields))
        if not event.buyer_id:
            raise MissingBuyerId(order_id)

        buyer = await self._fetch_user(event.buyer_id)
        if buyer is None:
            raise RecordNotFound(order_id, self._settings.users_collection, event.buyer_id)
        if not buyer.email:
            raise MissingContact(order_id, event.buyer_id)

        seller = await self._fetch_user(event.seller_id) if event.seller_id else None
        if event.seller_id and seller is None:
            logger.info("Order %s: seller %s not found, using placeholder", order_id, event.seller_id)

        message = self.build_email(order_id, event, buyer, seller)
        logger.debug(
            "Order %s: sending confirmation for product %s to %s",
            order_id, event.product_id, message.recipient,
        )
        message_id = await self._transport.send(message)
        return message.recipient, message_id

    async def _fetch_user(self, user_id: str) -> UserRecord | None:
        data = await self._store.get(self._settings.users_collection, user_id)
        if data is None:
            return None
        return UserRecord.model_validate(data)

    def build_email(
        self,
        order_id: str,
        event: OrderEvent,
        buyer: UserRecord,
        seller: UserRecord | None,
    ) -> OutboundEmail:
        s = self._settings
        ctx = templates.OrderEmailContext(
            order_id=order_id,
            product_title=event.product_title,
            price=format_price(event.amount, s.currency_prefix),
            seller_name=seller_label(seller),
            buyer_name=buyer_greeting_name(buyer),
            year=datetime.now(timezone.utc).year,
            brand_name=s.brand_name,
            brand_tagline=s.brand_tagline,
        )
        return OutboundEmail(
            sender=s.sender_address,
            recipient=buyer.email or "",
            subject=templates.render_subject(event.product_title),
            html=templates.render_html(ctx),
            text=templates.render_text(ctx),
        )
