from __future__ import annotations

from app.orders.schemas import UserRecord

SELLER_PLACEHOLDER = "Seller"
BUYER_PLACEHOLDER = "Customer"


def format_price(amount: float, prefix: str = "RM") -> str:
    """Fixed two-decimal price with a currency prefix, e.g. 12.5 -> 'RM 12.50'."""
    return f"{prefix} {amount:.2f}"


def seller_label(seller: UserRecord | None) -> str:
    if seller is None:
        return SELLER_PLACEHOLDER
    return seller.display_name or seller.email or SELLER_PLACEHOLDER


def buyer_greeting_name(buyer: UserRecord) -> str:
    return buyer.display_name or BUYER_PLACEHOLDER
