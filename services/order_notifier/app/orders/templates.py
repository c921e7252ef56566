"""
Order confirmation email bodies: HTML and plain text.

Both bodies carry the same content: greeting, the order-details block
(order id, product, price, seller) and the brand footer. The HTML version is
a self-contained document with inline styles. Every interpolated value is HTML-escaped.
"""
from __future__ import annotations

from dataclasses import dataclass
from html import escape


@dataclass(frozen=True)
class OrderEmailContext:
    order_id: str
    product_title: str
    price: str
    seller_name: str
    buyer_name: str
    year: int
    brand_name: str
    brand_tagline: str


_STYLE = """
      body {
        font-family: Arial, sans-serif;
        line-height: 1.6;
        color: #333;
        max-width: 600px;
        margin: 0 auto;
        padding: 20px;
      }
      .header {
        background-color: #dbc156;
        color: #000;
        padding: 20px;
        text-align: center;
        border-radius: 8px 8px 0 0;
      }
      .content {
        background-color: #f9f9f9;
        padding: 30px;
        border-radius: 0 0 8px 8px;
      }
      .order-details {
        background-color: #fff;
        padding: 20px;
        border-radius: 8px;
        margin: 20px 0;
        border-left: 4px solid #dbc156;
      }
      .detail-row {
        display: flex;
        justify-content: space-between;
        padding: 10px 0;
        border-bottom: 1px solid #eee;
      }
      .detail-row:last-child { border-bottom: none; }
      .detail-label { font-weight: bold; color: #666; }
      .detail-value { color: #333; }
      .price { font-size: 24px; font-weight: bold; color: #dbc156; }
      .footer {
        text-align: center;
        margin-top: 30px;
        padding-top: 20px;
        border-top: 1px solid #eee;
        color: #666;
        font-size: 12px;
      }
"""

_SELLER_NOTE = (
    "We've notified the seller about your purchase. They will contact you "
    "shortly to arrange the meet-up or delivery."
)
_QUESTIONS_NOTE = (
    "If you have any questions, please contact the seller through the chat "
    "feature in the app."
)
_NO_REPLY = "This is an automated email. Please do not reply."


def render_subject(product_title: str) -> str:
    return f"Order Confirmation - {product_title}"


def _detail_row(label: str, value: str, value_class: str = "detail-value") -> str:
    return (
        '<div class="detail-row">'
        f'<span class="detail-label">{label}:</span>'
        f'<span class="{value_class}">{escape(value)}</span>'
        "</div>"
    )


def render_html(ctx: OrderEmailContext) -> str:
    brand = escape(ctx.brand_name)
    rows = "".join(
        [
            _detail_row("Order ID", ctx.order_id),
            _detail_row("Product Name", ctx.product_title),
            _detail_row("Price", ctx.price, "detail-value price"),
            _detail_row("Seller", ctx.seller_name),
        ]
    )
    return (
        "<!DOCTYPE html>"
        "<html>"
        f'<head><meta charset="utf-8"><style>{_STYLE}</style></head>'
        "<body>"
        '<div class="header">'
        "<h1>🎉 Order Confirmation</h1>"
        f"<p>Thank you for your purchase on {brand}!</p>"
        "</div>"
        '<div class="content">'
        f"<p>Dear {escape(ctx.buyer_name)},</p>"
        "<p>Your order has been confirmed. Here are the details:</p>"
        f'<div class="order-details">{rows}</div>'
        f"<p>{_SELLER_NOTE}</p>"
        f"<p>{_QUESTIONS_NOTE}</p>"
        "</div>"
        '<div class="footer">'
        f"<p>&copy; {ctx.year} {brand} - {escape(ctx.brand_tagline)}</p>"
        f"<p>{_NO_REPLY}</p>"
        "</div>"
        "</body>"
        "</html>"
    )


def render_text(ctx: OrderEmailContext) -> str:
    lines = [
        f"Order Confirmation - {ctx.brand_name}",
        "",
        f"Dear {ctx.buyer_name},",
        "",
        "Your order has been confirmed. Here are the details:",
        "",
        f"Order ID: {ctx.order_id}",
        f"Product Name: {ctx.product_title}",
        f"Price: {ctx.price}",
        f"Seller: {ctx.seller_name}",
        "",
        _SELLER_NOTE,
        "",
        _QUESTIONS_NOTE,
        "",
        f"© {ctx.year} {ctx.brand_name} - {ctx.brand_tagline}",
        _NO_REPLY,
    ]
    return "\n".join(lines) + "\n"
