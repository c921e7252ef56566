from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(v: object) -> str | None:
    """Render a stored scalar as text; lists, maps, booleans and nulls give None."""
    if isinstance(v, str):
        return v
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return str(v)
    if isinstance(v, float):
        return str(int(v)) if v.is_integer() else str(v)
    return None


class OrderEvent(BaseModel):
    """Field snapshot of a newly created order document."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    buyer_id: str | None = Field(default=None, alias="buyerId")
    seller_id: str | None = Field(default=None, alias="sellerId")
    product_id: str | None = Field(default=None, alias="productId")
    product_title: str = Field(default="Product", alias="productTitle")
    amount: float = 0

    @field_validator("buyer_id", "seller_id", "product_id", mode="before")
    @classmethod
    def _blank_id_is_missing(cls, v: object) -> object:
        if v is None or v == "":
            return None
        return str(v)

    @field_validator("product_title", mode="before")
    @classmethod
    def _default_title(cls, v: object) -> object:
        return _as_text(v) or "Product"

    @field_validator("amount", mode="before")
    @classmethod
    def _default_amount(cls, v: object) -> object:
        return 0 if v is None else v


class UserRecord(BaseModel):
    """Subset of a users/{uid} document the email needs."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    email: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")

    @field_validator("email", "display_name", mode="before")
    @classmethod
    def _text_or_none(cls, v: object) -> object:
        return _as_text(v)


class OutboundEmail(BaseModel):
    model_config = ConfigDict(frozen=True)

    sender: str
    recipient: str
    subject: str
    html: str
    text: str
