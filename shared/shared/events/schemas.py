from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OrderCreated(BaseModel):
    """Document-store trigger event: a new orders/{order_id} document was created."""

    model_config = ConfigDict(extra="ignore")

    event_type: str = "order.created"
    order_id: str = Field(min_length=1, description="Id of the created order document.")
    fields: dict[str, Any] = Field(
        default_factory=dict,
        description="Snapshot of the created document's fields, keyed as stored.",
    )
    occurred_at: datetime | None = None
