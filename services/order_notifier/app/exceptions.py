"""
Order notifier: notification failure kinds.

None of these ever leave OrderNotifier.handle_order_created: the notifier's
outer boundary catches them, logs them with the order id and returns normally,
so a failed email never fails the order-creation trigger.
"""


class NotificationError(Exception):
    """Base class for every expected reason an order email is not sent."""

    kind = "notification_error"

    def __init__(self, order_id: str, message: str) -> None:
        super().__init__(message)
        self.order_id = order_id


# ── Skips (order is fine, we just can't address an email) ────────────────────

class MissingBuyerId(NotificationError):
    kind = "missing_identity"

    def __init__(self, order_id: str) -> None:
        super().__init__(order_id, "No buyerId found in order document.")


class RecordNotFound(NotificationError):
    kind = "missing_record"

    def __init__(self, order_id: str, collection: str, doc_id: str) -> None:
        super().__init__(order_id, f"Document {collection}/{doc_id} not found.")
        self.collection = collection
        self.doc_id = doc_id


class MissingContact(NotificationError):
    """Buyer document exists but carries no usable email address."""

    kind = "missing_contact"

    def __init__(self, order_id: str, user_id: str) -> None:
        super().__init__(order_id, f"No email found for user {user_id}.")
        self.user_id = user_id


# ── Delivery ──────────────────────────────────────────────────────────────────

class TransportFailure(NotificationError):
    """The mail relay rejected the message or could not be reached."""

    kind = "transport_failure"

    def __init__(self, provider: str, reason: str, order_id: str = "") -> None:
        super().__init__(order_id, f"{provider} delivery failed: {reason}")
        self.provider = provider
        self.reason = reason
