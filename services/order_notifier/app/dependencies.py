from fastapi import Request

from app.orders.notifier import OrderNotifier


def get_notifier(request: Request) -> OrderNotifier:
    """The process-wide notifier built in the app lifespan."""
    notifier = getattr(request.app.state, "notifier", None)
    if notifier is None:
        raise RuntimeError("OrderNotifier not initialized")
    return notifier
