import uuid
from collections.abc import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response

# CloudEvents binary mode carries the event id in ce-id; plain callers send X-Request-ID.
_ID_HEADERS = ("ce-id", "X-Request-ID")


async def event_id_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    event_id = next(
        (request.headers[h] for h in _ID_HEADERS if request.headers.get(h)),
        None,
    ) or str(uuid.uuid4())
    request.state.event_id = event_id
    response = await call_next(request)
    response.headers["X-Request-ID"] = event_id
    return response
