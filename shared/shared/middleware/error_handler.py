import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse, Response

logger = logging.getLogger(__name__)


async def error_envelope_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    # HTTPExceptions never get here: FastAPI's ExceptionMiddleware answers them first.
    try:
        return await call_next(request)
    except Exception:
        event_id = getattr(request.state, "event_id", None)
        logger.exception("Unhandled exception (event %s)", event_id)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {"code": "internal_error", "message": "An unexpected error occurred"},
                "event_id": event_id,
            },
        )
