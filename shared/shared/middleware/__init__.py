from shared.middleware.event_id import event_id_middleware
from shared.middleware.error_handler import error_envelope_middleware

__all__ = ["event_id_middleware", "error_envelope_middleware"]
