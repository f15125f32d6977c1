from .config import Settings, get_settings
from .exceptions import ConflictError, MockAPIError, NotFoundError, ValidationFailure
from .latency import LatencySimulator

__all__ = [
    "Settings",
    "get_settings",
    "MockAPIError",
    "NotFoundError",
    "ConflictError",
    "ValidationFailure",
    "LatencySimulator",
]
