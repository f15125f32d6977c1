"""
Shared plumbing for the mock services: latency, payload coercion and the
error-to-envelope boundary.
"""
import functools
import logging
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.config import Settings
from ..core.exceptions import MockAPIError, ValidationFailure
from ..core.latency import LatencySimulator
from ..models.envelope import Envelope
from .store import MockStore

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
R = TypeVar("R", bound=BaseModel)


def describe_validation_error(exc: ValidationError) -> str:
    """First pydantic error as '<field>: <message>'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"Invalid request: {location}: {first.get('msg')}" if location else f"Invalid request: {first.get('msg')}"


def coerce(model_cls: Type[M], value: Any) -> M:
    """Accept a model instance, a plain mapping or None (defaults)."""
    if value is None:
        return model_cls()
    if isinstance(value, model_cls):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, exclude_unset=True)
    return model_cls.model_validate(value)


def merge_record(existing: R, changes: Dict[str, Any]) -> R:
    """Apply ``changes`` to a stored record, re-running the record's own validation."""
    return type(existing).model_validate({**existing.model_dump(), **changes})


def operation(latency: Optional[str] = "", envelope: Type[Envelope] = Envelope):
    """
    Decorator for public service operations.

    Suspends for the operation's simulated latency (named after the method
    unless given; ``None`` skips it), then runs the body. Domain errors and
    payload validation errors become failure envelopes; anything else
    propagates.
    """
    def decorator(func):
        name = latency if latency != "" else func.__name__

        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            if name:
                await self.latency.simulate(name)
            try:
                return await func(self, *args, **kwargs)
            except MockAPIError as exc:
                logger.warning(f"{func.__name__} failed: {exc.message}")
                return envelope.fail(exc.message, error_code=exc.error_code)
            except ValidationError as exc:
                message = describe_validation_error(exc)
                logger.warning(f"{func.__name__} rejected payload: {message}")
                return envelope.fail(message, error_code=ValidationFailure.error_code)
        return wrapper
    return decorator


class BaseService:
    """State shared by every entity service."""

    def __init__(self, store: MockStore, latency: LatencySimulator, settings: Settings):
        self.store = store
        self.latency = latency
        self.settings = settings
