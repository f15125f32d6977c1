"""
Uniform response envelope returned by every mock API operation.
"""
from datetime import datetime, timedelta
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from .base import CamelModel, utcnow

T = TypeVar("T")


class Pagination(BaseModel):
    current_page: int
    total: int
    per_page: int


class Envelope(CamelModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    pagination: Optional[Pagination] = None
    # Internal failure classification, never serialized
    error_code: Optional[str] = Field(default=None, exclude=True)

    @classmethod
    def ok(
        cls,
        data: Any = None,
        message: Optional[str] = None,
        pagination: Optional[Pagination] = None,
        **extra: Any,
    ) -> "Envelope":
        return cls(success=True, data=data, message=message, pagination=pagination, **extra)

    @classmethod
    def fail(
        cls, message: str, error_code: Optional[str] = None, **extra: Any
    ) -> "Envelope":
        return cls(success=False, data=None, message=message, error_code=error_code, **extra)

    def to_wire(self) -> Dict[str, Any]:
        body = super().to_wire()
        body.setdefault("data", None)
        return body


class AnalyticsEnvelope(Envelope[T], Generic[T]):
    generated_at: datetime = Field(default_factory=utcnow)
    cache_expiry: Optional[datetime] = None

    def with_cache_expiry(self, minutes: int) -> "AnalyticsEnvelope[T]":
        self.cache_expiry = self.generated_at + timedelta(minutes=minutes)
        return self
