"""
List filters.

Each filter class declares which record fields it matches by equality, which
string fields ``search`` scans, which fields sort as timestamps and the page
size used when the caller gives none. Unrecognized keys are ignored.
"""
from datetime import datetime
from typing import Any, ClassVar, Dict, Literal, Optional, Tuple

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel, to_snake

from .base import CamelModel
from .enums import (
    AttemptStatus,
    ContentType,
    QuizStatus,
    RecordStatus,
    Role,
    SortOrder,
    Subject,
)


class ListFilters(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    equality_fields: ClassVar[Tuple[str, ...]] = ()
    search_fields: ClassVar[Tuple[str, ...]] = ()
    timestamp_fields: ClassVar[Tuple[str, ...]] = ("created_at",)
    default_per_page: ClassVar[int] = 10
    default_sort_by: ClassVar[Optional[str]] = None
    default_sort_order: ClassVar[SortOrder] = SortOrder.ASC

    page: int = Field(default=1, ge=1)
    per_page: Optional[int] = Field(default=None, gt=0, alias="per_page")
    sort_order: Optional[SortOrder] = None

    def equality_criteria(self) -> Dict[str, Any]:
        """Equality filters the caller actually set."""
        criteria = {}
        for name in self.equality_fields:
            value = getattr(self, name)
            if value is not None:
                criteria[name] = value
        return criteria

    @property
    def search_term(self) -> Optional[str]:
        term = getattr(self, "search", None)
        return term or None

    @property
    def sort_field(self) -> Optional[str]:
        """Record field to sort by, in snake_case."""
        sort_by = getattr(self, "sort_by", None) or self.default_sort_by
        return to_snake(sort_by) if sort_by else None

    @property
    def effective_sort_order(self) -> SortOrder:
        return self.sort_order or self.default_sort_order

    @property
    def effective_per_page(self) -> int:
        return self.per_page or self.default_per_page


class UserFilters(ListFilters):
    equality_fields: ClassVar[Tuple[str, ...]] = ("role", "grade_level", "status")
    search_fields: ClassVar[Tuple[str, ...]] = ("name", "email")

    role: Optional[Role] = None
    grade_level: Optional[str] = None
    status: Optional[RecordStatus] = None
    search: Optional[str] = None
    sort_by: Optional[Literal["name", "email", "role", "createdAt"]] = None


class ContentFilters(ListFilters):
    equality_fields: ClassVar[Tuple[str, ...]] = ("subject", "grade_level", "type", "status")
    search_fields: ClassVar[Tuple[str, ...]] = ("title", "description")
    default_per_page: ClassVar[int] = 12

    subject: Optional[Subject] = None
    grade_level: Optional[str] = None
    type: Optional[ContentType] = None
    status: Optional[RecordStatus] = None
    search: Optional[str] = None
    sort_by: Optional[Literal["title", "subject", "gradeLevel", "type", "createdAt"]] = None


class QuizFilters(ListFilters):
    equality_fields: ClassVar[Tuple[str, ...]] = (
        "subject", "grade_level", "status", "associated_content_id",
    )
    search_fields: ClassVar[Tuple[str, ...]] = ("title", "description")

    subject: Optional[Subject] = None
    grade_level: Optional[str] = None
    status: Optional[QuizStatus] = None
    associated_content_id: Optional[int] = None
    search: Optional[str] = None
    sort_by: Optional[
        Literal["title", "subject", "gradeLevel", "createdAt", "questionsCount"]
    ] = None


class QuizAttemptFilters(ListFilters):
    equality_fields: ClassVar[Tuple[str, ...]] = ("quiz_id", "user_id", "status")
    timestamp_fields: ClassVar[Tuple[str, ...]] = ("started_at", "completed_at")
    default_sort_by: ClassVar[Optional[str]] = "startedAt"
    default_sort_order: ClassVar[SortOrder] = SortOrder.DESC

    quiz_id: Optional[int] = None
    user_id: Optional[int] = None
    status: Optional[AttemptStatus] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    sort_by: Optional[Literal["startedAt", "completedAt", "score", "percentage"]] = None
