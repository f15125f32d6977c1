"""
Filter -> sort -> paginate pipeline shared by every list operation.

The three stages run strictly in sequence: filtering ignores sort order and
pagination always slices the final filtered and sorted list.
"""
import enum
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple, TypeVar

from ..models.base import as_utc
from ..models.enums import SortOrder
from ..models.envelope import Pagination
from ..models.filters import ListFilters

logger = logging.getLogger(__name__)

R = TypeVar("R")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def filter_records(
    records: Sequence[R],
    criteria: Dict[str, Any],
    search: Optional[str] = None,
    search_fields: Sequence[str] = (),
) -> List[R]:
    """Keep records equal on every criterion and matching the free-text search."""
    result = [
        record for record in records
        if all(getattr(record, name) == value for name, value in criteria.items())
    ]
    if search:
        needle = search.lower()
        result = [
            record for record in result
            if any(
                needle in (getattr(record, name) or "").lower()
                for name in search_fields
            )
        ]
    return result


def filter_by_date(
    records: Sequence[R],
    field: str,
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
) -> List[R]:
    """Inclusive bounds on a timestamp field."""
    result = list(records)
    if date_from is not None:
        lower = as_utc(date_from)
        result = [r for r in result if getattr(r, field) and as_utc(getattr(r, field)) >= lower]
    if date_to is not None:
        upper = as_utc(date_to)
        result = [r for r in result if getattr(r, field) and as_utc(getattr(r, field)) <= upper]
    return result


def _sort_key(value: Any, is_timestamp: bool) -> Any:
    if is_timestamp:
        # Missing timestamps sort as the epoch
        return as_utc(value).timestamp() if value else EPOCH.timestamp()
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, str):
        return value.lower()
    return value


def sort_records(
    records: Sequence[R],
    field: Optional[str],
    order: SortOrder = SortOrder.ASC,
    timestamp_fields: Sequence[str] = ("created_at",),
) -> List[R]:
    """
    Stable sort on one field.

    Strings compare case-insensitively and timestamp fields by their numeric
    value. Records with equal keys keep their relative order in both
    directions.
    """
    if not field:
        return list(records)
    is_timestamp = field in timestamp_fields
    return sorted(
        records,
        key=lambda record: _sort_key(getattr(record, field), is_timestamp),
        reverse=order == SortOrder.DESC,
    )


def paginate(records: Sequence[R], page: int, per_page: int) -> Tuple[List[R], Pagination]:
    """Slice the 1-based page; ``total`` is the pre-slice count."""
    start = (page - 1) * per_page
    return list(records[start:start + per_page]), Pagination(
        current_page=page, total=len(records), per_page=per_page
    )


def run_query(records: Sequence[R], filters: ListFilters) -> Tuple[List[R], Pagination]:
    """Apply a list filter object end to end."""
    matched = filter_records(
        records,
        filters.equality_criteria(),
        search=filters.search_term,
        search_fields=filters.search_fields,
    )
    date_from = getattr(filters, "date_from", None)
    date_to = getattr(filters, "date_to", None)
    if date_from is not None or date_to is not None:
        matched = filter_by_date(matched, filters.timestamp_fields[0], date_from, date_to)

    ordered = sort_records(
        matched,
        filters.sort_field,
        filters.effective_sort_order,
        filters.timestamp_fields,
    )
    page, pagination = paginate(ordered, filters.page, filters.effective_per_page)
    logger.debug(
        f"{type(filters).__name__}: {len(records)} pooled, {len(matched)} matched, "
        f"{len(page)} returned"
    )
    return page, pagination
