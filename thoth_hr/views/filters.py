"""Search, filter and sort helpers for record tables."""

from __future__ import annotations

import locale
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Sequence, TypeVar

from thoth_hr.models.factories import to_timestamp
from thoth_hr.views.lookup import MemberDirectory

R = TypeVar("R")

ALL_STATUSES = "All"
MEMBER_SORT_KEYS = ("member", "member_id")


def display_value(value: Any) -> str:
    """Render a field value the way tables show it."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def search_records(
    records: Iterable[R],
    query: str,
    directory: MemberDirectory,
    text_fields: Sequence[str] = (),
) -> list[R]:
    """Keep records whose member name, status or text fields contain ``query``.

    Matching is a case-insensitive substring test. An empty query keeps
    every record.
    """
    needle = (query or "").strip().casefold()
    if not needle:
        return list(records)

    def matches(record: R) -> bool:
        haystack = [
            directory.name_of(getattr(record, "member_id", None), default=""),
            display_value(getattr(record, "status", None)),
        ]
        haystack.extend(display_value(getattr(record, name, None)) for name in text_fields)
        return any(needle in text.casefold() for text in haystack)

    return [record for record in records if matches(record)]


def filter_by_status(records: Iterable[R], status: Any = None) -> list[R]:
    """Keep records with ``status``; ``None`` or "All" keeps everything."""
    if status is None or status == ALL_STATUSES:
        return list(records)
    return [record for record in records if getattr(record, "status", None) == status]


def filter_by_date_range(
    records: Iterable[R],
    start: date | datetime | str | None = None,
    end: date | datetime | str | None = None,
    field: str = "date",
) -> list[R]:
    """Keep records whose ``field`` lies within the inclusive bounds.

    A ``date`` bound (or a ``YYYY-MM-DD`` string) covers the whole day.
    Missing bounds do not constrain that side; records without a value are
    dropped when any bound is set.
    """
    lower = _normalize_bound(start)
    upper = _normalize_bound(end)
    if lower is None and upper is None:
        return list(records)

    kept = []
    for record in records:
        value = getattr(record, field, None)
        if value is None:
            continue
        if lower is not None and _compare_to_bound(value, lower) < 0:
            continue
        if upper is not None and _compare_to_bound(value, upper) > 0:
            continue
        kept.append(record)
    return kept


def sort_records(
    records: Iterable[R],
    key: str,
    descending: bool = False,
    directory: MemberDirectory | None = None,
) -> list[R]:
    """Sort records by a field, stable in both directions.

    Numeric fields compare numerically (missing values as zero); anything
    else compares by locale collation of its case-folded display string.
    ``"member"`` or ``"member_id"`` sort by member name when a directory is
    given.
    """
    items = list(records)
    if key in MEMBER_SORT_KEYS and directory is not None:
        values = [directory.name_of(getattr(r, "member_id", None), default="") for r in items]
    else:
        values = [getattr(r, key, None) for r in items]

    present = [v for v in values if v is not None]
    if present and all(_is_number(v) for v in present):
        keys: list[Any] = [v if v is not None else Decimal("0") for v in values]
    else:
        keys = [locale.strxfrm(display_value(v).casefold()) for v in values]

    order = sorted(range(len(items)), key=keys.__getitem__, reverse=descending)
    return [items[i] for i in order]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _normalize_bound(bound: date | datetime | str | None) -> date | datetime | None:
    if bound is None or bound == "":
        return None
    if isinstance(bound, str):
        text = bound.strip()
        parsed = to_timestamp(text)
        return parsed.date() if len(text) <= 10 else parsed
    if isinstance(bound, datetime):
        return to_timestamp(bound)
    return bound


def _compare_to_bound(value: date | datetime, bound: date | datetime) -> int:
    if isinstance(bound, datetime):
        left = value if isinstance(value, datetime) else datetime.combine(value, datetime.min.time())
        right = bound
    else:
        left = value.date() if isinstance(value, datetime) else value
        right = bound
    return (left > right) - (left < right)
