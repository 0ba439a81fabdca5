"""Sorting and filtering of usage tables.

Both operations work on any sequence of records that expose the usage
fields, either as attributes (``UsageRow``) or as mapping keys, and always
return a new list.
"""

from __future__ import annotations

import locale
import logging
from functools import cmp_to_key
from numbers import Real
from typing import Any, Iterable, List, Sequence, TypeVar

from usagestats.types import minutes_for_range, record_value

LOGGER = logging.getLogger("usagestats.report.table")

ASC = "asc"
DESC = "desc"

SORT_FIELDS = (
    "app_name",
    "bundle_id",
    "minutes_today",
    "minutes_7d",
    "minutes_30d",
    "percent_of_total",
)

R = TypeVar("R")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _collate(a: str, b: str) -> int:
    # strcoll rejects embedded NUL characters.
    return locale.strcoll(a.replace("\x00", ""), b.replace("\x00", ""))


def _compare_text(a: str, b: str) -> int:
    # Letters first compare case-insensitively; case only breaks ties.
    primary = _collate(a.casefold(), b.casefold())
    if primary:
        return primary
    secondary = _collate(a, b)
    if secondary:
        return secondary
    return (a > b) - (a < b)


def _compare_values(a: Any, b: Any) -> int:
    if isinstance(a, str) and isinstance(b, str):
        return _compare_text(a, b)
    if _is_number(a) and _is_number(b):
        diff = a - b
        return (diff > 0) - (diff < 0)
    return 0


def sort_usage_data(data: Sequence[R], field: str, direction: str = ASC) -> List[R]:
    """Return ``data`` ordered by ``field``.

    Strings compare with locale collation, numbers numerically; any other
    pairing compares equal. The sort is stable, so ties keep input order in
    both directions. ``direction`` is ``"asc"`` or ``"desc"``; any value other
    than ``"desc"`` sorts ascending.
    """
    sign = -1 if direction == DESC else 1

    def _cmp(left: R, right: R) -> int:
        return sign * _compare_values(record_value(left, field), record_value(right, field))

    ordered = sorted(data, key=cmp_to_key(_cmp))
    LOGGER.debug("Sorted %d records by %s (%s)", len(ordered), field, direction)
    return ordered


def matches_search(record: Any, search_text: str) -> bool:
    if not search_text:
        return True
    needle = search_text.lower()
    app_name = record_value(record, "app_name") or ""
    bundle_id = record_value(record, "bundle_id") or ""
    return needle in str(app_name).lower() or needle in str(bundle_id).lower()


def meets_threshold(record: Any, min_minutes: float, time_range: str) -> bool:
    minutes = minutes_for_range(record, time_range)
    if not _is_number(minutes):
        return False
    return minutes >= min_minutes


def filter_usage_data(
    data: Iterable[R],
    search_text: str = "",
    min_minutes: float = 0,
    time_range: str = "today",
) -> List[R]:
    """Keep records matching ``search_text`` whose minutes in ``time_range`` reach ``min_minutes``.

    The search is a case-insensitive substring match on app name or bundle id;
    an empty search matches everything. Input order is preserved.
    """
    kept = [
        record
        for record in data
        if matches_search(record, search_text) and meets_threshold(record, min_minutes, time_range)
    ]
    LOGGER.debug(
        "Filter search=%r min_minutes=%s range=%s kept %d records",
        search_text,
        min_minutes,
        time_range,
        len(kept),
    )
    return kept
