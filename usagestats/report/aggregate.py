"""Aggregation utilities: share-of-total annotation and tabular views."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from usagestats.formatting import calculate_percentage, format_minutes
from usagestats.types import (
    UsageRow,
    UsageSummary,
    minutes_for_range,
    normalize_range,
    total_for_range,
)

LOGGER = logging.getLogger("usagestats.report.aggregate")

FRAME_COLUMNS = [
    "app_name",
    "bundle_id",
    "minutes_today",
    "minutes_7d",
    "minutes_30d",
    "percent_of_total",
]


def annotate_rows(
    rows: Iterable[UsageRow],
    time_range: str,
    total: Optional[int] = None,
) -> List[UsageRow]:
    """Return copies of ``rows`` carrying their share of ``total`` for the range.

    When ``total`` is omitted it is the sum of the rows' minutes for the range.
    """
    canonical = normalize_range(time_range)
    rows = list(rows)
    if total is None:
        total = sum(minutes_for_range(row, canonical) for row in rows)
    return [
        row.with_percent(calculate_percentage(minutes_for_range(row, canonical), total))
        for row in rows
    ]


def annotate_percentages(summary: UsageSummary, time_range: str) -> UsageSummary:
    """Annotate every app against the summary's reported total for the range."""
    canonical = normalize_range(time_range)
    total = total_for_range(summary.totals, canonical)
    if total == 0:
        LOGGER.debug("Total for %s is zero; all shares will be 0", canonical)
    apps = tuple(annotate_rows(summary.apps, canonical, total=total))
    return replace(summary, apps=apps)


def usage_frame(rows: Sequence[UsageRow], time_range: Optional[str] = None) -> pd.DataFrame:
    """Tabular view of the rows; adds a formatted ``duration`` column when a range is given."""
    if not rows:
        columns = list(FRAME_COLUMNS)
        if time_range is not None:
            columns.append("duration")
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame(
        [{column: getattr(row, column) for column in FRAME_COLUMNS} for row in rows],
        columns=FRAME_COLUMNS,
    )
    if time_range is not None:
        canonical = normalize_range(time_range)
        df["duration"] = [format_minutes(minutes_for_range(row, canonical)) for row in rows]
    return df


def top_apps(rows: Sequence[UsageRow], time_range: str, n: int = 5) -> List[UsageRow]:
    """The ``n`` rows with the most minutes in the range; ties keep input order."""
    canonical = normalize_range(time_range)
    if n <= 0 or not rows:
        return []
    minutes = pd.Series([minutes_for_range(row, canonical) for row in rows])
    order = minutes.sort_values(ascending=False, kind="stable").index[:n]
    return [rows[idx] for idx in order]
