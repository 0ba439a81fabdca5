"""Display helpers for minute counts and usage shares."""

from __future__ import annotations

from typing import Union

Number = Union[int, float]


def format_minutes(minutes: int) -> str:
    """Render a minute count as ``"45m"``, ``"2h"`` or ``"2h 5m"``."""
    if minutes < 60:
        return f"{minutes}m"
    hours, remainder = divmod(minutes, 60)
    if remainder == 0:
        return f"{hours}h"
    return f"{hours}h {remainder}m"


def calculate_percentage(value: Number, total: Number) -> float:
    """Share of ``total`` taken by ``value`` in percent, unrounded; 0 when total is 0."""
    if total == 0:
        return 0
    return (value / total) * 100
