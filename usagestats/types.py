"""Common dataclasses and type aliases used across the usagestats package."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

TODAY = "today"
WEEK = "7d"
MONTH = "30d"
TIME_RANGES: Tuple[str, ...] = (TODAY, WEEK, MONTH)

# Range names used by the native bridge, mapped onto the canonical ones.
RANGE_ALIASES: Dict[str, str] = {
    "day": TODAY,
    "today": TODAY,
    "week": WEEK,
    "7d": WEEK,
    "month": MONTH,
    "30d": MONTH,
}

AUTH_NOT_DETERMINED = "notDetermined"
AUTH_DENIED = "denied"
AUTH_APPROVED = "approved"
AUTH_UNKNOWN = "unknown"


@dataclass(frozen=True)
class UsageRow:
    """One application's foreground usage over the three windows."""

    bundle_id: str
    app_name: str
    minutes_today: int
    minutes_7d: int
    minutes_30d: int
    percent_of_total: Optional[float] = None
    icon_uri: Optional[str] = None

    def with_percent(self, percent: float) -> "UsageRow":
        return replace(self, percent_of_total=percent)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "UsageRow":
        percent = payload.get("percentOfTotal")
        return cls(
            bundle_id=str(payload.get("bundleId", "")),
            app_name=str(payload.get("appName", "")),
            minutes_today=int(payload.get("minutesToday", 0)),
            minutes_7d=int(payload.get("minutes7d", 0)),
            minutes_30d=int(payload.get("minutes30d", 0)),
            percent_of_total=float(percent) if percent is not None else None,
            icon_uri=payload.get("iconUri"),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "bundleId": self.bundle_id,
            "appName": self.app_name,
            "minutesToday": self.minutes_today,
            "minutes7d": self.minutes_7d,
            "minutes30d": self.minutes_30d,
        }
        if self.percent_of_total is not None:
            payload["percentOfTotal"] = self.percent_of_total
        if self.icon_uri is not None:
            payload["iconUri"] = self.icon_uri
        return payload


@dataclass(frozen=True)
class UsageTotals:
    today: int = 0
    week: int = 0
    month: int = 0

    @classmethod
    def from_rows(cls, rows: Iterable[UsageRow]) -> "UsageTotals":
        today = week = month = 0
        for row in rows:
            today += row.minutes_today
            week += row.minutes_7d
            month += row.minutes_30d
        return cls(today=today, week=week, month=month)

    def to_dict(self) -> Dict[str, int]:
        return {"today": self.today, "week": self.week, "month": self.month}


@dataclass(frozen=True)
class UsageSummary:
    """Snapshot of usage for every tracked app, as produced by a provider."""

    apps: Tuple[UsageRow, ...] = ()
    totals: UsageTotals = field(default_factory=UsageTotals)
    last_updated: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "UsageSummary":
        apps = tuple(UsageRow.from_dict(entry) for entry in payload.get("apps", []))
        raw_totals = payload.get("totals") or {}
        totals = UsageTotals(
            today=int(raw_totals.get("today", 0)),
            week=int(raw_totals.get("week", 0)),
            month=int(raw_totals.get("month", 0)),
        )
        return cls(apps=apps, totals=totals, last_updated=str(payload.get("lastUpdated", "")))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apps": [row.to_dict() for row in self.apps],
            "totals": self.totals.to_dict(),
            "lastUpdated": self.last_updated,
        }


@dataclass(frozen=True)
class AuthorizationResult:
    status: str = AUTH_NOT_DETERMINED
    granted: bool = False


def normalize_range(time_range: str) -> str:
    """Map a bridge range name (``day``/``week``/``month``) onto ``today``/``7d``/``30d``."""
    try:
        return RANGE_ALIASES[time_range]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown time range: {time_range!r}") from None


def record_value(record: Any, name: str) -> Any:
    """Read a named field from a dataclass-like record or a mapping."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def minutes_for_range(record: Any, time_range: str) -> Any:
    """Minute count of ``record`` for the window; unknown ranges read the 30-day field."""
    canonical = RANGE_ALIASES.get(time_range, MONTH) if isinstance(time_range, str) else MONTH
    if canonical == TODAY:
        return record_value(record, "minutes_today")
    if canonical == WEEK:
        return record_value(record, "minutes_7d")
    return record_value(record, "minutes_30d")


def total_for_range(totals: UsageTotals, time_range: str) -> int:
    canonical = RANGE_ALIASES.get(time_range, MONTH) if isinstance(time_range, str) else MONTH
    if canonical == TODAY:
        return totals.today
    if canonical == WEEK:
        return totals.week
    return totals.month
