"""Synthetic usage data for demos and tests."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

import numpy as np

from usagestats.providers.base import UsageProvider
from usagestats.types import UsageRow, UsageSummary, UsageTotals, normalize_range

LOGGER = logging.getLogger("usagestats.providers.mock")

SAMPLE_APPS: Tuple[Tuple[str, str], ...] = (
    ("com.apple.MobileSMS", "Messages"),
    ("com.apple.mobilemail", "Mail"),
    ("com.apple.mobilesafari", "Safari"),
    ("com.instagram.ios", "Instagram"),
    ("com.spotify.client", "Spotify"),
    ("com.apple.mobileslideshow", "Photos"),
    ("com.twitter.twitter", "Twitter"),
    ("com.facebook.Facebook", "Facebook"),
    ("com.google.Gmail", "Gmail"),
    ("com.netflix.Netflix", "Netflix"),
)

# Half-open ranges [low, high) for each window.
MINUTES_TODAY_RANGE = (5, 185)
MINUTES_7D_RANGE = (50, 1250)
MINUTES_30D_RANGE = (200, 5000)

# (bundle id, app name, today, 7d, 30d) baseline for the demo provider
DEMO_BASELINE: Tuple[Tuple[str, str, int, int, int], ...] = (
    ("com.apple.MobileSMS", "Messages", 45, 320, 1250),
    ("com.apple.mobilemail", "Mail", 25, 180, 720),
    ("com.apple.mobilesafari", "Safari", 60, 420, 1680),
    ("com.instagram.ios", "Instagram", 35, 245, 980),
    ("com.spotify.client", "Spotify", 120, 840, 3360),
    ("com.apple.mobileslideshow", "Photos", 15, 105, 420),
)
JITTER_RANGE = (0.8, 1.2)


def generate_mock_data(app_count: int = 10, seed: Optional[int] = None) -> List[UsageRow]:
    """Random usage for the first ``app_count`` catalog apps (at most the whole catalog)."""
    if app_count <= 0:
        return []
    rng = np.random.default_rng(seed)
    rows: List[UsageRow] = []
    for bundle_id, app_name in SAMPLE_APPS[:app_count]:
        rows.append(
            UsageRow(
                bundle_id=bundle_id,
                app_name=app_name,
                minutes_today=int(rng.integers(*MINUTES_TODAY_RANGE)),
                minutes_7d=int(rng.integers(*MINUTES_7D_RANGE)),
                minutes_30d=int(rng.integers(*MINUTES_30D_RANGE)),
            )
        )
    return rows


def _jitter(rng: np.random.Generator, minutes: int) -> int:
    return int(np.floor(minutes * rng.uniform(*JITTER_RANGE)))


def mock_summary(seed: Optional[int] = None, now: Optional[datetime] = None) -> UsageSummary:
    """Demo summary: the baseline apps with each count jittered by 0.8x to 1.2x."""
    rng = np.random.default_rng(seed)
    apps = tuple(
        UsageRow(
            bundle_id=bundle_id,
            app_name=app_name,
            minutes_today=_jitter(rng, today),
            minutes_7d=_jitter(rng, week),
            minutes_30d=_jitter(rng, month),
        )
        for bundle_id, app_name, today, week, month in DEMO_BASELINE
    )
    now = now or datetime.now(timezone.utc)
    return UsageSummary(
        apps=apps,
        totals=UsageTotals.from_rows(apps),
        last_updated=now.isoformat(),
    )


class MockUsageProvider(UsageProvider):
    """Always-authorized provider returning demo data.

    Without ``app_count`` it serves the jittered baseline apps; with it, the
    first ``app_count`` catalog apps from ``generate_mock_data``.
    """

    name = "mock"

    def __init__(self, seed: Optional[int] = None, app_count: Optional[int] = None) -> None:
        self._seed = seed
        self._app_count = app_count

    async def get_usage_summary(self, time_range: str = "day") -> UsageSummary:
        normalize_range(time_range)
        LOGGER.debug("Generating mock summary (seed=%s, app_count=%s)", self._seed, self._app_count)
        if self._app_count is None:
            return mock_summary(seed=self._seed)
        rows = tuple(generate_mock_data(self._app_count, seed=self._seed))
        return UsageSummary(
            apps=rows,
            totals=UsageTotals.from_rows(rows),
            last_updated=datetime.now(timezone.utc).isoformat(),
        )
