"""Provider reading summaries exported by the native screen-time bridge."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from usagestats.io_utils import load_json
from usagestats.providers.base import ProviderError, UsageProvider
from usagestats.types import UsageSummary, normalize_range

LOGGER = logging.getLogger("usagestats.providers.snapshot")


class SnapshotProvider(UsageProvider):
    """Serve the summary stored in a JSON snapshot file.

    The snapshot uses the bridge's camelCase shape::

        {"apps": [{"bundleId": ..., "appName": ..., "minutesToday": ...,
                   "minutes7d": ..., "minutes30d": ...}],
         "totals": {"today": ..., "week": ..., "month": ...},
         "lastUpdated": "2024-05-01T12:00:00Z"}
    """

    name = "snapshot"

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    async def get_usage_summary(self, time_range: str = "day") -> UsageSummary:
        normalize_range(time_range)
        return await asyncio.to_thread(self._read)

    def _read(self) -> UsageSummary:
        if not self.path.exists():
            raise ProviderError(f"Usage snapshot not found: {self.path}")
        try:
            payload: Any = load_json(self.path)
        except json.JSONDecodeError as exc:
            raise ProviderError(f"Failed to parse {self.path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ProviderError(f"Usage snapshot {self.path} must be a JSON object")
        try:
            summary = UsageSummary.from_dict(payload)
        except (TypeError, ValueError, AttributeError) as exc:
            raise ProviderError(f"Malformed usage snapshot {self.path}: {exc}") from exc
        LOGGER.debug("Read %d apps from %s", len(summary.apps), self.path)
        return summary
