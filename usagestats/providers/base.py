"""Provider interface for usage snapshots.

A provider stands in for the OS-level screen-time bridge. It is injected
wherever a summary is needed so the report code never touches platform APIs.
"""

from __future__ import annotations

import abc
import logging

from usagestats.types import (
    AUTH_APPROVED,
    AUTH_NOT_DETERMINED,
    AuthorizationResult,
    UsageSummary,
    normalize_range,
)

LOGGER = logging.getLogger("usagestats.providers")


class ProviderError(RuntimeError):
    """Raised when a provider cannot produce a usage summary."""


class AuthorizationError(ProviderError):
    """Raised when screen-time access was not granted."""

    def __init__(self, result: AuthorizationResult) -> None:
        super().__init__(f"Screen time access not granted (status={result.status})")
        self.result = result


class UsageProvider(abc.ABC):
    name = "provider"

    async def get_authorization_status(self) -> AuthorizationResult:
        return AuthorizationResult(status=AUTH_APPROVED, granted=True)

    async def request_authorization(self) -> AuthorizationResult:
        return await self.get_authorization_status()

    @abc.abstractmethod
    async def get_usage_summary(self, time_range: str = "day") -> UsageSummary:
        """Resolve with the summary for ``time_range`` or raise ``ProviderError``."""


async def fetch_summary(provider: UsageProvider, time_range: str = "day") -> UsageSummary:
    """Authorize against ``provider`` if needed, then fetch its summary."""
    normalize_range(time_range)
    result = await provider.get_authorization_status()
    if not result.granted and result.status == AUTH_NOT_DETERMINED:
        LOGGER.info("Requesting screen time authorization from %s", provider.name)
        result = await provider.request_authorization()
    if not result.granted:
        raise AuthorizationError(result)
    summary = await provider.get_usage_summary(time_range)
    LOGGER.info(
        "Fetched %d apps from %s (last updated %s)",
        len(summary.apps),
        provider.name,
        summary.last_updated or "unknown",
    )
    return summary
