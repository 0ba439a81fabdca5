import pytest

from usagestats.types import UsageRow, UsageSummary, UsageTotals


@pytest.fixture
def sample_rows():
    return [
        UsageRow("com.apple.MobileSMS", "Messages", 45, 320, 1250),
        UsageRow("com.apple.mobilesafari", "Safari", 15, 100, 400),
        UsageRow("com.spotify.client", "Spotify", 120, 840, 3360),
    ]


@pytest.fixture
def sample_summary(sample_rows):
    return UsageSummary(
        apps=tuple(sample_rows),
        totals=UsageTotals.from_rows(sample_rows),
        last_updated="2024-05-01T12:00:00+00:00",
    )
