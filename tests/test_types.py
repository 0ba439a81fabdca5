import pytest

from usagestats.types import (
    UsageRow,
    UsageSummary,
    UsageTotals,
    minutes_for_range,
    normalize_range,
    total_for_range,
)


def test_normalize_range_aliases():
    assert normalize_range("day") == "today"
    assert normalize_range("week") == "7d"
    assert normalize_range("month") == "30d"
    assert normalize_range("7d") == "7d"
    with pytest.raises(ValueError):
        normalize_range("year")


def test_minutes_for_range_falls_back_to_month(sample_rows):
    row = sample_rows[0]
    assert minutes_for_range(row, "today") == 45
    assert minutes_for_range(row, "week") == 320
    assert minutes_for_range(row, "bogus") == 1250
    assert minutes_for_range({"minutes_today": 3}, "day") == 3


def test_totals_from_rows(sample_rows):
    totals = UsageTotals.from_rows(sample_rows)
    assert totals == UsageTotals(today=180, week=1260, month=5010)
    assert total_for_range(totals, "day") == 180
    assert total_for_range(totals, "7d") == 1260
    assert total_for_range(totals, "month") == 5010


def test_summary_wire_shape(sample_summary):
    payload = sample_summary.to_dict()
    assert payload["apps"][0] == {
        "bundleId": "com.apple.MobileSMS",
        "appName": "Messages",
        "minutesToday": 45,
        "minutes7d": 320,
        "minutes30d": 1250,
    }
    assert payload["totals"] == {"today": 180, "week": 1260, "month": 5010}
    assert UsageSummary.from_dict(payload) == sample_summary


def test_rows_are_immutable(sample_rows):
    row = sample_rows[0]
    with pytest.raises(AttributeError):
        row.minutes_today = 1
    updated = row.with_percent(12.0)
    assert row.percent_of_total is None
    assert updated.percent_of_total == 12.0
    assert isinstance(updated, UsageRow)
