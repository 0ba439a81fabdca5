import pytest

from usagestats.formatting import calculate_percentage, format_minutes


@pytest.mark.parametrize(
    "minutes, expected",
    [(0, "0m"), (30, "30m"), (59, "59m"), (60, "1h"), (120, "2h"), (90, "1h 30m"), (125, "2h 5m"), (245, "4h 5m")],
)
def test_format_minutes(minutes, expected):
    assert format_minutes(minutes) == expected


def test_calculate_percentage_basic_ratios():
    assert calculate_percentage(25, 100) == 25
    assert calculate_percentage(50, 200) == 25
    assert calculate_percentage(1, 3) == pytest.approx(33.33, abs=0.01)


def test_calculate_percentage_zero_total_is_zero():
    assert calculate_percentage(10, 0) == 0
    assert calculate_percentage(0, 0) == 0


def test_calculate_percentage_is_unrounded():
    assert calculate_percentage(2, 3) == pytest.approx(200 / 3)
