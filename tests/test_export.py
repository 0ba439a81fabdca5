from datetime import date

import pytest

from usagestats.report.export import (
    CSV_HEADERS,
    export_filename,
    generate_csv,
    load_usage_csv,
    write_csv,
)
from usagestats.types import UsageRow

HEADER_LINE = '"App Name","Bundle ID","Today (minutes)","7 Days (minutes)","30 Days (minutes)","% of Total"'


def test_generate_csv_matches_expected_lines():
    data = [
        {
            "app_name": "Test App",
            "bundle_id": "com.test.app",
            "minutes_today": 30,
            "minutes_7d": 210,
            "minutes_30d": 900,
            "percent_of_total": 15.5,
        }
    ]
    lines = generate_csv(data).split("\n")
    assert lines == [HEADER_LINE, '"Test App","com.test.app","30","210","900","15.5%"']


def test_generate_csv_empty_is_header_only():
    assert generate_csv([]).split("\n") == [HEADER_LINE]


def test_generate_csv_percent_formatting(sample_rows):
    rows = [sample_rows[0].with_percent(33.333), sample_rows[1], sample_rows[2].with_percent(0.0)]
    lines = generate_csv(rows).split("\n")
    assert lines[1].endswith('"33.3%"')
    assert lines[2].endswith('"0%"')
    assert lines[3].endswith('"0.0%"')


def test_generate_csv_keeps_embedded_quotes_unescaped_by_default():
    row = UsageRow("com.acme.app", 'Say "Hi", World', 1, 2, 3)
    assert generate_csv([row]).split("\n")[1] == '"Say "Hi", World","com.acme.app","1","2","3","0%"'


def test_generate_csv_escaped_mode_doubles_quotes():
    row = UsageRow("com.acme.app", 'Say "Hi", World', 1, 2, 3)
    assert generate_csv([row], escape_quotes=True).split("\n")[1] == (
        '"Say ""Hi"", World","com.acme.app","1","2","3","0%"'
    )


def test_generate_csv_escaped_mode_matches_legacy_for_clean_rows(sample_rows):
    assert generate_csv(sample_rows, escape_quotes=True) == generate_csv(sample_rows)


def test_export_filename():
    assert export_filename("week", date(2024, 5, 1)) == "screen-time-week-2024-05-01.csv"


def test_write_and_load_csv(tmp_path, sample_rows):
    rows = [sample_rows[0].with_percent(12.5), sample_rows[1]]
    path = write_csv(tmp_path / "out" / "usage.csv", generate_csv(rows))
    loaded = load_usage_csv(path)
    assert [r.bundle_id for r in loaded] == [r.bundle_id for r in rows]
    assert loaded[0].minutes_30d == 1250
    assert loaded[0].percent_of_total == pytest.approx(12.5)
    assert loaded[1].percent_of_total == pytest.approx(0.0)


def test_load_csv_rejects_missing_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text('"App Name","Bundle ID"\n"A","a.b"\n', encoding="utf-8")
    with pytest.raises(ValueError):
        load_usage_csv(path)


def test_load_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_usage_csv(tmp_path / "nope.csv")


def test_headers_constant_matches_document():
    assert generate_csv([]) == ",".join(f'"{h}"' for h in CSV_HEADERS)


@pytest.mark.parametrize("percent, expected", [(6.25, "6.3%"), (0.25, "0.3%"), (0.05, "0.1%"), (12.34, "12.3%")])
def test_generate_csv_rounds_percent_ties_half_up(percent, expected):
    row = UsageRow("a.b", "A", 1, 1, 1, percent_of_total=percent)
    assert generate_csv([row]).split("\n")[1] == f'"A","a.b","1","1","1","{expected}"'


def test_annotated_sixteenth_share_exports_as_6_3():
    rows = [UsageRow("a.b", "A", 1, 1, 1), UsageRow("a.c", "C", 15, 15, 15)]
    from usagestats.report.aggregate import annotate_rows

    line = generate_csv(annotate_rows(rows, "today")).split("\n")[1]
    assert line.endswith('"6.3%"')
