"""CSV export of usage tables.

The default document quotes every cell but does not escape quotes or commas
inside app names or bundle ids, which is the format existing consumers read.
``escape_quotes=True`` produces RFC 4180 output instead.
"""

from __future__ import annotations

import csv
import logging
import math
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from usagestats.io_utils import ensure_dir
from usagestats.types import UsageRow, record_value

LOGGER = logging.getLogger("usagestats.report.export")

CSV_HEADERS = [
    "App Name",
    "Bundle ID",
    "Today (minutes)",
    "7 Days (minutes)",
    "30 Days (minutes)",
    "% of Total",
]


def _format_percent(value: Optional[float]) -> str:
    if value is None:
        return "0%"
    if not math.isfinite(value):
        return f"{value:.1f}%"
    # Half-up on the exact binary value, so 6.25 renders as 6.3.
    rounded = Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded}%"


def _row_cells(record: Any) -> List[str]:
    return [
        str(record_value(record, "app_name")),
        str(record_value(record, "bundle_id")),
        str(record_value(record, "minutes_today")),
        str(record_value(record, "minutes_7d")),
        str(record_value(record, "minutes_30d")),
        _format_percent(record_value(record, "percent_of_total")),
    ]


def generate_csv(rows: Iterable[Any], escape_quotes: bool = False) -> str:
    """Serialize rows into a fully quoted CSV document joined with ``\\n``."""
    table = [_row_cells(record) for record in rows]
    if escape_quotes:
        df = pd.DataFrame(table, columns=CSV_HEADERS, dtype=str)
        text = df.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
        return text.rstrip("\n")
    lines = [CSV_HEADERS, *table]
    return "\n".join(",".join(f'"{cell}"' for cell in line) for line in lines)


def export_filename(time_range: str, day: Optional[date] = None) -> str:
    day = day or date.today()
    return f"screen-time-{time_range}-{day.isoformat()}.csv"


def write_csv(path: Path, content: str) -> Path:
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")
    LOGGER.debug("Wrote CSV export %s (%d bytes)", path, len(content))
    return path


def _parse_percent(raw: Any) -> Optional[float]:
    if raw is None or (isinstance(raw, float) and pd.isna(raw)):
        return None
    text = str(raw).strip().rstrip("%")
    try:
        return float(text)
    except ValueError:
        return None


def load_usage_csv(path: Path) -> List[UsageRow]:
    """Read an exported CSV back into rows."""
    if not path.exists():
        raise FileNotFoundError(f"CSV export not found: {path}")
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = [header for header in CSV_HEADERS if header not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {', '.join(missing)}")
    rows: List[UsageRow] = []
    for record in df.to_dict(orient="records"):
        rows.append(_row_from_record(record))
    LOGGER.debug("Loaded %d rows from %s", len(rows), path)
    return rows


def _row_from_record(record: Dict[str, str]) -> UsageRow:
    try:
        return UsageRow(
            app_name=record["App Name"],
            bundle_id=record["Bundle ID"],
            minutes_today=int(record["Today (minutes)"]),
            minutes_7d=int(record["7 Days (minutes)"]),
            minutes_30d=int(record["30 Days (minutes)"]),
            percent_of_total=_parse_percent(record["% of Total"]),
        )
    except ValueError as exc:
        raise ValueError(f"Malformed usage CSV row {record!r}: {exc}") from exc
