#!/usr/bin/env python3
"""CLI for exporting a usage summary as a filtered, sorted CSV."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from usagestats.formatting import format_minutes
from usagestats.io_utils import load_yaml, resolve_path, setup_logging
from usagestats.providers.base import ProviderError, UsageProvider, fetch_summary
from usagestats.providers.mock import MockUsageProvider
from usagestats.providers.snapshot import SnapshotProvider
from usagestats.report.aggregate import annotate_percentages, usage_frame
from usagestats.report.export import export_filename, generate_csv, write_csv
from usagestats.report.table import ASC, DESC, SORT_FIELDS, filter_usage_data, sort_usage_data
from usagestats.types import RANGE_ALIASES, UsageRow, UsageSummary, total_for_range


LOGGER = logging.getLogger("scripts.export_usage")

DEFAULTS: Dict[str, Any] = {
    "time_range": "day",
    "sort_field": "minutes_today",
    "sort_direction": DESC,
    "min_minutes": 0.0,
    "search_text": "",
    "escape_quotes": False,
    "output_dir": "data/exports",
    "mock_count": 10,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export screen time usage to CSV")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--snapshot", type=Path, help="Usage snapshot JSON written by the device bridge")
    source.add_argument("--mock", action="store_true", help="Use generated demo data instead of a snapshot")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --mock data")
    parser.add_argument("--mock-count", type=int, default=None, help="Number of catalog apps for --mock data")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("configs/dashboard.yaml"),
        help="Dashboard configuration YAML",
    )
    parser.add_argument("--range", dest="time_range", choices=sorted(RANGE_ALIASES), default=None)
    parser.add_argument("--search", dest="search_text", type=str, default=None, help="App name or bundle id filter")
    parser.add_argument("--min-minutes", type=float, default=None, help="Minimum minutes in the selected range")
    parser.add_argument("--sort-field", choices=SORT_FIELDS, default=None)
    parser.add_argument("--sort-direction", choices=(ASC, DESC), default=None)
    parser.add_argument(
        "--escape-quotes",
        action="store_true",
        default=None,
        help="Escape embedded quotes (RFC 4180) instead of the legacy format",
    )
    parser.add_argument("--output", type=Path, default=None, help="Output CSV path")
    parser.add_argument("--output-dir", type=Path, default=None, help="Directory for the default file name")
    parser.add_argument("--show", action="store_true", help="Print the exported table")
    return parser.parse_args(argv)


def _resolve_option(args: argparse.Namespace, cfg: Dict[str, Any], key: str) -> Any:
    """CLI flag, then config value, then built-in default."""

    cli_value = getattr(args, key, None)
    if cli_value is not None:
        return cli_value
    default = DEFAULTS[key]
    cfg_value = cfg.get(key)
    if cfg_value is None:
        return default
    try:
        if isinstance(default, bool):
            if not isinstance(cfg_value, bool):
                raise ValueError(cfg_value)
            return cfg_value
        return type(default)(cfg_value)
    except (TypeError, ValueError):
        LOGGER.warning("Invalid config %s=%r; falling back to %r", key, cfg_value, default)
        return default


def _validated(value: Any, allowed, key: str) -> Any:
    if value in allowed:
        return value
    LOGGER.warning("Unsupported %s %r; falling back to %r", key, value, DEFAULTS[key])
    return DEFAULTS[key]


def build_provider(args: argparse.Namespace, mock_count: Optional[int] = None) -> UsageProvider:
    if args.mock:
        return MockUsageProvider(seed=args.seed, app_count=mock_count)
    return SnapshotProvider(args.snapshot)


def prepare_rows(
    summary: UsageSummary,
    time_range: str,
    search_text: str,
    min_minutes: float,
    sort_field: str,
    sort_direction: str,
) -> List[UsageRow]:
    """Annotate, filter, then sort the summary's apps."""
    annotated = annotate_percentages(summary, time_range)
    filtered = filter_usage_data(annotated.apps, search_text, min_minutes, time_range)
    return sort_usage_data(filtered, sort_field, sort_direction)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging()

    cfg = load_yaml(args.config)
    time_range = _validated(_resolve_option(args, cfg, "time_range"), RANGE_ALIASES, "time_range")
    sort_field = _validated(_resolve_option(args, cfg, "sort_field"), SORT_FIELDS, "sort_field")
    sort_direction = _validated(_resolve_option(args, cfg, "sort_direction"), (ASC, DESC), "sort_direction")
    min_minutes = max(0.0, _resolve_option(args, cfg, "min_minutes"))
    search_text = _resolve_option(args, cfg, "search_text")
    escape_quotes = _resolve_option(args, cfg, "escape_quotes")
    mock_count = _resolve_option(args, cfg, "mock_count")

    provider = build_provider(args, mock_count)
    try:
        summary = asyncio.run(fetch_summary(provider, time_range))
    except ProviderError as exc:
        LOGGER.error("Could not load usage data: %s", exc)
        return 1

    rows = prepare_rows(summary, time_range, search_text, min_minutes, sort_field, sort_direction)
    LOGGER.info("Exporting %d of %d apps (range=%s)", len(rows), len(summary.apps), time_range)

    output_path = args.output
    if output_path is None:
        output_dir = args.output_dir
        if output_dir is None:
            cfg_dir = cfg.get("output_dir")
            output_dir = resolve_path(cfg_dir, args.config.parent) if cfg_dir else Path(DEFAULTS["output_dir"])
        output_path = output_dir / export_filename(time_range)
    write_csv(output_path, generate_csv(rows, escape_quotes=escape_quotes))
    LOGGER.info("Exported usage CSV to %s", output_path)

    if args.show:
        total = total_for_range(summary.totals, time_range)
        print(f"Total screen time ({time_range}): {format_minutes(total)}")
        df = usage_frame(rows, time_range)
        if df.empty:
            print("No apps match the current filters.")
        else:
            print(df.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
