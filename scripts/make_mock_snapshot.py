#!/usr/bin/env python3
"""CLI for writing a demo usage snapshot JSON."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from usagestats.io_utils import dump_json, setup_logging
from usagestats.providers.mock import SAMPLE_APPS, generate_mock_data
from usagestats.types import UsageSummary, UsageTotals
from usagestats.validation import is_valid_bundle_id


LOGGER = logging.getLogger("scripts.make_mock_snapshot")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write a mock usage snapshot")
    parser.add_argument("output", type=Path, help="Destination JSON path")
    parser.add_argument(
        "--count",
        type=int,
        default=len(SAMPLE_APPS),
        help=f"Number of apps (at most {len(SAMPLE_APPS)})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    return parser.parse_args(argv)


def build_snapshot(count: int, seed: Optional[int] = None) -> UsageSummary:
    rows = generate_mock_data(count, seed=seed)
    invalid = [row.bundle_id for row in rows if not is_valid_bundle_id(row.bundle_id)]
    if invalid:
        LOGGER.warning("Mock catalog contains invalid bundle ids: %s", ", ".join(invalid))
    return UsageSummary(
        apps=tuple(rows),
        totals=UsageTotals.from_rows(rows),
        last_updated=datetime.now(timezone.utc).isoformat(),
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging()

    if args.count > len(SAMPLE_APPS):
        LOGGER.warning("Requested %d apps; catalog only has %d", args.count, len(SAMPLE_APPS))
    summary = build_snapshot(args.count, seed=args.seed)
    dump_json(args.output, summary.to_dict())
    LOGGER.info("Wrote mock snapshot with %d apps to %s", len(summary.apps), args.output)


if __name__ == "__main__":
    main()
