"""Structural checks for reverse-DNS bundle identifiers."""

from __future__ import annotations

import re

# Two or more dot-separated segments; each starts alphanumeric and may contain hyphens.
BUNDLE_ID_PATTERN = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9\-]*(?:\.[a-zA-Z0-9][a-zA-Z0-9\-]*)+")


def is_valid_bundle_id(bundle_id: str) -> bool:
    if not isinstance(bundle_id, str):
        return False
    return BUNDLE_ID_PATTERN.fullmatch(bundle_id) is not None
