"""Quantity extraction: "1k", "2.5m", "500"."""

from __future__ import annotations

import math

from services.order_parser.patterns import BARE_DOMAIN, HANDLE, QUANTITY, URL_WITH_SCHEME

_MULTIPLIERS = {"k": 1_000, "m": 1_000_000}


def strip_references(text: str) -> str:
    """Remove URLs, bare domains and @handles (they often carry digits)."""
    text = URL_WITH_SCHEME.sub("", text)
    text = BARE_DOMAIN.sub("", text)
    return HANDLE.sub("", text)


def extract_quantity(text: str) -> int | None:
    """First numeric literal outside URLs/handles, scaled by its k/m suffix.

    Rounds half up. Returns None when no number is left after stripping.
    """
    match = QUANTITY.search(strip_references(text))
    if match is None:
        return None

    value = float(match.group(1))
    suffix = match.group(2) or match.group(3)
    if suffix:
        value *= _MULTIPLIERS[suffix.lower()]
    return math.floor(value + 0.5)
