"""Target extraction: where the order should be delivered."""

from __future__ import annotations

from services.order_parser.patterns import BARE_DOMAIN, HANDLE, URL_WITH_SCHEME

# Priority order: scheme URL > bare domain > @handle
_TARGET_PATTERNS = (URL_WITH_SCHEME, BARE_DOMAIN, HANDLE)


def extract_target(text: str) -> str | None:
    """Return the highest-priority URL or @handle, casing preserved.

    Pass the original input, not the lowercased copy.
    """
    for pattern in _TARGET_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0)
    return None
