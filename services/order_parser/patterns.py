"""Precompiled patterns shared by the extractors.

Compiled once at import; ``parse`` runs on every keystroke.
"""

from __future__ import annotations

import re

# Bare domains are only recognised for these TLDs
DOMAIN_TLDS: tuple[str, ...] = ("com", "net", "org", "io", "co", "me", "tv", "app", "dev", "link", "bio", "page")

URL_WITH_SCHEME = re.compile(r"https?://\S+", re.IGNORECASE)

BARE_DOMAIN = re.compile(
    r"(?:www\.)?[\w-]+\.(?:" + "|".join(DOMAIN_TLDS) + r")(?:/\S*)?",
    re.IGNORECASE,
)

HANDLE = re.compile(r"@[\w.-]+")

# "1000", "1.5k", "1kfollowers", "2 m". A suffix after whitespace must end a word ("500 me gusta")
QUANTITY = re.compile(r"(\d+(?:\.\d+)?)(?:([km])|\s+([km])\b)?", re.IGNORECASE | re.ASCII)
