"""Platform extraction."""

from __future__ import annotations

from services.order_parser.synonyms import SynonymTable


def extract_platform(text: str, table: SynonymTable) -> str | None:
    """Resolve a platform slug from normalized text.

    Whole words first (earliest word wins), then the longest synonym found
    anywhere in the text, so "instagram" beats an accidental "ig".
    """
    slug = table.match_word(text.split())
    if slug is not None:
        return slug
    return table.match_substring(text, table.longest_first)
