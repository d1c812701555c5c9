"""Service-type extraction with compound-phrase handling."""

from __future__ import annotations

from core.constants import SERVICE_COMPANY_FOLLOWERS, SERVICE_FOLLOWERS
from services.order_parser.synonyms import SynonymTable

# (required words, slug) -- checked before any dictionary lookup
COMPOUND_SERVICE_TYPES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("company", "followers"), SERVICE_COMPANY_FOLLOWERS),
    (("profile", "followers"), SERVICE_FOLLOWERS),
)


def extract_service_type(text: str, table: SynonymTable) -> str | None:
    """Resolve a service-type slug from normalized text.

    Order: compound phrases, multi-word synonyms (longest first), exact
    words, then single-word synonyms as substrings (longest first).
    """
    for words, slug in COMPOUND_SERVICE_TYPES:
        if all(word in text for word in words):
            return slug

    slug = table.match_substring(text, table.multi_word)
    if slug is not None:
        return slug

    slug = table.match_word(text.split())
    if slug is not None:
        return slug

    return table.match_substring(text, table.single_word)
