"""Order-intent parser: free text -> quantity, platform, service type, target.

Example::

    parser = OrderParser()
    parser.parse("1k instagram seguidores @username")
    # ParsedOrder(quantity=1000, platform='instagram', service_type='followers',
    #             target='@username', match_percentage=100)

Pure and synchronous. The dictionaries are injected once and never mutated,
so one instance can serve any number of callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from core.constants import DOMAIN_PLATFORM, DOMAIN_SERVICE_TYPE
from services.order_parser.keywords import (
    DEFAULT_DISPLAY_NAMES,
    DEFAULT_KEYWORDS,
    DisplayNameMapping,
    KeywordMapping,
)
from services.order_parser.platforms import extract_platform
from services.order_parser.quantity import extract_quantity
from services.order_parser.scoring import score_match
from services.order_parser.service_types import extract_service_type
from services.order_parser.synonyms import SynonymTable
from services.order_parser.target import extract_target

log = structlog.get_logger()


@dataclass(frozen=True)
class ParsedOrder:
    """Result of a single ``parse`` call."""

    quantity: int | None = None
    platform: str | None = None
    service_type: str | None = None
    target: str | None = None
    match_percentage: int = 0

    def to_dict(self) -> dict[str, Any]:
        """camelCase record consumed by the storefront UI."""
        return {
            "quantity": self.quantity,
            "platform": self.platform,
            "serviceType": self.service_type,
            "target": self.target,
            "matchPercentage": self.match_percentage,
        }


EMPTY_ORDER = ParsedOrder()


def _capitalize(slug: str) -> str:
    # str.capitalize() would lowercase the tail
    return slug[:1].upper() + slug[1:]


class OrderParser:
    """Rule-based extractor over immutable keyword dictionaries."""

    def __init__(
        self,
        keywords: KeywordMapping = DEFAULT_KEYWORDS,
        display_names: DisplayNameMapping = DEFAULT_DISPLAY_NAMES,
    ) -> None:
        self._keywords = keywords
        self._display_names = display_names
        self._platforms = SynonymTable.from_mapping(keywords.platforms)
        self._service_types = SynonymTable.from_mapping(keywords.service_types)
        log.debug(
            "order_parser_initialized",
            platform_synonyms=len(keywords.platforms),
            service_type_synonyms=len(keywords.service_types),
        )

    @property
    def keywords(self) -> KeywordMapping:
        return self._keywords

    @property
    def display_names(self) -> DisplayNameMapping:
        return self._display_names

    def parse(self, text: str) -> ParsedOrder:
        """Parse user input into a ParsedOrder. Never raises.

        Quantity, platform and service type are read from the trimmed,
        lowercased text; the target from the original input so handles and
        URLs keep their casing.
        """
        normalized = text.strip().lower()
        if not normalized:
            return EMPTY_ORDER

        quantity = extract_quantity(normalized)
        platform = extract_platform(normalized, self._platforms)
        service_type = extract_service_type(normalized, self._service_types)
        target = extract_target(text)

        return ParsedOrder(
            quantity=quantity,
            platform=platform,
            service_type=service_type,
            target=target,
            match_percentage=score_match(quantity, platform, service_type, target),
        )

    # ------------------------------------------------------------------
    # Display names
    # ------------------------------------------------------------------

    def get_platform_display_name(self, slug: str) -> str:
        """'instagram' -> 'INSTAGRAM'; unknown slugs are uppercased."""
        label = self._display_names.platforms.get(slug)
        return label if label is not None else slug.upper()

    def get_service_type_display_name(self, slug: str) -> str:
        """'followers' -> 'Followers'; unknown slugs get a capital first letter."""
        label = self._display_names.service_types.get(slug)
        return label if label is not None else _capitalize(slug)

    def display_name(self, domain: str, slug: str) -> str:
        """Resolve a label for ``slug`` in ``domain`` ('platform' or 'service_type').

        Raises ``ValueError`` for any other domain.
        """
        if domain == DOMAIN_PLATFORM:
            return self.get_platform_display_name(slug)
        if domain == DOMAIN_SERVICE_TYPE:
            return self.get_service_type_display_name(slug)
        raise ValueError(f"Unknown display-name domain: {domain!r}")
