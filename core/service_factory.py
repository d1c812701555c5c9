"""Factory functions wiring settings into parser and preview instances.

Parsers are immutable, so one instance per keyword profile is shared.
Preview services bind a caller-supplied catalog lookup and are not cached.

Usage:
    parser = get_order_parser()
    previews = create_preview_service(catalog.find_service)
"""

from __future__ import annotations

from functools import lru_cache

import structlog

from core.config import Settings, get_settings
from services.catalog import ServiceFinder
from services.order_parser.keywords import get_keyword_profile
from services.order_parser.parser import OrderParser
from services.preview import OrderPreviewService

log = structlog.get_logger()


@lru_cache(maxsize=4)
def get_order_parser(profile: str | None = None) -> OrderParser:
    """Shared OrderParser for ``profile`` (defaults to settings.keyword_profile)."""
    name = profile or get_settings().keyword_profile
    keywords, display_names = get_keyword_profile(name)
    log.info("keyword_profile_loaded", profile=name)
    return OrderParser(keywords, display_names)


def create_preview_service(
    find_service: ServiceFinder,
    settings: Settings | None = None,
) -> OrderPreviewService:
    """OrderPreviewService with the configured profile and threshold."""
    settings = settings or get_settings()
    return OrderPreviewService(
        get_order_parser(settings.keyword_profile),
        find_service,
        threshold=settings.preview_threshold,
    )
