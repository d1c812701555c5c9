"""Order-intent parser — rule-based, multilingual, no network calls."""

from services.order_parser.keywords import (
    COMPACT_DISPLAY_NAMES,
    COMPACT_KEYWORDS,
    DEFAULT_DISPLAY_NAMES,
    DEFAULT_KEYWORDS,
    DisplayNameMapping,
    KeywordMapping,
    get_keyword_profile,
)
from services.order_parser.parser import EMPTY_ORDER, OrderParser, ParsedOrder
from services.order_parser.platforms import extract_platform
from services.order_parser.quantity import extract_quantity
from services.order_parser.scoring import score_match
from services.order_parser.service_types import extract_service_type
from services.order_parser.target import extract_target

__all__ = [
    "COMPACT_DISPLAY_NAMES",
    "COMPACT_KEYWORDS",
    "DEFAULT_DISPLAY_NAMES",
    "DEFAULT_KEYWORDS",
    "EMPTY_ORDER",
    "DisplayNameMapping",
    "KeywordMapping",
    "OrderParser",
    "ParsedOrder",
    "extract_platform",
    "extract_quantity",
    "extract_service_type",
    "extract_target",
    "get_keyword_profile",
    "score_match",
]
