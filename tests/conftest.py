"""Root conftest — shared fixtures for all tests."""

import pytest

from services.order_parser.keywords import COMPACT_DISPLAY_NAMES, COMPACT_KEYWORDS
from services.order_parser.parser import OrderParser


@pytest.fixture
def parser() -> OrderParser:
    """Parser over the full multilingual dictionary."""
    return OrderParser()


@pytest.fixture
def compact_parser() -> OrderParser:
    """Parser over the compact landing-page dictionary."""
    return OrderParser(COMPACT_KEYWORDS, COMPACT_DISPLAY_NAMES)
