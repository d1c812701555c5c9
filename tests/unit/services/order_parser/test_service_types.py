"""Tests for services/order_parser/service_types.py — service-type extraction.

Covers: compound phrases, multi-word synonyms, multilingual exact words,
partial matches, absent service type.
"""

from __future__ import annotations

import pytest

from services.order_parser.keywords import DEFAULT_KEYWORDS
from services.order_parser.service_types import extract_service_type
from services.order_parser.synonyms import SynonymTable

_TABLE = SynonymTable.from_mapping(DEFAULT_KEYWORDS.service_types)


class TestCompounds:
    def test_company_followers(self) -> None:
        assert extract_service_type("500 company followers linkedin", _TABLE) == "company-followers"

    def test_company_anywhere_in_text(self) -> None:
        assert extract_service_type("followers for my company page", _TABLE) == "company-followers"

    def test_profile_followers(self) -> None:
        assert extract_service_type("1k profile followers linkedin", _TABLE) == "followers"

    def test_company_without_followers_is_not_compound(self) -> None:
        assert extract_service_type("company likes", _TABLE) == "likes"


class TestMultiWord:
    @pytest.mark.parametrize(
        "text",
        ["100 me gusta instagram", "gefällt mir 200", "gefallt mir 200"],
    )
    def test_multi_word_likes(self, text: str) -> None:
        assert extract_service_type(text, _TABLE) == "likes"


class TestExactWords:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1000 seguidores instagram", "followers"),
            ("200 abonnés", "followers"),
            ("1000 फॉलोअर्स instagram", "followers"),
            ("500 متابعين", "followers"),
            ("1k curtidas", "likes"),
            ("50 kommentare", "comments"),
            ("10k aufrufe youtube", "views"),
            ("1k inscritos youtube", "subscribers"),
            ("100 partages", "shares"),
            ("100 retweets", "retweets"),
            ("500 connections", "connections"),
            ("50 reposts", "reposts"),
        ],
    )
    def test_multilingual(self, text: str, expected: str) -> None:
        assert extract_service_type(text, _TABLE) == expected

    def test_first_exact_word_beats_longer_partial(self) -> None:
        assert extract_service_type("like 100 followersx", _TABLE) == "likes"


class TestPartial:
    def test_longest_contained_synonym(self) -> None:
        assert extract_service_type("1k subscribersss", _TABLE) == "subscribers"

    def test_attached_to_number(self) -> None:
        assert extract_service_type("1kfollowers", _TABLE) == "followers"


class TestAbsent:
    @pytest.mark.parametrize("text", ["1000 instagram", "", "@bob"])
    def test_no_service_type(self, text: str) -> None:
        assert extract_service_type(text, _TABLE) is None
