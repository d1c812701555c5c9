"""Tests for services/order_parser/keywords.py — dictionaries and profiles.

Covers: closed slug sets, non-Latin keys with transliterations, immutability,
construction-time validation, compact profile as a subset, profile lookup.
"""

from __future__ import annotations

import dataclasses

import pytest

from core.constants import PLATFORM_SLUGS, SERVICE_TYPE_LABELS, SERVICE_TYPE_SLUGS
from core.exceptions import KeywordMappingError
from services.order_parser.keywords import (
    COMPACT_DISPLAY_NAMES,
    COMPACT_KEYWORDS,
    DEFAULT_DISPLAY_NAMES,
    DEFAULT_KEYWORDS,
    DisplayNameMapping,
    KeywordMapping,
    get_keyword_profile,
)


class TestDefaultKeywords:
    def test_platform_values_in_closed_set(self) -> None:
        assert set(DEFAULT_KEYWORDS.platforms.values()) == PLATFORM_SLUGS

    def test_service_type_values_in_closed_set(self) -> None:
        assert set(DEFAULT_KEYWORDS.service_types.values()) <= SERVICE_TYPE_SLUGS

    def test_company_followers_only_reachable_as_compound(self) -> None:
        assert "company-followers" not in DEFAULT_KEYWORDS.service_types.values()

    @pytest.mark.parametrize(
        ("native", "ascii_key", "slug"),
        [
            ("अनुयायी", "anuyayi", "followers"),
            ("متابعين", "mutabiin", "followers"),
            ("पसंद", "pasand", "likes"),
            ("مشاهدات", "mushahadat", "views"),
            ("anhänger", "anhanger", "followers"),
            ("abonnés", "abonnes", "followers"),
        ],
    )
    def test_native_and_transliterated_keys(self, native: str, ascii_key: str, slug: str) -> None:
        assert DEFAULT_KEYWORDS.service_types[native] == slug
        assert DEFAULT_KEYWORDS.service_types[ascii_key] == slug

    def test_multi_word_synonyms_present(self) -> None:
        assert DEFAULT_KEYWORDS.service_types["me gusta"] == "likes"
        assert DEFAULT_KEYWORDS.service_types["gefällt mir"] == "likes"


class TestImmutability:
    def test_mapping_rejects_item_assignment(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_KEYWORDS.platforms["myspace"] = "instagram"  # type: ignore[index]

    def test_dataclass_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_KEYWORDS.platforms = {}  # type: ignore[misc]

    def test_source_dict_copied(self) -> None:
        source = {"insta": "instagram"}
        mapping = KeywordMapping(platforms=source, service_types={})
        source["fb"] = "facebook"
        assert "fb" not in mapping.platforms


class TestValidation:
    def test_unknown_platform_slug(self) -> None:
        with pytest.raises(KeywordMappingError, match="myspace"):
            KeywordMapping(platforms={"ms": "myspace"}, service_types={})

    def test_unknown_service_type_slug(self) -> None:
        with pytest.raises(KeywordMappingError, match="hugs"):
            KeywordMapping(platforms={}, service_types={"hug": "hugs"})

    def test_uppercase_key_rejected(self) -> None:
        with pytest.raises(KeywordMappingError, match="lowercase"):
            KeywordMapping(platforms={"Insta": "instagram"}, service_types={})

    @pytest.mark.parametrize("key", ["", " ig", "ig "])
    def test_empty_or_untrimmed_key_rejected(self, key: str) -> None:
        with pytest.raises(KeywordMappingError):
            KeywordMapping(platforms={key: "instagram"}, service_types={})

    def test_display_name_for_unknown_slug(self) -> None:
        with pytest.raises(KeywordMappingError, match="myspace"):
            DisplayNameMapping(platforms={"myspace": "MYSPACE"}, service_types={})

    def test_empty_display_name(self) -> None:
        with pytest.raises(KeywordMappingError):
            DisplayNameMapping(platforms={}, service_types={"likes": ""})


class TestProfiles:
    def test_full_profile(self) -> None:
        assert get_keyword_profile("full") == (DEFAULT_KEYWORDS, DEFAULT_DISPLAY_NAMES)

    def test_compact_profile(self) -> None:
        assert get_keyword_profile("compact") == (COMPACT_KEYWORDS, COMPACT_DISPLAY_NAMES)

    def test_unknown_profile(self) -> None:
        with pytest.raises(KeywordMappingError, match="nope"):
            get_keyword_profile("nope")

    def test_compact_is_subset_of_full(self) -> None:
        for key, slug in COMPACT_KEYWORDS.platforms.items():
            assert DEFAULT_KEYWORDS.platforms[key] == slug
        for key, slug in COMPACT_KEYWORDS.service_types.items():
            assert DEFAULT_KEYWORDS.service_types[key] == slug

    def test_compact_service_types(self) -> None:
        assert set(COMPACT_KEYWORDS.service_types.values()) == {"followers", "likes", "comments"}

    def test_compact_display_names_not_exhaustive(self) -> None:
        assert set(COMPACT_DISPLAY_NAMES.service_types) == {"followers", "likes", "comments"}
        assert len(DEFAULT_DISPLAY_NAMES.service_types) == len(SERVICE_TYPE_LABELS)
