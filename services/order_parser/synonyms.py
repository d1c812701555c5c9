"""Lookup tables derived once from a synonym dictionary."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

_Entries = tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class SynonymTable:
    """Exact-match index plus synonyms ordered longest first.

    Equal-length synonyms keep dictionary order, so ties resolve the same
    way on every call.
    """

    exact: Mapping[str, str]
    longest_first: _Entries
    multi_word: _Entries
    single_word: _Entries

    @classmethod
    def from_mapping(cls, synonyms: Mapping[str, str]) -> SynonymTable:
        ordered = tuple(sorted(synonyms.items(), key=lambda item: len(item[0]), reverse=True))
        return cls(
            exact=synonyms,
            longest_first=ordered,
            multi_word=tuple(item for item in ordered if " " in item[0]),
            single_word=tuple(item for item in ordered if " " not in item[0]),
        )

    def match_word(self, words: list[str]) -> str | None:
        """Slug of the first word with an exact entry."""
        for word in words:
            slug = self.exact.get(word)
            if slug is not None:
                return slug
        return None

    @staticmethod
    def match_substring(text: str, entries: _Entries) -> str | None:
        """Slug of the first entry (in the given order) contained in ``text``."""
        for synonym, slug in entries:
            if synonym in text:
                return slug
        return None
