"""Keyword and display-name dictionaries for the order-intent parser.

Synonyms map to canonical slugs from ``core.constants``. Latin-script keys are
lowercase; Hindi and Arabic keys are stored verbatim next to an ASCII
transliteration so both spellings match exactly.

Two profiles ship: ``full`` (multilingual) and ``compact`` (the short English
list used by the landing-page order box). Both feed the same parser.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from core.constants import (
    PLATFORM_LABELS,
    PLATFORM_SLUGS,
    SERVICE_COMMENTS,
    SERVICE_FOLLOWERS,
    SERVICE_LIKES,
    SERVICE_TYPE_LABELS,
    SERVICE_TYPE_SLUGS,
)
from core.exceptions import KeywordMappingError


def _check_synonyms(domain: str, synonyms: Mapping[str, str], allowed: frozenset[str]) -> None:
    for key, slug in synonyms.items():
        if not key or key != key.strip():
            raise KeywordMappingError(f"{domain}: empty or untrimmed synonym {key!r}")
        if key != key.lower():
            raise KeywordMappingError(f"{domain}: synonym {key!r} must be lowercase")
        if slug not in allowed:
            raise KeywordMappingError(f"{domain}: synonym {key!r} maps to unknown slug {slug!r}")


def _check_labels(domain: str, labels: Mapping[str, str], allowed: frozenset[str]) -> None:
    for slug, label in labels.items():
        if slug not in allowed:
            raise KeywordMappingError(f"{domain}: display name for unknown slug {slug!r}")
        if not label:
            raise KeywordMappingError(f"{domain}: empty display name for {slug!r}")


@dataclass(frozen=True)
class KeywordMapping:
    """Synonym -> canonical slug, per domain. Read-only after construction."""

    platforms: Mapping[str, str]
    service_types: Mapping[str, str]

    def __post_init__(self) -> None:
        _check_synonyms("platforms", self.platforms, PLATFORM_SLUGS)
        _check_synonyms("service_types", self.service_types, SERVICE_TYPE_SLUGS)
        object.__setattr__(self, "platforms", MappingProxyType(dict(self.platforms)))
        object.__setattr__(self, "service_types", MappingProxyType(dict(self.service_types)))


@dataclass(frozen=True)
class DisplayNameMapping:
    """Canonical slug -> UI label, per domain. Need not be exhaustive."""

    platforms: Mapping[str, str]
    service_types: Mapping[str, str]

    def __post_init__(self) -> None:
        _check_labels("platforms", self.platforms, PLATFORM_SLUGS)
        _check_labels("service_types", self.service_types, SERVICE_TYPE_SLUGS)
        object.__setattr__(self, "platforms", MappingProxyType(dict(self.platforms)))
        object.__setattr__(self, "service_types", MappingProxyType(dict(self.service_types)))


# ---------------------------------------------------------------------------
# Full multilingual profile
# English, Spanish, German, French, Hindi, Indonesian, Arabic, Portuguese
# ---------------------------------------------------------------------------

_PLATFORM_SYNONYMS: dict[str, str] = {
    "instagram": "instagram",
    "insta": "instagram",
    "ig": "instagram",
    "tiktok": "tiktok",
    "tik-tok": "tiktok",
    "tik": "tiktok",
    "tok": "tiktok",
    "tt": "tiktok",
    "twitter": "twitter",
    "x": "twitter",
    "tweet": "twitter",
    "youtube": "youtube",
    "yt": "youtube",
    "snapchat": "snapchat",
    "snap": "snapchat",
    "facebook": "facebook",
    "fb": "facebook",
    "discord": "discord",
    "linkedin": "linkedin",
    "li": "linkedin",
}

_SERVICE_TYPE_SYNONYMS: dict[str, str] = {
    # followers
    "followers": "followers",
    "follower": "followers",
    "follow": "followers",
    "seguidores": "followers",
    "seguidor": "followers",
    "anhänger": "followers",
    "anhanger": "followers",
    "abonnés": "followers",
    "abonnes": "followers",
    "suiveurs": "followers",
    "suiveur": "followers",
    "फॉलोअर्स": "followers",
    "अनुयायी": "followers",
    "anuyayi": "followers",
    "pengikut": "followers",
    "متابعين": "followers",
    "متابع": "followers",
    "mutabiin": "followers",
    "mutabi": "followers",
    # likes
    "likes": "likes",
    "like": "likes",
    "me gusta": "likes",
    "megusta": "likes",
    "gefällt mir": "likes",
    "gefallt mir": "likes",
    "gefällt": "likes",
    "gefallt": "likes",
    "j'aime": "likes",
    "jaime": "likes",
    "लाइक्स": "likes",
    "पसंद": "likes",
    "pasand": "likes",
    "suka": "likes",
    "إعجابات": "likes",
    "لايكات": "likes",
    "ijabat": "likes",
    "laykat": "likes",
    "curtidas": "likes",
    "curtir": "likes",
    # comments
    "comments": "comments",
    "comment": "comments",
    "comentarios": "comments",
    "comentario": "comments",
    "kommentare": "comments",
    "kommentar": "comments",
    "commentaires": "comments",
    "commentaire": "comments",
    "टिप्पणियां": "comments",
    "कमेंट्स": "comments",
    "tippaniyaan": "comments",
    "komentar": "comments",
    "تعليقات": "comments",
    "taaliqat": "comments",
    # views
    "views": "views",
    "view": "views",
    "vistas": "views",
    "vista": "views",
    "visualizaciones": "views",
    "visualizacion": "views",
    "aufrufe": "views",
    "aufruf": "views",
    "ansichten": "views",
    "ansicht": "views",
    "vues": "views",
    "vue": "views",
    "व्यूज": "views",
    "देखे": "views",
    "dekhe": "views",
    "tayangan": "views",
    "tontonan": "views",
    "dilihat": "views",
    "مشاهدات": "views",
    "mushahadat": "views",
    "visualizacoes": "views",
    # subscribers ("abonnés" stays on followers)
    "subscribers": "subscribers",
    "subscriber": "subscribers",
    "subs": "subscribers",
    "sub": "subscribers",
    "suscriptores": "subscribers",
    "suscriptor": "subscribers",
    "abonnenten": "subscribers",
    "abonnent": "subscribers",
    "सब्सक्राइबर्स": "subscribers",
    "सदस्य": "subscribers",
    "sadasya": "subscribers",
    "pelanggan": "subscribers",
    "مشتركين": "subscribers",
    "mushtarikin": "subscribers",
    "inscritos": "subscribers",
    "assinantes": "subscribers",
    # shares
    "shares": "shares",
    "share": "shares",
    "compartidos": "shares",
    "compartido": "shares",
    "compartir": "shares",
    "teilen": "shares",
    "geteilt": "shares",
    "partages": "shares",
    "partage": "shares",
    "partager": "shares",
    "शेयर्स": "shares",
    "साझा": "shares",
    "sajha": "shares",
    "bagikan": "shares",
    "berbagi": "shares",
    "مشاركات": "shares",
    "musharakat": "shares",
    "compartilhamentos": "shares",
    # twitter/x only
    "retweets": "retweets",
    "retweet": "retweets",
    # linkedin only
    "connections": "connections",
    "connection": "connections",
    "connect": "connections",
    "reposts": "reposts",
    "repost": "reposts",
}

DEFAULT_KEYWORDS = KeywordMapping(
    platforms=_PLATFORM_SYNONYMS,
    service_types=_SERVICE_TYPE_SYNONYMS,
)

DEFAULT_DISPLAY_NAMES = DisplayNameMapping(
    platforms=PLATFORM_LABELS,
    service_types=SERVICE_TYPE_LABELS,
)


# ---------------------------------------------------------------------------
# Compact profile (landing-page order box)
# ---------------------------------------------------------------------------

_COMPACT_PLATFORMS = (
    "instagram",
    "insta",
    "ig",
    "tiktok",
    "tik",
    "tok",
    "twitter",
    "x",
    "youtube",
    "yt",
    "snapchat",
    "snap",
    "facebook",
    "fb",
    "discord",
    "linkedin",
)

_COMPACT_SERVICE_TYPES = ("followers", "follower", "follow", "likes", "like", "comments", "comment")

COMPACT_KEYWORDS = KeywordMapping(
    platforms={key: _PLATFORM_SYNONYMS[key] for key in _COMPACT_PLATFORMS},
    service_types={key: _SERVICE_TYPE_SYNONYMS[key] for key in _COMPACT_SERVICE_TYPES},
)

COMPACT_DISPLAY_NAMES = DisplayNameMapping(
    platforms=PLATFORM_LABELS,
    service_types={slug: SERVICE_TYPE_LABELS[slug] for slug in (SERVICE_FOLLOWERS, SERVICE_LIKES, SERVICE_COMMENTS)},
)


KEYWORD_PROFILES: dict[str, tuple[KeywordMapping, DisplayNameMapping]] = {
    "full": (DEFAULT_KEYWORDS, DEFAULT_DISPLAY_NAMES),
    "compact": (COMPACT_KEYWORDS, COMPACT_DISPLAY_NAMES),
}


def get_keyword_profile(name: str) -> tuple[KeywordMapping, DisplayNameMapping]:
    """Return the (keywords, display names) pair registered under ``name``.

    Raises ``KeywordMappingError`` if the profile is unknown.
    """
    profile = KEYWORD_PROFILES.get(name)
    if profile is None:
        raise KeywordMappingError(f"Unknown keyword profile: {name!r}")
    return profile
