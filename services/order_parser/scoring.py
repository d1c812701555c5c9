"""Confidence score for a parsed order (0-100)."""

from __future__ import annotations

QUANTITY_WEIGHT = 25
PLATFORM_WEIGHT = 25
SERVICE_TYPE_WEIGHT = 25
TARGET_WEIGHT = 18
# Granted when quantity, platform and service type are all present
COMPLETENESS_BONUS = 7

MAX_SCORE = 100


def score_match(
    quantity: int | None,
    platform: str | None,
    service_type: str | None,
    target: str | None,
) -> int:
    """Weighted sum of found fields plus the completeness bonus.

    A zero quantity counts as not found.
    """
    has_quantity = bool(quantity)
    score = 0
    if has_quantity:
        score += QUANTITY_WEIGHT
    if platform:
        score += PLATFORM_WEIGHT
    if service_type:
        score += SERVICE_TYPE_WEIGHT
    if target:
        score += TARGET_WEIGHT

    if has_quantity and platform and service_type:
        score = min(score + COMPLETENESS_BONUS, MAX_SCORE)

    return score
