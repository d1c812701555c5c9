"""Service catalog contract consumed by the order preview.

The lookup itself (HTTP, caching) lives outside this project; callers inject
any callable matching ``ServiceFinder``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CatalogService(BaseModel):
    """A purchasable service, as returned by the catalog API (camelCase JSON)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)

    id: int
    category_id: int
    service_type_id: int
    name: str
    description: str = ""
    quality: str  # e.g. "HIGH"
    speed: str  # e.g. "FAST"
    min_quantity: int = Field(ge=0)
    max_quantity: int = Field(ge=0)
    price_per_k: Decimal = Field(ge=0)
    refill_days: int = 0
    average_time: str = ""
    is_active: bool = True
    sort_order: int = 0


class ServiceFinder(Protocol):
    """Find the active catalog service for a platform + service type pair."""

    def __call__(self, platform_slug: str, service_type_slug: str) -> CatalogService | None: ...
