"""Tests for services/catalog.py — CatalogService model."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from services.catalog import CatalogService

_CAMEL_PAYLOAD = {
    "id": 7,
    "categoryId": 1,
    "serviceTypeId": 2,
    "name": "Instagram Followers HQ",
    "quality": "HIGH",
    "speed": "FAST",
    "minQuantity": 100,
    "maxQuantity": 100000,
    "pricePerK": "1.10",
    "refillDays": 30,
    "averageTime": "2h",
    "isActive": True,
    "sortOrder": 1,
}


class TestCatalogService:
    def test_accepts_camel_case_payload(self) -> None:
        service = CatalogService.model_validate(_CAMEL_PAYLOAD)
        assert service.category_id == 1
        assert service.min_quantity == 100
        assert service.price_per_k == Decimal("1.10")
        assert service.refill_days == 30

    def test_accepts_field_names(self) -> None:
        service = CatalogService(
            id=1,
            category_id=1,
            service_type_id=1,
            name="TikTok Likes",
            quality="MEDIUM",
            speed="SLOW",
            min_quantity=10,
            max_quantity=1000,
            price_per_k=Decimal("0.5"),
        )
        assert service.description == ""
        assert service.is_active is True

    def test_negative_limits_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CatalogService.model_validate({**_CAMEL_PAYLOAD, "minQuantity": -1})

    def test_dump_by_alias(self) -> None:
        dumped = CatalogService.model_validate(_CAMEL_PAYLOAD).model_dump(by_alias=True)
        assert dumped["pricePerK"] == Decimal("1.10")
        assert "price_per_k" not in dumped
