"""Order preview service — parsed intent + catalog service -> priced preview.

Used by the storefront order box (home page and dashboard).
No HTTP or UI dependencies: the catalog lookup is injected.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

import structlog

from core.constants import DEFAULT_PREVIEW_THRESHOLD
from core.exceptions import AppError, CatalogUnavailableError
from services.catalog import CatalogService, ServiceFinder
from services.order_parser.parser import OrderParser, ParsedOrder
from services.order_parser.patterns import BARE_DOMAIN, HANDLE, QUANTITY, URL_WITH_SCHEME

log = structlog.get_logger()

_CENT = Decimal("0.01")
_MICRO = Decimal("0.000001")
_TENTH = Decimal("0.1")
_THOUSAND = 1_000
_MILLION = 1_000_000


@dataclass(frozen=True)
class QuantityValidationError:
    """Quantity outside the service's min/max limits."""

    kind: str  # "min" | "max"
    message: str
    limit: int


@dataclass(frozen=True)
class OrderPreview:
    """Everything the order-ready card renders."""

    match_percentage: int
    platform: str  # display label
    service_type: str  # display label
    quality: str
    speed: str
    quantity: int
    price: str
    target: str | None = None
    validation_error: QuantityValidationError | None = None

    @property
    def is_order_disabled(self) -> bool:
        return self.validation_error is not None


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_price(price: Decimal | float | int) -> str:
    """'$3.30' for prices >= 0.01, up to six trimmed decimals below that."""
    amount = Decimal(str(price))
    if amount >= _CENT:
        return f"${amount.quantize(_CENT, rounding=ROUND_HALF_UP)}"
    small = format(amount.quantize(_MICRO, rounding=ROUND_HALF_UP), "f")
    return "$" + small.rstrip("0").rstrip(".")


def _with_suffix(value: Decimal, suffix: str) -> str:
    if value == value.to_integral_value():
        return f"{int(value)}{suffix}"
    return f"{value.quantize(_TENTH, rounding=ROUND_HALF_UP)}{suffix}"


def format_quantity(quantity: int) -> str:
    """1500 -> '1.5k', 2000000 -> '2m', 750 -> '750'."""
    if quantity >= _MILLION:
        return _with_suffix(Decimal(quantity) / _MILLION, "m")
    if quantity >= _THOUSAND:
        return _with_suffix(Decimal(quantity) / _THOUSAND, "k")
    return str(quantity)


# ---------------------------------------------------------------------------
# Input-text editing (order card -> input box)
# ---------------------------------------------------------------------------


def quick_order_text(service_name: str) -> str:
    """Prefill for a quick-order chip: '1k Instagram Followers'."""
    return f"1k {service_name}"


def replace_target(text: str, parsed: ParsedOrder, new_target: str) -> str:
    """Swap the parsed target for ``new_target``, or append it."""
    if parsed.target:
        return text.replace(parsed.target, new_target, 1)
    return f"{text} {new_target}"


def _reference_spans(text: str) -> list[tuple[int, int]]:
    spans: list[tuple[int, int]] = []
    for pattern in (URL_WITH_SCHEME, BARE_DOMAIN, HANDLE):
        spans.extend(m.span() for m in pattern.finditer(text))
    return spans


def replace_quantity(text: str, new_quantity: int) -> str:
    """Rewrite the quantity literal in ``text``; digits in URLs/handles are kept.

    Prepends the quantity when the text has none.
    """
    formatted = format_quantity(new_quantity)
    protected = _reference_spans(text)
    for match in QUANTITY.finditer(text):
        start, end = match.span()
        if any(start < p_end and p_start < end for p_start, p_end in protected):
            continue
        return text[:start] + formatted + text[end:]
    return f"{formatted} {text}" if text.strip() else formatted


def validate_quantity(quantity: int, service: CatalogService) -> QuantityValidationError | None:
    """Check ``quantity`` against the service's limits."""
    if quantity < service.min_quantity:
        return QuantityValidationError(
            kind="min",
            message=f"Minimum quantity is {service.min_quantity:,}",
            limit=service.min_quantity,
        )
    if quantity > service.max_quantity:
        return QuantityValidationError(
            kind="max",
            message=f"Maximum quantity is {service.max_quantity:,}",
            limit=service.max_quantity,
        )
    return None


# ---------------------------------------------------------------------------
# OrderPreviewService
# ---------------------------------------------------------------------------


class OrderPreviewService:
    """Turns parsed input into an OrderPreview using the injected catalog lookup.

    Debouncing keystrokes before lookups is the caller's concern.
    """

    def __init__(
        self,
        parser: OrderParser,
        find_service: ServiceFinder,
        *,
        threshold: int = DEFAULT_PREVIEW_THRESHOLD,
    ) -> None:
        if not 0 <= threshold <= 100:
            msg = f"threshold must be between 0 and 100, got {threshold}"
            raise ValueError(msg)
        self._parser = parser
        self._find_service = find_service
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        return self._threshold

    def should_show(self, parsed: ParsedOrder) -> bool:
        """Whether the parse is confident enough to surface a preview."""
        return parsed.match_percentage >= self._threshold

    def find_service(self, parsed: ParsedOrder) -> CatalogService | None:
        """Look up the catalog service; None unless platform and type are known.

        Raises ``CatalogUnavailableError`` if the lookup itself fails.
        """
        if not parsed.platform or not parsed.service_type:
            return None
        try:
            service = self._find_service(parsed.platform, parsed.service_type)
        except AppError:
            raise
        except Exception as exc:
            log.warning(
                "catalog_lookup_failed",
                platform=parsed.platform,
                service_type=parsed.service_type,
                error=str(exc),
            )
            raise CatalogUnavailableError(
                f"Catalog lookup failed for {parsed.platform}/{parsed.service_type}"
            ) from exc

        if service is None:
            log.debug("catalog_miss", platform=parsed.platform, service_type=parsed.service_type)
        else:
            log.debug("catalog_hit", service_id=service.id, platform=parsed.platform)
        return service

    def build(self, parsed: ParsedOrder) -> OrderPreview | None:
        """Assemble the preview, or None when there is nothing to show yet."""
        if not self.should_show(parsed):
            return None

        service = self.find_service(parsed)
        if service is None or not parsed.quantity:
            return None

        quantity = parsed.quantity
        validation_error = validate_quantity(quantity, service)
        if validation_error is not None:
            log.info(
                "quantity_out_of_range",
                service_id=service.id,
                quantity=quantity,
                kind=validation_error.kind,
                limit=validation_error.limit,
            )

        return OrderPreview(
            match_percentage=parsed.match_percentage,
            platform=self._parser.get_platform_display_name(parsed.platform or ""),
            service_type=self._parser.get_service_type_display_name(parsed.service_type or ""),
            quality=f"{service.quality} Quality",
            speed=f"{service.speed} Speed",
            quantity=quantity,
            price=format_price(service.price_per_k * quantity / _THOUSAND),
            target=parsed.target,
            validation_error=validation_error,
        )

    def preview(self, text: str) -> OrderPreview | None:
        """Parse ``text`` and build its preview in one step."""
        return self.build(self._parser.parse(text))
