"""
Delivery Pricing Engine  (Strategy Pattern)
===========================================

Formula
-------
Delivery = Rate_Per_KM x Distance x Trip_Factor x Rate_Scale
Total    = Base_Price + Delivery

* **Trip_Factor** defaults to ``ROUND_TRIP_FACTOR`` (2): the courier drives
  to the destination and back.
* **Rate_Scale** is 1 when the rate is in minor units per km (how listings
  store it) and the currency's minor-unit scale when it is in major units.
* Amounts are in minor units; the delivery cost is rounded half-up to a
  whole minor unit.

Complexity: O(1) per price calculation.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Real

from .distance import distance_km
from .entities import InvalidPrice, InvalidRate, ListingPricingInput, Money, PricingResult
from .enums import RateUnit
from .money import minor_unit_scale

ROUND_TRIP_FACTOR = 2.0


# ── Strategy hierarchy ────────────────────────────────────────────────


class DeliveryPricing(ABC):
    @abstractmethod
    def calculate(self, distance_km: float, rate_per_km: float, scale: int) -> int:
        """Delivery cost in minor units."""


class DistanceDeliveryPricing(DeliveryPricing):
    """Delivery strictly proportional to distance travelled."""

    def __init__(self, trip_factor: float = ROUND_TRIP_FACTOR):
        if not math.isfinite(trip_factor) or trip_factor < 0:
            raise ValueError(f"trip_factor must be a non-negative number, got {trip_factor!r}")
        self.trip_factor = trip_factor

    def calculate(self, distance_km: float, rate_per_km: float, scale: int) -> int:
        product = float(rate_per_km * distance_km * self.trip_factor)
        if not math.isfinite(product):
            raise InvalidRate(f"Delivery cost overflows for rate {rate_per_km!r}")
        # any finite float times a minor-unit scale fits in 400 digits
        with localcontext() as ctx:
            ctx.prec = 400
            raw = Decimal(repr(product)) * scale
            return int(raw.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


# ── Engine facade ─────────────────────────────────────────────────────


def _check_rate(rate: float) -> None:
    if isinstance(rate, bool) or not isinstance(rate, Real) or not math.isfinite(rate):
        raise InvalidRate(f"Delivery rate must be a finite number, got {rate!r}")
    if rate < 0:
        raise InvalidRate(f"Delivery rate must not be negative, got {rate!r}")


def _check_price(price: Money) -> None:
    if price.amount < 0:
        raise InvalidPrice(f"Base price must not be negative, got {price.amount}")


class PricingEngine:
    """High-level API used by the listing view model and the API layer."""

    def __init__(
        self,
        trip_factor: float = ROUND_TRIP_FACTOR,
        rate_unit: RateUnit = RateUnit.MINOR,
    ):
        self.strategy = DistanceDeliveryPricing(trip_factor)
        self.rate_unit = RateUnit(rate_unit)

    def rate_scale(self, currency: str) -> int:
        if self.rate_unit == RateUnit.MAJOR:
            return minor_unit_scale(currency)
        return 1

    def compute(self, pricing_input: ListingPricingInput) -> PricingResult:
        _check_rate(pricing_input.delivery_rate_per_km)
        _check_price(pricing_input.base_price)
        base = pricing_input.base_price
        distance = distance_km(pricing_input.origin_location, pricing_input.destination)

        delivery_amount = self.strategy.calculate(
            distance, pricing_input.delivery_rate_per_km, self.rate_scale(base.currency)
        )
        return PricingResult(
            distance_km=distance,
            delivery_cost=Money(delivery_amount, base.currency),
            total_cost=Money(base.amount + delivery_amount, base.currency),
            has_destination=pricing_input.destination is not None,
        )


_default_engine = PricingEngine()


def compute_pricing(pricing_input: ListingPricingInput) -> PricingResult:
    """Price *pricing_input* with the round-trip, minor-units-per-km policy."""
    return _default_engine.compute(pricing_input)
