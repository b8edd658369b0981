"""
Pricing value objects and domain errors.

Every type here is an immutable value object: two instances with the same
fields are interchangeable, and a ``PricingResult`` is derived purely from a
``ListingPricingInput``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class PricingError(Exception):
    """Base class for input-validation failures raised by the pricing core."""


class InvalidCoordinate(PricingError, ValueError):
    """Raised when a latitude/longitude is not a finite number."""


class InvalidRate(PricingError, ValueError):
    """Raised when a delivery rate is negative or not a finite number."""


class InvalidPrice(PricingError, ValueError):
    """Raised when a listing's base price is negative."""


class UnsupportedCurrency(Exception):
    """Signal that a price is in a currency other than the display currency.

    Never raised by formatting helpers; they record the condition on
    ``PriceDisplay.unsupported_currency`` and return fallback strings.
    """

    def __init__(self, currency: str, display_currency: str):
        super().__init__(
            f"Price currency {currency} differs from display currency {display_currency}"
        )
        self.currency = currency
        self.display_currency = display_currency


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float


@dataclass(frozen=True)
class Money:
    """An amount in minor currency units (cents for USD)."""

    amount: int
    currency: str

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"Amount must be an integer number of minor units, got {self.amount!r}")
        if not (isinstance(self.currency, str) and len(self.currency) == 3 and self.currency.isalpha()):
            raise ValueError(f"Currency must be a 3-letter ISO 4217 code, got {self.currency!r}")
        object.__setattr__(self, "currency", self.currency.upper())


@dataclass(frozen=True)
class ListingPricingInput:
    base_price: Money
    delivery_rate_per_km: float
    origin_location: GeoPoint
    destination: Optional[GeoPoint] = None


@dataclass(frozen=True)
class PricingResult:
    distance_km: float
    delivery_cost: Money
    total_cost: Money
    has_destination: bool
