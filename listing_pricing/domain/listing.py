"""
Listing card pricing (view model).

Turns the listing data a storefront card receives (price, public data,
geolocation) and the buyer's construction-site location into the strings a
card shows: price, delivery cost with distance, total cost and the per-km
delivery rate.  Pricing itself is delegated to ``PricingEngine``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .entities import GeoPoint, ListingPricingInput, Money, PricingResult
from .money import (
    PriceDisplay,
    format_distance,
    format_money,
    format_rate_per_km,
    price_display,
)
from .pricing import PricingEngine

logger = logging.getLogger(__name__)

# Listings without a geolocation are priced from (0, 0).
DEFAULT_LOCATION = GeoPoint(0.0, 0.0)


@dataclass(frozen=True)
class Listing:
    id: str
    title: str = ""
    price: Optional[Money] = None
    public_data: Mapping[str, Any] = field(default_factory=dict)
    geolocation: Optional[GeoPoint] = None

    @property
    def delivery_price_per_km(self) -> float:
        return self.public_data.get("deliveryPricePerKm") or 0


@dataclass(frozen=True)
class ListingCardPricing:
    price: Optional[PriceDisplay]
    result: Optional[PricingResult] = None
    delivery_cost: Optional[str] = None
    total_cost: Optional[str] = None
    distance: Optional[str] = None
    delivery_rate: Optional[str] = None


def pricing_input_from_listing(
    listing: Listing, construction_site_location: Optional[GeoPoint] = None
) -> ListingPricingInput:
    if listing.price is None:
        raise ValueError(f"Listing {listing.id} has no price")
    return ListingPricingInput(
        base_price=listing.price,
        delivery_rate_per_km=listing.delivery_price_per_km,
        origin_location=listing.geolocation or DEFAULT_LOCATION,
        destination=construction_site_location,
    )


def listing_card_pricing(
    listing: Listing,
    construction_site_location: Optional[GeoPoint] = None,
    *,
    display_currency: str,
    locale: str,
    engine: Optional[PricingEngine] = None,
) -> ListingCardPricing:
    """Build the pricing block of a listing card.

    The headline price honours *display_currency* (falling back to a
    descriptive string for other currencies); delivery and total cost are
    always shown in the listing's own currency.  A listing without a price
    gets no pricing block beyond ``price=None``.
    """
    if listing.price is None:
        return ListingCardPricing(price=None)

    engine = engine or PricingEngine()
    display = price_display(listing.price, display_currency, locale)
    result = engine.compute(pricing_input_from_listing(listing, construction_site_location))
    logger.debug(
        "Listing %s: %.2f km, delivery %d, total %d %s",
        listing.id,
        result.distance_km,
        result.delivery_cost.amount,
        result.total_cost.amount,
        result.total_cost.currency,
    )

    rate = listing.delivery_price_per_km
    return ListingCardPricing(
        price=display,
        result=result,
        delivery_cost=format_money(result.delivery_cost, locale),
        total_cost=format_money(result.total_cost, locale),
        distance=format_distance(result.distance_km),
        delivery_rate=(
            format_rate_per_km(rate, listing.price.currency, locale, engine.rate_unit)
            if rate
            else None
        ),
    )
