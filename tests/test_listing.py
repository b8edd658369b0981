"""Unit tests for the listing card pricing view model."""

import pytest

from listing_pricing.domain.entities import GeoPoint, InvalidRate, Money
from listing_pricing.domain.listing import (
    DEFAULT_LOCATION,
    Listing,
    listing_card_pricing,
    pricing_input_from_listing,
)
from tests.conftest import EAST_VILLAGE, NEW_YORK


def _listing(**overrides):
    fields = dict(
        id="a1b2",
        title="Pallet of bricks",
        price=Money(10_000, "USD"),
        public_data={"deliveryPricePerKm": 50},
        geolocation=NEW_YORK,
    )
    fields.update(overrides)
    return Listing(**fields)


class TestPricingInput:
    def test_maps_listing_fields(self):
        pricing_input = pricing_input_from_listing(_listing(), EAST_VILLAGE)
        assert pricing_input.base_price == Money(10_000, "USD")
        assert pricing_input.delivery_rate_per_km == 50
        assert pricing_input.origin_location == NEW_YORK
        assert pricing_input.destination == EAST_VILLAGE

    def test_missing_rate_defaults_to_zero(self):
        pricing_input = pricing_input_from_listing(_listing(public_data={}))
        assert pricing_input.delivery_rate_per_km == 0

    def test_missing_geolocation_defaults_to_origin(self):
        pricing_input = pricing_input_from_listing(_listing(geolocation=None))
        assert pricing_input.origin_location == DEFAULT_LOCATION == GeoPoint(0.0, 0.0)

    def test_missing_price_rejected(self):
        with pytest.raises(ValueError):
            pricing_input_from_listing(_listing(price=None))


class TestListingCardPricing:
    def test_card_with_construction_site(self):
        card = listing_card_pricing(
            _listing(), EAST_VILLAGE, display_currency="USD", locale="en_US"
        )
        assert card.price.formatted_price == "$100.00"
        assert card.delivery_cost == "$6.29"
        assert card.total_cost == "$106.29"
        assert card.distance == "6.29 km"
        assert card.delivery_rate == "$0.50/km"
        assert card.result.has_destination

    def test_card_without_construction_site(self):
        card = listing_card_pricing(_listing(), None, display_currency="USD", locale="en_US")
        assert card.delivery_cost == "$0.00"
        assert card.total_cost == "$100.00"
        assert card.distance == "0.00 km"

    def test_no_rate_hides_rate_line(self):
        card = listing_card_pricing(
            _listing(public_data={}), EAST_VILLAGE, display_currency="USD", locale="en_US"
        )
        assert card.delivery_rate is None
        assert card.total_cost == "$100.00"

    def test_other_currency_uses_fallback_price(self):
        card = listing_card_pricing(
            _listing(price=Money(10_000, "EUR")),
            EAST_VILLAGE,
            display_currency="USD",
            locale="en_US",
        )
        assert card.price.unsupported_currency
        assert card.price.formatted_price == "(EUR)"
        assert card.total_cost == "€106.29"

    def test_no_price(self):
        card = listing_card_pricing(
            _listing(price=None), EAST_VILLAGE, display_currency="USD", locale="en_US"
        )
        assert card.price is None
        assert card.result is None

    def test_negative_rate_propagates(self):
        with pytest.raises(InvalidRate):
            listing_card_pricing(
                _listing(public_data={"deliveryPricePerKm": -5}),
                EAST_VILLAGE,
                display_currency="USD",
                locale="en_US",
            )
