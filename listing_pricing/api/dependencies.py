"""FastAPI dependency injection helpers."""

from listing_pricing.config import settings
from listing_pricing.domain.enums import RateUnit
from listing_pricing.domain.pricing import PricingEngine


def get_engine() -> PricingEngine:
    """Pricing engine configured from settings."""
    return PricingEngine(
        trip_factor=settings.delivery_trip_factor,
        rate_unit=RateUnit(settings.delivery_rate_unit),
    )
