"""Centralised application settings loaded from environment / .env file."""

from typing import Literal

from pydantic_settings import BaseSettings

from listing_pricing.domain.pricing import ROUND_TRIP_FACTOR


class Settings(BaseSettings):
    # Storefront
    display_currency: str = "USD"  # listing prices in other currencies get a fallback string
    default_locale: str = "en_US"

    # Delivery pricing
    delivery_trip_factor: float = ROUND_TRIP_FACTOR
    delivery_rate_unit: Literal["minor", "major"] = "minor"  # unit of deliveryPricePerKm

    # API
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
