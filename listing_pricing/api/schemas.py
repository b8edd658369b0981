"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Any, Optional

from babel import Locale, UnknownLocaleError
from pydantic import BaseModel, Field, field_validator

from listing_pricing.domain.entities import GeoPoint, Money


# ── Shared ────────────────────────────────────────────────────────────


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    def to_domain(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lng)


class MoneySchema(BaseModel):
    amount: int = Field(..., ge=0, description="Amount in minor currency units.")
    currency: str = Field(..., pattern=r"^[A-Za-z]{3}$", examples=["USD"])

    model_config = {"from_attributes": True}

    def to_domain(self) -> Money:
        return Money(self.amount, self.currency)


# ── Requests ──────────────────────────────────────────────────────────


class DistanceRequest(BaseModel):
    origin: GeoPointSchema
    destination: Optional[GeoPointSchema] = None


class QuoteRequest(BaseModel):
    base_price: MoneySchema
    delivery_rate_per_km: float = Field(0, description="Delivery rate per km; negative is rejected.")
    origin: GeoPointSchema
    destination: Optional[GeoPointSchema] = None


class ListingPayload(BaseModel):
    id: str
    title: str = ""
    price: Optional[MoneySchema] = None
    public_data: dict[str, Any] = Field(
        default_factory=dict,
        description="Listing public data; ``deliveryPricePerKm`` sets the delivery rate.",
    )
    geolocation: Optional[GeoPointSchema] = None


class CardPricingRequest(BaseModel):
    listing: ListingPayload
    construction_site_location: Optional[GeoPointSchema] = None
    locale: Optional[str] = Field(None, examples=["en_US"])

    @field_validator("locale")
    @classmethod
    def parse_locale(cls, value: Optional[str]) -> Optional[str]:
        """Accept ``en_US`` and ``en-US``; normalise to Babel's ``en_US``."""
        if value is None:
            return None
        try:
            return str(Locale.parse(value, sep="-" if "-" in value else "_"))
        except (ValueError, UnknownLocaleError) as exc:
            raise ValueError(f"Unknown locale {value!r}") from exc


# ── Responses ─────────────────────────────────────────────────────────


class DistanceResponse(BaseModel):
    distance_km: float


class PricingResultResponse(BaseModel):
    distance_km: float
    delivery_cost: MoneySchema
    total_cost: MoneySchema
    has_destination: bool


class PriceDisplayResponse(BaseModel):
    formatted_price: str
    price_title: str
    unsupported_currency: bool = False


class CardPricingResponse(BaseModel):
    price: Optional[PriceDisplayResponse] = None
    result: Optional[PricingResultResponse] = None
    delivery_cost: Optional[str] = None
    total_cost: Optional[str] = None
    distance: Optional[str] = None
    delivery_rate: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
