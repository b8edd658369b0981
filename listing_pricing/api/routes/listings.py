"""
Listing endpoints
=================

POST /api/v1/listings/card-pricing -- pricing block of a listing card
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from listing_pricing.api.dependencies import get_engine
from listing_pricing.api.middleware import limiter
from listing_pricing.api.schemas import CardPricingRequest, CardPricingResponse, ErrorResponse
from listing_pricing.config import settings
from listing_pricing.domain.listing import Listing, listing_card_pricing
from listing_pricing.domain.pricing import PricingEngine

router = APIRouter(prefix="/listings", tags=["listings"])


@router.post(
    "/card-pricing",
    response_model=CardPricingResponse,
    summary="Price, delivery cost and total cost for a listing card",
    description=(
        "Delivery is priced on the distance from the listing's geolocation "
        "to the construction site, there and back. Without a construction "
        "site the delivery cost is zero."
    ),
    responses={422: {"model": ErrorResponse, "description": "Invalid rate or coordinate."}},
)
@limiter.limit(settings.rate_limit)
async def card_pricing(
    request: Request,
    body: CardPricingRequest,
    engine: PricingEngine = Depends(get_engine),
):
    payload = body.listing
    listing = Listing(
        id=payload.id,
        title=payload.title,
        price=payload.price.to_domain() if payload.price else None,
        public_data=payload.public_data,
        geolocation=payload.geolocation.to_domain() if payload.geolocation else None,
    )
    site = body.construction_site_location
    return listing_card_pricing(
        listing,
        site.to_domain() if site else None,
        display_currency=settings.display_currency,
        locale=body.locale or settings.default_locale,
        engine=engine,
    )
