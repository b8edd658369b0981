"""
Pricing endpoints
=================

POST /api/v1/pricing/distance -- great-circle distance between two points
POST /api/v1/pricing/quote    -- delivery and total cost for a base price
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from listing_pricing.api.dependencies import get_engine
from listing_pricing.api.middleware import limiter
from listing_pricing.api.schemas import (
    DistanceRequest,
    DistanceResponse,
    ErrorResponse,
    PricingResultResponse,
    QuoteRequest,
)
from listing_pricing.config import settings
from listing_pricing.domain.distance import distance_km
from listing_pricing.domain.entities import ListingPricingInput
from listing_pricing.domain.pricing import PricingEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.post(
    "/distance",
    response_model=DistanceResponse,
    summary="Great-circle distance in km",
)
@limiter.limit(settings.rate_limit)
async def get_distance(request: Request, body: DistanceRequest):
    destination = body.destination.to_domain() if body.destination else None
    return DistanceResponse(distance_km=distance_km(body.origin.to_domain(), destination))


@router.post(
    "/quote",
    response_model=PricingResultResponse,
    summary="Quote delivery and total cost",
    responses={422: {"model": ErrorResponse, "description": "Invalid rate or coordinate."}},
)
@limiter.limit(settings.rate_limit)
async def quote(
    request: Request,
    body: QuoteRequest,
    engine: PricingEngine = Depends(get_engine),
):
    result = engine.compute(
        ListingPricingInput(
            base_price=body.base_price.to_domain(),
            delivery_rate_per_km=body.delivery_rate_per_km,
            origin_location=body.origin.to_domain(),
            destination=body.destination.to_domain() if body.destination else None,
        )
    )
    logger.debug(
        "Quote: %.3f km, delivery %d %s",
        result.distance_km,
        result.delivery_cost.amount,
        result.delivery_cost.currency,
    )
    return result
