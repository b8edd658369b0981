"""
Admin / observability endpoints
===============================

GET /api/v1/admin/health -- simple health check
"""

from fastapi import APIRouter, Request

from listing_pricing.api.middleware import limiter
from listing_pricing.api.schemas import HealthResponse
from listing_pricing.config import settings

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
@limiter.limit(settings.rate_limit)
async def health(request: Request):
    return HealthResponse()
