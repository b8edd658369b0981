"""
FastAPI application factory.

* Registers routes for pricing, listings and admin.
* Maps pricing input errors (bad coordinate, negative rate) to 422.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from listing_pricing.api.middleware import limiter
from listing_pricing.api.routes import admin, listings, pricing
from listing_pricing.config import settings
from listing_pricing.domain.entities import PricingError

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


async def _pricing_error_handler(request: Request, exc: PricingError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Listing Pricing API",
        description=(
            "Prices marketplace listings for delivery to a construction site: "
            "great-circle distance, round-trip delivery cost and total cost, "
            "formatted for the storefront's locale."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(PricingError, _pricing_error_handler)

    # Routers
    app.include_router(pricing.router, prefix="/api/v1")
    app.include_router(listings.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
