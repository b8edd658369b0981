"""
Shared test fixtures.

The API is exercised in-process through ``httpx.ASGITransport``; nothing
listens on a socket.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from listing_pricing.api.middleware import limiter
from listing_pricing.domain.entities import GeoPoint, Money

NEW_YORK = GeoPoint(40.7128, -74.0060)
EAST_VILLAGE = GeoPoint(40.7306, -73.9352)


@pytest.fixture
def base_price() -> Money:
    return Money(10_000, "USD")


@pytest_asyncio.fixture
async def client():
    """AsyncClient backed by a fresh app; rate-limit counters start empty."""
    from listing_pricing.api.app import create_app

    limiter.reset()
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
