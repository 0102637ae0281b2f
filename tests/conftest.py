"""
Shared test fixtures: test client with a stubbed exchange rate source.
"""

import pytest
from fastapi.testclient import TestClient

from artpresso.exchange_rates import ExchangeRateClient
from artpresso.main import app
from artpresso.routers.quotes import get_rate_client
from artpresso.schemas import RateQuote


TEST_CAD_RATE = 1.36


class StubRateClient(ExchangeRateClient):
    """Never touches the network; counts fetches."""

    def __init__(self, rate=TEST_CAD_RATE, fail=False):
        super().__init__(url="http://rates.invalid/latest/USD", timeout=1, default_rate=1.36, max_age=3600)
        self.rate = rate
        self.fail = fail
        self.fetch_count = 0

    def fetch(self, now=None):
        self.fetch_count += 1
        if self.fail:
            raise OSError("rate source unreachable")
        return RateQuote(rate=self.rate, date="2026-10-19", fetched_at=now or 0.0)


@pytest.fixture
def rate_client():
    return StubRateClient()


@pytest.fixture
def client(rate_client):
    """FastAPI test client with the rate source stubbed out."""
    app.dependency_overrides[get_rate_client] = lambda: rate_client
    app.state.exchange_rate = None
    yield TestClient(app)
    app.dependency_overrides.clear()
    app.state.exchange_rate = None
