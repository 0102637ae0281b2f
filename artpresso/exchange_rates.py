"""
USD -> CAD exchange rate lookup.

The cache is an explicit RateQuote value owned by the caller: pass the last
good quote to resolve() and keep what it returns. A quote younger than the
freshness window is reused without touching the network.

Graceful fallback: if the rate source is unreachable or returns garbage,
resolve() logs a warning and returns the fixed default rate flagged as a
fallback. Pricing NEVER fails because the rate source is down.
"""

import http.client
import json
import logging
import time
import urllib.error
import urllib.request
from datetime import datetime, timezone
from typing import Optional

from .config import settings
from .schemas import FALLBACK_RATE_DATE, RateQuote

logger = logging.getLogger(__name__)


class ExchangeRateClient:
    """Fetches the USD -> CAD rate from an exchangerate-api style endpoint."""

    def __init__(
        self,
        url: str = None,
        timeout: float = None,
        default_rate: float = None,
        max_age: float = None,
    ):
        self.url = url or settings.EXCHANGE_RATE_URL
        self.timeout = timeout if timeout is not None else settings.EXCHANGE_RATE_TIMEOUT
        self.default_rate = default_rate if default_rate is not None else settings.DEFAULT_USD_CAD_RATE
        self.max_age = max_age if max_age is not None else settings.EXCHANGE_RATE_MAX_AGE_SECONDS

    def resolve(self, cached: Optional[RateQuote] = None, now: Optional[float] = None) -> RateQuote:
        """
        Return a usable rate. Never raises.

        Reuses `cached` while it is fresh (fallback quotes are never reused),
        otherwise fetches; on any failure returns the fallback rate.
        """
        now = time.time() if now is None else now
        if cached is not None and not cached.is_fallback and cached.is_fresh(now, self.max_age):
            return cached

        try:
            return self.fetch(now)
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Failed to fetch exchange rate, using default %.2f: %s", self.default_rate, e)
            return self.fallback(now)

    def fetch(self, now: Optional[float] = None) -> RateQuote:
        """Call the rate source. Raises on failure (caller handles fallback)."""
        now = time.time() if now is None else now
        req = urllib.request.Request(
            self.url,
            headers={"Accept": "application/json"},
            method="GET",
        )
        with urllib.request.urlopen(req, timeout=self.timeout) as response:
            data = json.loads(response.read())

        rate = float(data["rates"]["CAD"])
        if rate <= 0:
            raise ValueError(f"Non-positive CAD rate from source: {rate}")

        date = datetime.fromtimestamp(now, tz=timezone.utc).date().isoformat()
        logger.info("Fetched exchange rate 1 USD = %s CAD", rate)
        return RateQuote(rate=rate, date=date, fetched_at=now)

    def fallback(self, now: Optional[float] = None) -> RateQuote:
        now = time.time() if now is None else now
        return RateQuote(rate=self.default_rate, date=FALLBACK_RATE_DATE, fetched_at=now)
