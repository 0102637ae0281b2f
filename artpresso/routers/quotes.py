"""
Quote API: price an artwork, download the PDF, read the live exchange rate.

GET  /api/options       enumeration values + display labels for the form
GET  /api/exchange-rate current USD -> CAD rate (live, cached or fallback)
POST /api/quotes        validate form, price it, return quote + display strings
POST /api/quotes/pdf    same as above, rendered as a PDF attachment
"""

import logging
import threading
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from ..exchange_rates import ExchangeRateClient
from ..models import (
    CAREER_STAGE_LABELS,
    EDUCATION_LABELS,
    MEDIUM_LABELS,
    SALES_RANGE_LABELS,
    UNIT_LABELS,
    Currency,
)
from ..pdf_generator import generate_quote_pdf, quote_filename
from ..pricing_engine import compute_quote, format_currency, format_price_range
from ..schemas import QuoteRequest, QuoteResponse, RateQuote
from ..validation import ArtworkValidationError, parse_artwork_form

logger = logging.getLogger(__name__)

router = APIRouter(tags=["quotes"])

_rate_lock = threading.Lock()


def get_rate_client() -> ExchangeRateClient:
    """Dependency, overridden in tests to avoid the network."""
    return ExchangeRateClient()


def _current_rate(request: Request, client: ExchangeRateClient) -> RateQuote:
    """
    Resolve the rate against the last good quote kept on app.state.
    Fallback quotes are returned but not stored, so the next call retries.
    The lock guards app.state only; the fetch itself runs unlocked.
    """
    with _rate_lock:
        cached: Optional[RateQuote] = getattr(request.app.state, "exchange_rate", None)

    rate = client.resolve(cached)

    if rate is not cached and not rate.is_fallback:
        with _rate_lock:
            current = getattr(request.app.state, "exchange_rate", None)
            if current is None or current.fetched_at <= rate.fetched_at:
                request.app.state.exchange_rate = rate
    return rate


def _price(request: Request, body: QuoteRequest, client: ExchangeRateClient):
    try:
        artwork = parse_artwork_form(body.artwork)
    except ArtworkValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    rate: Optional[RateQuote] = None
    conversion_rate = 1.0
    if body.currency == Currency.CAD:
        rate = _current_rate(request, client)
        conversion_rate = rate.rate

    quote = compute_quote(artwork, body.currency, conversion_rate)
    logger.info(
        "Priced '%s' (%s, %s): %s %s",
        artwork.title, artwork.career_stage.value, artwork.medium.value,
        quote.total_price, quote.currency.value,
    )
    return artwork, quote, rate


def _options(labels: dict) -> list:
    return [{"value": key.value, "label": label} for key, label in labels.items()]


@router.get("/options")
def list_options():
    """Form choices, in display order."""
    return {
        "currency": [c.value for c in Currency],
        "unit": _options(UNIT_LABELS),
        "career_stage": _options(CAREER_STAGE_LABELS),
        "education": _options(EDUCATION_LABELS),
        "sales_range": _options(SALES_RANGE_LABELS),
        "medium": _options(MEDIUM_LABELS),
    }


@router.get("/exchange-rate", response_model=RateQuote)
def exchange_rate(
    request: Request,
    client: ExchangeRateClient = Depends(get_rate_client),
):
    return _current_rate(request, client)


@router.post("/quotes", response_model=QuoteResponse)
def create_quote(
    body: QuoteRequest,
    request: Request,
    client: ExchangeRateClient = Depends(get_rate_client),
):
    """
    Price an artwork.

    Body: {"artwork": {form fields}, "currency": "USD" | "CAD"}
    Returns: artwork, quote, exchange_rate (CAD only), display strings
    """
    artwork, quote, rate = _price(request, body, client)
    return {
        "artwork": artwork,
        "quote": quote,
        "exchange_rate": rate,
        "display": {
            "total": format_currency(quote.total_price, quote.currency),
            "range": format_price_range(quote.low_price, quote.high_price, quote.currency),
        },
    }


@router.post("/quotes/pdf")
def download_quote_pdf(
    body: QuoteRequest,
    request: Request,
    client: ExchangeRateClient = Depends(get_rate_client),
):
    """
    Price an artwork and return the quote as a PDF download.

    Returns: application/pdf
    """
    artwork, quote, rate = _price(request, body, client)
    pdf_bytes = generate_quote_pdf(artwork, quote, rate)

    filename = quote_filename(artwork.title)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )
