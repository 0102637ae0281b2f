import time
from typing import Optional

from pydantic import BaseModel, computed_field

from .models import CareerStage, Currency, Education, Medium, SalesRange, Unit


class ArtworkDimensions(BaseModel):
    width: float
    height: float
    depth: Optional[float] = None  # None (or <= 0) means a flat piece
    unit: Unit = Unit.INCHES

    class Config:
        frozen = True


class ArtworkDetails(BaseModel):
    title: str
    artist_name: str
    dimensions: ArtworkDimensions
    career_stage: CareerStage
    education: Education
    sales_range: SalesRange
    medium: Medium
    material_cost: float = 0.0
    framing_cost: float = 0.0

    class Config:
        frozen = True


class PriceBreakdown(BaseModel):
    area_sq_in: float
    base_rate_per_sq_in: float
    market_multiplier: float
    sales_multiplier: float
    education_multiplier: float
    medium_multiplier: float
    depth_multiplier: Optional[float] = None


class PriceQuote(BaseModel):
    base_price: float
    materials_cost: float
    framing_cost: float
    total_price: float
    low_price: float
    high_price: float
    currency: Currency
    breakdown: PriceBreakdown


# --- API request/response schemas ---

class QuoteRequest(BaseModel):
    artwork: dict  # raw form fields, validated by parse_artwork_form
    currency: Currency = Currency.USD


FALLBACK_RATE_DATE = "fallback"


class RateQuote(BaseModel):
    """A USD -> CAD rate and when it was obtained."""
    rate: float
    date: str            # ISO date of the fetch, or "fallback"
    fetched_at: float    # epoch seconds

    class Config:
        frozen = True

    @computed_field
    @property
    def is_fallback(self) -> bool:
        return self.date == FALLBACK_RATE_DATE

    @computed_field
    @property
    def label(self) -> str:
        text = f"1 USD = {self.rate:.2f} CAD"
        if self.is_fallback:
            text += ", fallback rate"
        return f"({text})"

    def is_fresh(self, now: Optional[float] = None, max_age: float = 3600) -> bool:
        now = time.time() if now is None else now
        return now - self.fetched_at < max_age


class QuoteDisplay(BaseModel):
    total: str
    range: str


class QuoteResponse(BaseModel):
    artwork: ArtworkDetails
    quote: PriceQuote
    exchange_rate: Optional[RateQuote] = None
    display: QuoteDisplay
