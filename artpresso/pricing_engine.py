"""
Pricing Engine: artwork price formula.

Maps an ArtworkDetails record plus a currency context into a PriceQuote.
Pure math, no I/O, no state: the same inputs always give the same quote.

Pipeline:
    area (sq in) × base rate (career stage)
        × market multiplier (sales × education)
        × medium multiplier
        × depth multiplier (3D pieces only)
    + materials × 2 + framing × 2
    → confidence band by career stage
    → currency conversion
    → every monetary figure rounded to the nearest 5
"""

import math
from typing import Optional

from .models import CareerStage, Currency, Education, Medium, SalesRange, Unit
from .schemas import ArtworkDetails, PriceBreakdown, PriceQuote


# --- Rate tables (USD) ---

BASE_RATES = {
    CareerStage.ASPIRING: 1.25,
    CareerStage.EMERGING: 3.00,
    CareerStage.ESTABLISHED: 7.00,
    CareerStage.ECHELON: 15.00,
}

# Symmetric fractional band around the total. Tighter for established artists.
PRICE_BANDS = {
    CareerStage.ASPIRING: 0.25,
    CareerStage.EMERGING: 0.20,
    CareerStage.ESTABLISHED: 0.15,
    CareerStage.ECHELON: 0.10,
}

SALES_MULTIPLIERS = {
    SalesRange.UNDER_1K: 0.90,
    SalesRange.FROM_1K_TO_5K: 1.00,
    SalesRange.FROM_5K_TO_20K: 1.15,
    SalesRange.OVER_20K: 1.30,
}

EDUCATION_MULTIPLIERS = {
    Education.SELF_TAUGHT: 0.95,
    Education.EMERGING_TRAINING: 1.00,
    Education.COLLEGE_GRADUATE: 1.05,
    Education.APPRENTICESHIP: 1.08,
    Education.INTERDISCIPLINARY: 1.10,
    Education.BFA: 1.10,
    Education.MFA: 1.18,
    Education.ACADEMIC: 1.15,
    Education.PROFESSIONAL_PRACTICE: 1.20,
}

MEDIUM_MULTIPLIERS = {
    Medium.OIL: 1.30,
    Medium.ACRYLIC: 1.15,
    Medium.WATERCOLOR: 1.00,
    Medium.DRAWING: 0.85,
    Medium.PHOTOGRAPHY: 0.80,
    Medium.DIGITAL: 0.90,
    Medium.MIXED_MEDIA: 1.20,
    Medium.SCULPTURE: 1.50,
}

CM_PER_INCH = 2.54
MARKUP_FACTOR = 2.0      # materials and framing are billed at 2x cost
DEPTH_WEIGHT = 0.5       # uplift per unit of depth / larger face dimension
ROUNDING_UNIT = 5
DEFAULT_USD_CAD_RATE = 1.36

CURRENCY_SYMBOLS = {
    Currency.USD: "$",
    Currency.CAD: "CA$",
}


# --- Helpers ---

def _convert_to_inches(value: float, unit: Unit) -> float:
    return value / CM_PER_INCH if unit == Unit.CM else value


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero (not banker's rounding)."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _round_places(value: float, places: int) -> float:
    factor = 10 ** places
    return _round_half_away(value * factor) / factor


def round_to_nearest(value: float, nearest: int = ROUNDING_UNIT) -> float:
    """Snap a monetary value to the nearest multiple of `nearest`."""
    return _round_half_away(value / nearest) * nearest


# --- Main entry point ---

def compute_quote(
    artwork: ArtworkDetails,
    currency: Currency = Currency.USD,
    conversion_rate: float = DEFAULT_USD_CAD_RATE,
) -> PriceQuote:
    """
    Price a single artwork.

    Args:
        artwork: validated ArtworkDetails (positive width/height)
        currency: display currency; all table values are USD
        conversion_rate: 1 USD = conversion_rate units of `currency`.
            Ignored for USD.

    Returns:
        PriceQuote with every monetary field rounded to the nearest 5
        in the target currency, plus the unrounded factor breakdown.
    """
    currency = Currency(currency)
    dims = artwork.dimensions

    width_in = _convert_to_inches(dims.width, dims.unit)
    height_in = _convert_to_inches(dims.height, dims.unit)
    depth_in = _convert_to_inches(dims.depth, dims.unit) if dims.depth else 0.0

    area_sq_in = width_in * height_in

    base_rate = BASE_RATES[artwork.career_stage]

    sales_multiplier = SALES_MULTIPLIERS[artwork.sales_range]
    education_multiplier = EDUCATION_MULTIPLIERS[artwork.education]
    market_multiplier = sales_multiplier * education_multiplier

    medium_multiplier = MEDIUM_MULTIPLIERS[artwork.medium]

    base_price = area_sq_in * base_rate * market_multiplier * medium_multiplier

    # 3D adjustment. No cap: a deep piece on a small face can exceed 2x
    depth_multiplier: Optional[float] = None
    if depth_in > 0:
        depth_multiplier = 1 + (depth_in / max(height_in, width_in)) * DEPTH_WEIGHT
        base_price = base_price * depth_multiplier

    materials_line = artwork.material_cost * MARKUP_FACTOR
    framing_line = artwork.framing_cost * MARKUP_FACTOR

    total_usd = base_price + materials_line + framing_line

    band = PRICE_BANDS[artwork.career_stage]
    low_usd = total_usd * (1 - band)
    high_usd = total_usd * (1 + band)

    # Convert first, round last
    rate = conversion_rate if currency == Currency.CAD else 1.0

    breakdown = PriceBreakdown(
        area_sq_in=_round_places(area_sq_in, 2),
        base_rate_per_sq_in=base_rate,
        market_multiplier=_round_places(market_multiplier, 3),
        sales_multiplier=sales_multiplier,
        education_multiplier=education_multiplier,
        medium_multiplier=medium_multiplier,
        depth_multiplier=_round_places(depth_multiplier, 3) if depth_multiplier else None,
    )

    return PriceQuote(
        base_price=round_to_nearest(base_price * rate),
        materials_cost=round_to_nearest(materials_line * rate),
        framing_cost=round_to_nearest(framing_line * rate),
        total_price=round_to_nearest(total_usd * rate),
        low_price=round_to_nearest(low_usd * rate),
        high_price=round_to_nearest(high_usd * rate),
        currency=currency,
        breakdown=breakdown,
    )


# --- Format helpers ---

def format_currency(amount: float, currency: Currency) -> str:
    """Format as en-US currency with no decimals: $1,235 / CA$1,235."""
    symbol = CURRENCY_SYMBOLS[Currency(currency)]
    whole = int(_round_half_away(amount))
    sign = "-" if whole < 0 else ""
    return f"{sign}{symbol}{abs(whole):,}"


def format_price_range(low: float, high: float, currency: Currency) -> str:
    return f"{format_currency(low, currency)} – {format_currency(high, currency)}"
