"""
Pricing engine tests.

Tests:
1-3.   Worked examples (flat watercolor, 3D sculpture, CAD conversion)
4-8.   Properties (determinism, unit equivalence, career monotonicity,
       band ordering, rounding law)
9-12.  Line items, depth, currency handling
13-15. Rate tables and format helpers

Pure math, no network, no app.
"""

import math

import pytest

from artpresso.models import CareerStage, Currency, Education, Medium, SalesRange, Unit
from artpresso.pricing_engine import (
    BASE_RATES,
    EDUCATION_MULTIPLIERS,
    MEDIUM_MULTIPLIERS,
    PRICE_BANDS,
    SALES_MULTIPLIERS,
    compute_quote,
    format_currency,
    format_price_range,
    round_to_nearest,
)
from artpresso.schemas import ArtworkDetails, ArtworkDimensions


# --- Sample data builders ---

def _artwork(**overrides):
    """10 x 10 in aspiring, self-taught watercolor, 1k-5k sales, no costs."""
    dims = {
        "width": 10,
        "height": 10,
        "depth": None,
        "unit": Unit.INCHES,
    }
    for key in ("width", "height", "depth", "unit"):
        if key in overrides:
            dims[key] = overrides.pop(key)
    fields = {
        "title": "Morning Fog",
        "artist_name": "R. Vale",
        "dimensions": ArtworkDimensions(**dims),
        "career_stage": CareerStage.ASPIRING,
        "education": Education.SELF_TAUGHT,
        "sales_range": SalesRange.FROM_1K_TO_5K,
        "medium": Medium.WATERCOLOR,
        "material_cost": 0.0,
        "framing_cost": 0.0,
    }
    fields.update(overrides)
    return ArtworkDetails(**fields)


MONEY_FIELDS = ("base_price", "materials_cost", "framing_cost", "total_price", "low_price", "high_price")


# ============================================================
# 1-3. Worked examples
# ============================================================

def test_flat_watercolor_example():
    """100 sq in × 1.25 × 0.95 × 1.00 = 118.75 → 120, band 25% → 90 / 150."""
    quote = compute_quote(_artwork(), Currency.USD, 1)
    assert quote.breakdown.area_sq_in == 100
    assert quote.breakdown.base_rate_per_sq_in == 1.25
    assert quote.breakdown.market_multiplier == 0.95
    assert quote.breakdown.sales_multiplier == 1.00
    assert quote.breakdown.education_multiplier == 0.95
    assert quote.breakdown.medium_multiplier == 1.00
    assert quote.breakdown.depth_multiplier is None
    assert quote.base_price == 120
    assert quote.total_price == 120
    assert quote.low_price == 90
    assert quote.high_price == 150
    assert quote.currency == Currency.USD


def test_sculpture_with_depth_example():
    """Depth 5 on a 10 in face → ×1.25; 118.75 × 1.5 × 1.25 = 222.66 → 225."""
    quote = compute_quote(_artwork(medium=Medium.SCULPTURE, depth=5), Currency.USD, 1)
    assert quote.breakdown.depth_multiplier == 1.25
    assert quote.breakdown.medium_multiplier == 1.5
    assert quote.total_price == 225
    assert quote.low_price == 165   # 166.99 → 165
    assert quote.high_price == 280  # 278.32 → 280


def test_cad_rounds_after_conversion():
    """118.75 × 1.36 = 161.5 → 160, not 120 × 1.36 = 163.2 → 165."""
    quote = compute_quote(_artwork(), Currency.CAD, 1.36)
    assert quote.total_price == 160
    assert quote.currency == Currency.CAD


# ============================================================
# 4-8. Properties
# ============================================================

def test_deterministic():
    artwork = _artwork(medium=Medium.OIL, material_cost=42.5, framing_cost=80, depth=2)
    first = compute_quote(artwork, Currency.CAD, 1.3712)
    second = compute_quote(artwork, Currency.CAD, 1.3712)
    assert first == second
    assert first.model_dump() == second.model_dump()


def test_inches_and_centimeters_price_the_same():
    """10 × 10 in and 25.4 × 25.4 cm are the same piece."""
    inches = compute_quote(_artwork(), Currency.USD, 1)
    cm = compute_quote(_artwork(width=25.4, height=25.4, unit=Unit.CM), Currency.USD, 1)
    assert cm.breakdown.area_sq_in == pytest.approx(inches.breakdown.area_sq_in)
    for field in MONEY_FIELDS:
        assert getattr(cm, field) == getattr(inches, field)


def test_cm_depth_converted_too():
    """Depth in cm is normalized with the face: 12.7 cm on 25.4 cm → ×1.25."""
    quote = compute_quote(_artwork(width=25.4, height=25.4, depth=12.7, unit=Unit.CM), Currency.USD, 1)
    assert quote.breakdown.depth_multiplier == 1.25


def test_total_increases_with_career_stage():
    artwork = _artwork(width=24, height=36, medium=Medium.ACRYLIC)
    totals = [
        compute_quote(artwork.model_copy(update={"career_stage": stage}), Currency.USD, 1).total_price
        for stage in (CareerStage.ASPIRING, CareerStage.EMERGING, CareerStage.ESTABLISHED, CareerStage.ECHELON)
    ]
    assert totals == sorted(totals)
    assert len(set(totals)) == 4


@pytest.mark.parametrize("stage", list(CareerStage))
@pytest.mark.parametrize("medium", [Medium.DRAWING, Medium.OIL, Medium.SCULPTURE])
def test_band_ordering_and_rounding_law(stage, medium):
    """low <= total <= high, and every figure is a multiple of 5."""
    artwork = _artwork(width=17.3, height=11.9, career_stage=stage, medium=medium, material_cost=13.37)
    for currency, rate in ((Currency.USD, 1), (Currency.CAD, 1.3587)):
        quote = compute_quote(artwork, currency, rate)
        assert quote.low_price <= quote.total_price <= quote.high_price
        for field in MONEY_FIELDS:
            value = getattr(quote, field)
            assert value % 5 == 0, f"{field}={value} not a multiple of 5"


def test_band_ordering_near_rounding_boundary():
    """
    Totals sitting on a rounding midpoint still keep low <= total <= high:
    round-to-5 never reverses order, it can only collapse neighbours.
    """
    # 2.5 sq in × 1.25 × 1.0 × 1.0 = 3.125 raw total → rounds to 5
    artwork = _artwork(width=1, height=2.5, education=Education.EMERGING_TRAINING)
    quote = compute_quote(artwork, Currency.USD, 1)
    assert quote.total_price == 5
    assert quote.low_price <= quote.total_price <= quote.high_price


# ============================================================
# 9-12. Line items, depth, currency
# ============================================================

def test_zero_costs_pass_through():
    quote = compute_quote(_artwork(width=30, height=40, medium=Medium.OIL), Currency.USD, 1)
    assert quote.materials_cost == 0
    assert quote.framing_cost == 0
    assert quote.total_price == quote.base_price


def test_materials_and_framing_doubled():
    quote = compute_quote(_artwork(material_cost=50, framing_cost=100), Currency.USD, 1)
    assert quote.materials_cost == 100
    assert quote.framing_cost == 200
    # 118.75 + 100 + 200 = 418.75 → 420
    assert quote.total_price == 420


def test_total_rounded_independently_of_line_items():
    """Displayed total may differ from the sum of displayed line items."""
    # base 118.75 → 120, materials 2 × 1.3 = 2.6 → 5, total 121.35 → 120
    quote = compute_quote(_artwork(material_cost=1.3), Currency.USD, 1)
    assert quote.base_price == 120
    assert quote.materials_cost == 5
    assert quote.total_price == 120
    assert quote.base_price + quote.materials_cost != quote.total_price


@pytest.mark.parametrize("depth", [None, 0, -3])
def test_no_depth_is_flat(depth):
    flat = compute_quote(_artwork(), Currency.USD, 1)
    quote = compute_quote(_artwork(depth=depth), Currency.USD, 1)
    assert quote.breakdown.depth_multiplier is None
    assert quote.base_price == flat.base_price


def test_depth_uses_larger_face_and_is_not_capped():
    # 40 deep on a 10 × 4 face → 1 + 40/10 × 0.5 = 3.0
    quote = compute_quote(_artwork(width=10, height=4, depth=40), Currency.USD, 1)
    assert quote.breakdown.depth_multiplier == 3.0


def test_usd_ignores_conversion_rate():
    assert compute_quote(_artwork(), Currency.USD, 1.36) == compute_quote(_artwork(), Currency.USD, 1)


def test_currency_accepts_plain_string():
    quote = compute_quote(_artwork(), "CAD", 1.36)
    assert quote.currency == Currency.CAD
    assert quote.total_price == 160


def test_cad_scales_unrounded_total():
    artwork = _artwork(width=18, height=24, medium=Medium.MIXED_MEDIA, framing_cost=35)
    rate = 1.3821
    raw_usd = 18 * 24 * 1.25 * 0.95 * 1.20 + 70
    quote = compute_quote(artwork, Currency.CAD, rate)
    assert quote.total_price == round_to_nearest(raw_usd * rate)


# ============================================================
# 13-15. Tables and format helpers
# ============================================================

def test_tables_cover_every_enum_value_with_positive_multipliers():
    for table, enum_cls in (
        (BASE_RATES, CareerStage),
        (PRICE_BANDS, CareerStage),
        (SALES_MULTIPLIERS, SalesRange),
        (EDUCATION_MULTIPLIERS, Education),
        (MEDIUM_MULTIPLIERS, Medium),
    ):
        assert set(table) == set(enum_cls)
        assert all(v > 0 for v in table.values())
    assert min(SALES_MULTIPLIERS.values()) == 0.90 and max(SALES_MULTIPLIERS.values()) == 1.30
    assert min(EDUCATION_MULTIPLIERS.values()) == 0.95 and max(EDUCATION_MULTIPLIERS.values()) == 1.20
    assert min(MEDIUM_MULTIPLIERS.values()) == 0.80 and max(MEDIUM_MULTIPLIERS.values()) == 1.50


def test_round_to_nearest_half_away_from_zero():
    assert round_to_nearest(117.5) == 120   # 23.5 → 24 (banker's would give 24 too)
    assert round_to_nearest(112.5) == 115   # 22.5 → 23 (banker's would give 22)
    assert round_to_nearest(2.4) == 0
    assert round_to_nearest(-12.5) == -15
    assert round_to_nearest(7, nearest=10) == 10
    assert not math.isnan(round_to_nearest(0))


def test_format_currency_and_range():
    assert format_currency(1235, Currency.USD) == "$1,235"
    assert format_currency(1235, Currency.CAD) == "CA$1,235"
    assert format_currency(0, Currency.USD) == "$0"
    assert format_currency(1234567.5, "USD") == "$1,234,568"
    assert format_price_range(90, 150, Currency.USD) == "$90 – $150"
