"""
PDF Quote Generator.

Renders an artwork PriceQuote into a one-page A4 quote document.
Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header band (studio name, title line, date)
2. Artwork info (title, artist, medium, dimensions)
3. Recommended retail price + price range
4. Price breakdown box
5. Calculation details
6. Footer

Numbers are printed exactly as the engine returned them, never recomputed.
"""

import re
from datetime import datetime
from typing import Optional

from fpdf import FPDF

from .config import settings
from .models import (
    CAREER_STAGE_LABELS,
    EDUCATION_LABELS,
    MEDIUM_LABELS,
    SALES_RANGE_LABELS,
    Currency,
)
from .pricing_engine import format_currency, format_price_range
from .schemas import ArtworkDetails, PriceQuote, RateQuote


# RGB palette
GOLD = (201, 151, 31)
DARK = (12, 10, 9)
PANEL = (20, 18, 17)
WHITE = (255, 255, 255)
GRAY = (168, 162, 158)
LIGHT_GRAY = (229, 229, 228)

MARGIN = 20


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("•", "-")    # bullet
        .replace("—", " - ")  # em dash
        .replace("–", "-")    # en dash
        .replace("×", "x")    # multiplication sign
        .replace("“", '"')    # left double quote
        .replace("”", '"')    # right double quote
        .replace("‘", "'")    # left single quote
        .replace("’", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


def _num(value: float) -> str:
    """Print a constant the way it was written: 1.25, 3, 0.95."""
    return f"{value:.12g}"


def dimension_string(artwork: ArtworkDetails) -> str:
    """'24 x 36 inches' or '24 x 36 x 4 cm' when the piece has depth."""
    dims = artwork.dimensions
    parts = [_num(dims.width), _num(dims.height)]
    if dims.depth:
        parts.append(_num(dims.depth))
    return f"{' x '.join(parts)} {dims.unit.value}"


def quote_filename(title: str, timestamp_ms: Optional[int] = None) -> str:
    """Download name: non-alphanumerics replaced with underscores."""
    if timestamp_ms is None:
        timestamp_ms = int(datetime.now().timestamp() * 1000)
    slug = re.sub(r"[^a-z0-9]", "_", title, flags=re.IGNORECASE)
    return f"{slug}_quote_{timestamp_ms}.pdf"


def calculation_details(artwork: ArtworkDetails, quote: PriceQuote) -> list:
    """Rows of (left, right) text for the calculation details section."""
    b = quote.breakdown
    rows = [
        (
            f"Area: {b.area_sq_in:.2f} sq in",
            f"Base Rate: ${_num(b.base_rate_per_sq_in)}/sq in ({CAREER_STAGE_LABELS[artwork.career_stage]})",
        ),
        (
            f"Market Multiplier: x{b.market_multiplier:.3f}",
            f"Medium: x{_num(b.medium_multiplier)} ({MEDIUM_LABELS[artwork.medium]})",
        ),
        (
            f"Sales: x{_num(b.sales_multiplier)} ({SALES_RANGE_LABELS[artwork.sales_range]})",
            f"Education: x{_num(b.education_multiplier)} ({EDUCATION_LABELS[artwork.education]})",
        ),
    ]
    if b.depth_multiplier:
        rows.append((f"3D Depth Multiplier: x{b.depth_multiplier:.3f}", ""))
    return rows


class QuotePDF(FPDF):
    """Dark-themed single page quote document."""

    def __init__(self, footer_text=""):
        super().__init__(orientation="portrait", unit="mm", format="A4")
        self.footer_text = footer_text
        self.set_auto_page_break(auto=False)
        self.set_margins(MARGIN, MARGIN, MARGIN)

    def header(self):
        # Page background
        self.set_fill_color(*DARK)
        self.rect(0, 0, self.w, self.h, style="F")

    def footer(self):
        self.set_y(-14)
        self.set_font("Helvetica", "", 7)
        self.set_text_color(*GRAY)
        self.cell(0, 5, _safe(self.footer_text), align="C")

    def centered(self, height, text, style="", size=10, color=WHITE):
        self.set_font("Helvetica", style, size)
        self.set_text_color(*color)
        self.set_x(self.l_margin)
        self.cell(0, height, _safe(text), align="C", new_x="LMARGIN", new_y="NEXT")

    def money_row(self, label, value, bold=False):
        """Label at left, amount at right, inside the breakdown panel."""
        inner = self.w - 2 * (MARGIN + 10)
        self.set_x(MARGIN + 10)
        self.set_font("Helvetica", "B" if bold else "", 8 if not bold else 9)
        self.cell(inner * 0.6, 6, _safe(label))
        self.cell(inner * 0.4, 6, _safe(value), align="R", new_x="LMARGIN", new_y="NEXT")


def generate_quote_pdf(
    artwork: ArtworkDetails,
    quote: PriceQuote,
    rate: Optional[RateQuote] = None,
    studio_name: str = None,
    quote_date: Optional[datetime] = None,
) -> bytes:
    """
    Generate a PDF quote document.

    Args:
        artwork: the ArtworkDetails that was priced
        quote: PriceQuote from compute_quote()
        rate: exchange rate used (printed for CAD quotes)
        studio_name: header title, defaults to settings.STUDIO_NAME
        quote_date: date printed in the header, defaults to today

    Returns:
        PDF bytes
    """
    studio_name = studio_name or settings.STUDIO_NAME
    date_str = (quote_date or datetime.now()).strftime("%B %d, %Y")
    currency = quote.currency

    pdf = QuotePDF(footer_text=settings.PDF_FOOTER)
    pdf.add_page()
    pw = pdf.w - 2 * MARGIN  # printable width

    # ── SECTION 1: Header band ──
    pdf.set_fill_color(*GOLD)
    pdf.rect(0, 0, pdf.w, 35, style="F")
    pdf.set_text_color(*DARK)
    pdf.set_xy(MARGIN, 12)
    pdf.set_font("Helvetica", "B", 28)
    pdf.cell(pw / 2, 12, _safe(studio_name))
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(pw / 2, 12, date_str, align="R", new_x="LMARGIN", new_y="NEXT")
    pdf.set_x(MARGIN)
    pdf.cell(0, 5, "ARTWORK PRICE QUOTE", new_x="LMARGIN", new_y="NEXT")

    # ── SECTION 2: Artwork info ──
    pdf.set_y(45)
    pdf.centered(8, f'"{artwork.title}"', style="BI", size=18)
    pdf.centered(6, f"by {artwork.artist_name}", size=11, color=GRAY)
    pdf.centered(
        5,
        f"{MEDIUM_LABELS[artwork.medium]} - {dimension_string(artwork)}",
        size=9,
        color=GRAY,
    )
    pdf.ln(6)

    # Divider
    pdf.set_draw_color(*GOLD)
    pdf.set_line_width(0.5)
    y = pdf.get_y()
    pdf.line(MARGIN + 40, y, pdf.w - MARGIN - 40, y)
    pdf.ln(8)

    # ── SECTION 3: Main price ──
    pdf.centered(6, "RECOMMENDED RETAIL PRICE", size=9, color=GRAY)
    pdf.centered(14, format_currency(quote.total_price, currency), style="B", size=32, color=GOLD)
    pdf.centered(
        6,
        f"Price Range: {format_price_range(quote.low_price, quote.high_price, currency)}",
        size=9,
        color=GRAY,
    )
    pdf.ln(8)

    # ── SECTION 4: Price breakdown box ──
    box_top = pdf.get_y()
    pdf.set_fill_color(*PANEL)
    pdf.rect(MARGIN, box_top, pw, 50, style="F")
    pdf.set_xy(MARGIN + 10, box_top + 4)
    pdf.set_font("Helvetica", "B", 9)
    pdf.set_text_color(*LIGHT_GRAY)
    pdf.cell(0, 6, "PRICE BREAKDOWN", new_x="LMARGIN", new_y="NEXT")

    pdf.set_text_color(*GRAY)
    pdf.money_row("Base Artwork Price", format_currency(quote.base_price, currency))
    if quote.materials_cost > 0:
        pdf.money_row("Materials (2x markup)", format_currency(quote.materials_cost, currency))
    if quote.framing_cost > 0:
        pdf.money_row("Framing (2x markup)", format_currency(quote.framing_cost, currency))

    y = pdf.get_y() + 1
    pdf.line(MARGIN + 10, y, pdf.w - MARGIN - 10, y)
    pdf.ln(2)
    pdf.set_text_color(*WHITE)
    pdf.money_row("Total", format_currency(quote.total_price, currency), bold=True)

    # ── SECTION 5: Calculation details ──
    pdf.set_y(box_top + 60)
    pdf.set_text_color(*GRAY)
    pdf.set_font("Helvetica", "B", 8)
    pdf.cell(0, 6, "CALCULATION DETAILS", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 7.5)
    for left, right in calculation_details(artwork, quote):
        pdf.set_x(MARGIN)
        pdf.cell(pw / 2, 4.5, _safe(left))
        pdf.cell(pw / 2, 4.5, _safe(right), new_x="LMARGIN", new_y="NEXT")

    if currency == Currency.CAD and rate is not None:
        pdf.ln(2)
        pdf.set_font("Helvetica", "I", 7.5)
        pdf.cell(0, 4.5, _safe(f"Exchange rate {rate.label}"), new_x="LMARGIN", new_y="NEXT")

    return bytes(pdf.output())
