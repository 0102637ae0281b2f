"""
Form intake: turns a raw form submission into an ArtworkDetails record.

Required: title, artist_name, width, height (positive).
Optional numerics (depth, material_cost, framing_cost) fall back the way an
empty form input does: blank or unparseable depth means "not 3D", blank
costs mean 0.

Numbers must parse in full: "12abc" is not read as 12, it counts as
unparseable (missing for width/height, flat for depth, zero for costs).
"""

import logging
import math
from typing import Mapping, Optional

from .models import CareerStage, Education, Medium, SalesRange, Unit
from .schemas import ArtworkDetails, ArtworkDimensions

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"


class ArtworkValidationError(ValueError):
    """Base class for rejected form submissions."""


class MissingFieldsError(ArtworkValidationError):
    def __init__(self, fields: list):
        super().__init__(REQUIRED_FIELDS_MESSAGE)
        self.fields = fields


class InvalidFieldError(ArtworkValidationError):
    def __init__(self, field: str, value):
        super().__init__(f"Invalid value for {field}: {value!r}")
        self.field = field
        self.value = value


def _parse_float(value) -> Optional[float]:
    """Parse a numeric form value. Returns None for blank or non-numeric input."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except (ValueError, TypeError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _parse_text(value) -> str:
    return str(value).strip() if value is not None else ""


def _parse_choice(form: Mapping, field: str, enum_cls, default=None):
    raw = form.get(field)
    if raw is None or _parse_text(raw) == "":
        if default is not None:
            return default
        raise InvalidFieldError(field, raw)
    try:
        return enum_cls(_parse_text(raw))
    except ValueError:
        raise InvalidFieldError(field, raw)


def _parse_cost(form: Mapping, field: str) -> float:
    cost = _parse_float(form.get(field)) or 0.0
    if cost < 0:
        raise InvalidFieldError(field, form.get(field))
    return cost


def parse_artwork_form(form: Mapping) -> ArtworkDetails:
    """
    Validate a form submission and build the ArtworkDetails the engine prices.

    Raises:
        MissingFieldsError: title/artist blank, width/height missing or <= 0
        InvalidFieldError: enumeration value outside its set, negative cost
    """
    title = _parse_text(form.get("title"))
    artist_name = _parse_text(form.get("artist_name"))
    width = _parse_float(form.get("width"))
    height = _parse_float(form.get("height"))

    missing = []
    if not title:
        missing.append("title")
    if not artist_name:
        missing.append("artist_name")
    if width is None or width <= 0:
        missing.append("width")
    if height is None or height <= 0:
        missing.append("height")
    if missing:
        logger.info("Rejected artwork form, missing/invalid: %s", ", ".join(missing))
        raise MissingFieldsError(missing)

    depth = _parse_float(form.get("depth"))
    if not depth or depth <= 0:
        depth = None

    return ArtworkDetails(
        title=title,
        artist_name=artist_name,
        dimensions=ArtworkDimensions(
            width=width,
            height=height,
            depth=depth,
            unit=_parse_choice(form, "unit", Unit, default=Unit.INCHES),
        ),
        career_stage=_parse_choice(form, "career_stage", CareerStage),
        education=_parse_choice(form, "education", Education),
        sales_range=_parse_choice(form, "sales_range", SalesRange),
        medium=_parse_choice(form, "medium", Medium),
        material_cost=_parse_cost(form, "material_cost"),
        framing_cost=_parse_cost(form, "framing_cost"),
    )
