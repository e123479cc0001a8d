"""Canonical inches -> display strings.

Displayed text is never a source of truth; it is regenerated from the
canonical inch value every time, as a pure function of
(inches, units, style, rounding).
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

from cabinet_dims.core.format.fractions import mixed_fraction_text
from cabinet_dims.core.format.rounding import (
    HALF_MM_STEPS,
    SIXTEENTHS_PER_INCH,
    Rounding,
    quantize,
)
from cabinet_dims.core.parser.dimension_parser import DimensionParseError, parse_inches_expression
from cabinet_dims.utils.units import Units, coerce_units, inches_to_feet, inches_to_mm, mm_to_inches


class DisplayStyle(str, Enum):
    FRACTION = "fraction"  # read-only displays: "1 1/2"
    DECIMAL = "decimal"    # editable text fields: "1.5"


def _is_number(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


# ── Millimeters ──────────────────────────────────────────────────────────────

def _mm_text(mm: Optional[float], rounding: Rounding) -> str:
    if not _is_number(mm):
        return ""
    halves = quantize(mm, HALF_MM_STEPS, rounding)
    sign = "-" if halves < 0 else ""
    whole, half = divmod(abs(halves), HALF_MM_STEPS)
    return f"{sign}{whole}.5" if half else f"{sign}{whole}"


def format_mm(inches: Optional[float]) -> str:
    """Inches -> millimeter text rounded to the nearest 0.5 mm ("609.5", "24")."""
    if not _is_number(inches):
        return ""
    return _mm_text(inches_to_mm(inches), Rounding.NEAREST)


def format_mm_floor(inches: Optional[float]) -> str:
    """Inches -> millimeter text floored to 0.5 mm."""
    if not _is_number(inches):
        return ""
    return _mm_text(inches_to_mm(inches), Rounding.FLOOR)


# ── Inches ───────────────────────────────────────────────────────────────────

def _fraction_text(inches: Optional[float], rounding: Rounding) -> str:
    if not _is_number(inches):
        return ""
    return mixed_fraction_text(quantize(inches, SIXTEENTHS_PER_INCH, rounding))


def _decimal_text(inches: Optional[float], rounding: Rounding) -> str:
    if not _is_number(inches):
        return ""
    sixteenths = quantize(inches, SIXTEENTHS_PER_INCH, rounding)
    if sixteenths == 0:
        return "0"
    text = f"{sixteenths / SIXTEENTHS_PER_INCH:.4f}"
    return text.rstrip("0").rstrip(".")


def format_inches_fraction(inches: Optional[float]) -> str:
    """Mixed-number text at the nearest 1/16": 1.5 -> "1 1/2", 0.375 -> "3/8"."""
    return _fraction_text(inches, Rounding.NEAREST)


def format_inches_fraction_floor(inches: Optional[float]) -> str:
    """Mixed-number text floored to 1/16"."""
    return _fraction_text(inches, Rounding.FLOOR)


def format_inches_decimal(inches: Optional[float]) -> str:
    """Decimal text at the nearest 1/16", trailing zeros stripped: 24.5 -> "24.5"."""
    return _decimal_text(inches, Rounding.NEAREST)


def format_inches_decimal_floor(inches: Optional[float]) -> str:
    """Decimal text floored to 1/16"."""
    return _decimal_text(inches, Rounding.FLOOR)


# ── Boundary operation ───────────────────────────────────────────────────────

def format_for_display(
    inches: Optional[float],
    units: Units | str,
    style: DisplayStyle | str = DisplayStyle.FRACTION,
    rounding: Rounding | str = Rounding.NEAREST,
) -> str:
    """Render canonical inches for the given unit mode.

    ``style`` only applies to inches; millimeters always render at 0.5 mm.
    Missing or non-finite values render as an empty string.
    """
    units = coerce_units(units)
    style = DisplayStyle(style)
    rounding = Rounding(rounding)

    if units is Units.MILLIMETERS:
        if not _is_number(inches):
            return ""
        return _mm_text(inches_to_mm(inches), rounding)
    if style is DisplayStyle.DECIMAL:
        return _decimal_text(inches, rounding)
    return _fraction_text(inches, rounding)


# ── Material schedule read-outs (values stored in mm) ────────────────────────

def format_mm_value(mm: Optional[float], rounding: Rounding = Rounding.FLOOR) -> str:
    """Render a stored millimeter value at 0.5 mm resolution."""
    return _mm_text(mm, Rounding(rounding))


def format_inches_from_mm(mm: Optional[float], rounding: Rounding = Rounding.FLOOR) -> str:
    """Render a stored millimeter value as mixed inches at 1/16" resolution."""
    if not _is_number(mm):
        return ""
    return _fraction_text(mm_to_inches(mm), Rounding(rounding))


def format_in_mm_pair(inches: Optional[float], rounding: Rounding = Rounding.FLOOR) -> str:
    """Side-by-side "<inches> | <mm>" read-out, "-" for a missing value."""
    if not _is_number(inches):
        return "-"
    rounding = Rounding(rounding)
    inch_text = _fraction_text(inches, rounding) or "-"
    mm_text = _mm_text(inches_to_mm(inches), rounding) or "-"
    return f"{inch_text} | {mm_text}"


def format_feet(inches: Optional[float]) -> str:
    """Render inches as decimal feet with two places: 126 -> "10.50 ft"."""
    if not _is_number(inches):
        return ""
    return f"{inches_to_feet(inches):.2f} ft"


def normalize_inches_text(text: str) -> str:
    """Re-render user-typed inch text floored to 1/16".

    Text that is not a valid inches expression comes back stripped and
    otherwise untouched so the user can correct it.
    """
    try:
        inches = parse_inches_expression(text)
    except DimensionParseError:
        return (text or "").strip()
    return _fraction_text(inches, Rounding.FLOOR)
