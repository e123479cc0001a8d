"""Unit conversion utilities. Internal representation is always decimal inches."""

from __future__ import annotations

from enum import Enum

MM_PER_INCH = 25.4
INCHES_PER_FOOT = 12


class Units(str, Enum):
    INCHES = "in"
    MILLIMETERS = "mm"


DEFAULT_UNITS = Units.INCHES

# Accepted spellings when a unit arrives as free text (query params, settings).
_UNIT_ALIASES = {
    "in": Units.INCHES,
    "inch": Units.INCHES,
    "inches": Units.INCHES,
    "mm": Units.MILLIMETERS,
    "millimeter": Units.MILLIMETERS,
    "millimeters": Units.MILLIMETERS,
    "millimetre": Units.MILLIMETERS,
    "millimetres": Units.MILLIMETERS,
}

VALID_UNITS = {u.value for u in Units}


def coerce_units(value: Units | str) -> Units:
    """Return the Units member for an enum value or a unit name."""
    if isinstance(value, Units):
        return value
    key = str(value).strip().lower()
    if key not in _UNIT_ALIASES:
        raise ValueError(f"Unknown unit '{value}'. Valid: {sorted(VALID_UNITS)}")
    return _UNIT_ALIASES[key]


def inches_to_mm(inches: float) -> float:
    """Convert inches to millimeters."""
    return inches * MM_PER_INCH


def mm_to_inches(mm: float) -> float:
    """Convert millimeters to inches."""
    return mm / MM_PER_INCH


def inches_to_feet(inches: float) -> float:
    return inches / INCHES_PER_FOOT


def to_inches(value: float, unit: Units | str) -> float:
    """Convert a value expressed in the given unit to canonical inches."""
    if coerce_units(unit) is Units.MILLIMETERS:
        return mm_to_inches(value)
    return value


def from_inches(value: float, unit: Units | str) -> float:
    """Convert canonical inches to the given unit."""
    if coerce_units(unit) is Units.MILLIMETERS:
        return inches_to_mm(value)
    return value
