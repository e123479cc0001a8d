"""Parser for free-form dimension text -> canonical inches.

Accepted forms (case-insensitive, surrounding whitespace ignored):

    24          plain integer, read in the caller's current units
    24.5  .75   decimal, optionally signed
    3/8         simple fraction (inches)
    1 1/2       mixed number (inches)
    10mm        explicit millimeters: mm, millimeter(s), millimetre(s)
    24 in  24"  explicit inches: in, inch, inches, or a trailing double quote

Fractions are only meaningful in inches. Millimeter text is reduced to its
digits, '.' and '-' before being read as a decimal.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from cabinet_dims.utils.units import Units, coerce_units, mm_to_inches

logger = logging.getLogger(__name__)

_MM_SUFFIX_RE = re.compile(r"(?:mm|millimet(?:er|re))s?$")
_INCH_SUFFIX_RE = re.compile(r'(?:in(?:ch(?:es)?)?|")$')
_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")

_MIXED_RE = re.compile(r"^([+-]?)(\d+)\s+(\d+)\s*/\s*(\d+)$")
_FRACTION_RE = re.compile(r"^([+-]?)(\d+)\s*/\s*(\d+)$")
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")


class DimensionParseError(ValueError):
    """Raised when text cannot be read as a length."""

    def __init__(self, reason: str, text: Optional[str]):
        self.reason = reason
        self.text = text
        super().__init__(f"{reason}: {text!r}")


def _finite(value: float, text: str) -> float:
    if not math.isfinite(value):
        raise DimensionParseError("Value is not a finite number", text)
    return value


def _fraction(numerator: str, denominator: str, text: str) -> float:
    # int() refuses digit strings past the interpreter's conversion limit.
    try:
        num, den = int(numerator), int(denominator)
    except ValueError:
        raise DimensionParseError("Value is not a finite number", text) from None
    if den == 0:
        raise DimensionParseError("Fraction has a zero denominator", text)
    try:
        return num / den
    except OverflowError:
        raise DimensionParseError("Value is not a finite number", text) from None


def parse_decimal(text: str) -> float:
    """Parse a plain signed decimal such as '24', '-1.5' or '.75'."""
    cleaned = (text or "").strip()
    if not _DECIMAL_RE.match(cleaned):
        raise DimensionParseError("Not a decimal number", text)
    return _finite(float(cleaned), text)


def parse_inches_expression(text: str) -> float:
    """Parse a mixed number, simple fraction or decimal as inches.

    A leading sign applies to the whole expression: '-1 1/2' is -1.5.
    """
    cleaned = (text or "").strip()
    if not cleaned:
        raise DimensionParseError("Empty dimension", text)

    m = _MIXED_RE.match(cleaned)
    if m:
        sign, whole, num, den = m.groups()
        value = float(whole) + _fraction(num, den, text)
        return _finite(-value if sign == "-" else value, text)

    m = _FRACTION_RE.match(cleaned)
    if m:
        sign, num, den = m.groups()
        value = _fraction(num, den, text)
        return _finite(-value if sign == "-" else value, text)

    if _DECIMAL_RE.match(cleaned):
        return parse_decimal(cleaned)

    raise DimensionParseError("Unrecognised inch value", text)


def _parse_inches_text(expression: str, original: str) -> float:
    try:
        return parse_inches_expression(expression)
    except DimensionParseError as exc:
        raise DimensionParseError(exc.reason, original) from None


def _parse_mm_text(lowered: str, original: str) -> float:
    digits = _NON_NUMERIC_RE.sub("", lowered)
    if not digits:
        raise DimensionParseError("No millimeter value", original)
    try:
        mm = parse_decimal(digits)
    except DimensionParseError:
        raise DimensionParseError("Malformed millimeter value", original) from None
    return mm_to_inches(mm)


def parse_dimension(text: Optional[str], current_units: Units | str) -> float:
    """Parse user-entered dimension text into canonical inches.

    An explicit unit suffix wins; otherwise the text is read in
    ``current_units``. Raises DimensionParseError on any failure, so a
    result is always a finite float.
    """
    if text is None:
        raise DimensionParseError("Empty dimension", text)
    stripped = str(text).strip()
    if not stripped:
        raise DimensionParseError("Empty dimension", text)

    lowered = stripped.lower()

    if _MM_SUFFIX_RE.search(lowered):
        return _parse_mm_text(lowered, text)

    m = _INCH_SUFFIX_RE.search(lowered)
    if m:
        return _parse_inches_text(lowered[: m.start()], text)

    if coerce_units(current_units) is Units.MILLIMETERS:
        return _parse_mm_text(lowered, text)
    return _parse_inches_text(lowered, text)


def try_parse_dimension(text: Optional[str], current_units: Units | str) -> Optional[float]:
    """Like parse_dimension, but returns None instead of raising."""
    try:
        return parse_dimension(text, current_units)
    except DimensionParseError as exc:
        logger.debug("Ignoring unparseable dimension: %s", exc)
        return None
