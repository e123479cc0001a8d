"""Fraction helpers for rendering inches as mixed numbers."""

from __future__ import annotations

import math

from cabinet_dims.core.format.rounding import SIXTEENTHS_PER_INCH


def simplify_fraction(numerator: int, denominator: int) -> tuple[int, int]:
    """Reduce numerator/denominator to lowest terms."""
    if denominator == 0:
        raise ZeroDivisionError("Fraction denominator cannot be zero")
    divisor = math.gcd(numerator, denominator)
    if divisor == 0:
        return 0, 1
    return numerator // divisor, denominator // divisor


def mixed_fraction_text(count: int, denominator: int = SIXTEENTHS_PER_INCH) -> str:
    """Render a signed count of 1/denominator increments as a mixed number.

    >>> mixed_fraction_text(24)
    '1 1/2'
    >>> mixed_fraction_text(6)
    '3/8'
    >>> mixed_fraction_text(-32)
    '-2'
    """
    sign = "-" if count < 0 else ""
    whole, remainder = divmod(abs(count), denominator)
    if remainder == 0:
        return f"{sign}{whole}"

    num, den = simplify_fraction(remainder, denominator)
    if whole == 0:
        return f"{sign}{num}/{den}"
    return f"{sign}{whole} {num}/{den}"
