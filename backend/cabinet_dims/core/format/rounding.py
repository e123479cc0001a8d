"""Quantisation of lengths to their display resolution.

Two policies exist for the same resolutions and are not interchangeable:

    NEAREST  editable inputs and their previews
    FLOOR    display-only derived read-outs that must never over-state a size

Signed values are quantised on their magnitude and the sign is re-applied,
so ``-1.03`` and ``1.03`` always land on mirrored increments.
"""

from __future__ import annotations

import math
from enum import Enum

SIXTEENTHS_PER_INCH = 16
HALF_MM_STEPS = 2  # increments per millimeter

# Absorbs float noise such as 609.6 / 25.4 == 23.999999999999996.
_FLOOR_EPSILON = 1e-9


class Rounding(str, Enum):
    NEAREST = "nearest"
    FLOOR = "floor"


def quantize(value: float, steps_per_unit: int, rounding: Rounding = Rounding.NEAREST) -> int:
    """Return the signed number of 1/steps_per_unit increments closest to value.

    NEAREST rounds halves away from zero; FLOOR truncates the magnitude.
    """
    scaled = abs(value) * steps_per_unit
    if rounding is Rounding.FLOOR:
        count = math.floor(scaled + _FLOOR_EPSILON)
    else:
        # floor(scaled + 0.5) would round 0.49999999999999994 up.
        count = math.floor(scaled)
        if scaled - count >= 0.5:
            count += 1
    return -count if value < 0 else count


def _snap(value: float, steps_per_unit: int, rounding: Rounding) -> float:
    count = quantize(value, steps_per_unit, rounding)
    if count == 0:
        return 0.0
    return count / steps_per_unit


def round_to_sixteenth(inches: float) -> float:
    return _snap(inches, SIXTEENTHS_PER_INCH, Rounding.NEAREST)


def floor_to_sixteenth(inches: float) -> float:
    return _snap(inches, SIXTEENTHS_PER_INCH, Rounding.FLOOR)


def round_to_half_mm(mm: float) -> float:
    return _snap(mm, HALF_MM_STEPS, Rounding.NEAREST)


def floor_to_half_mm(mm: float) -> float:
    return _snap(mm, HALF_MM_STEPS, Rounding.FLOOR)
