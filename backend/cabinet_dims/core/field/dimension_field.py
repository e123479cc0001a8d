"""Commit semantics of an editable dimension text field.

The browser form lets the user type freely and only converts on blur or
Enter. This module holds that conversion step: parse the typed text in the
field's unit mode, clamp, and re-render, or keep the last good value when
the text does not parse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from cabinet_dims.core.format.formatter import DisplayStyle, format_for_display
from cabinet_dims.core.format.rounding import Rounding
from cabinet_dims.core.parser.dimension_parser import DimensionParseError, parse_dimension
from cabinet_dims.utils.units import DEFAULT_UNITS, Units, coerce_units

logger = logging.getLogger(__name__)


@dataclass
class CommitResult:
    value: Optional[float]  # canonical inches after the commit
    text: str               # what the field should now show
    changed: bool
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def clamp(value: float, minimum: Optional[float] = None, maximum: Optional[float] = None) -> float:
    if minimum is not None:
        value = max(value, minimum)
    if maximum is not None:
        value = min(value, maximum)
    return value


class DimensionField:
    """A single length input holding canonical inches."""

    def __init__(
        self,
        value: Optional[float] = None,
        units: Units | str = DEFAULT_UNITS,
        min_inches: Optional[float] = None,
        max_inches: Optional[float] = None,
    ) -> None:
        if min_inches is not None and max_inches is not None and min_inches > max_inches:
            raise ValueError(f"min_inches ({min_inches}) is greater than max_inches ({max_inches})")
        self.value = value
        self.units = coerce_units(units)
        self.min_inches = min_inches
        self.max_inches = max_inches

    def display(self) -> str:
        """Editable text for the current value: decimal inches or 0.5 mm."""
        return format_for_display(self.value, self.units, DisplayStyle.DECIMAL, Rounding.NEAREST)

    def set_units(self, units: Units | str) -> str:
        """Switch unit mode. The canonical value is untouched; returns the new text."""
        self.units = coerce_units(units)
        return self.display()

    def commit(self, text: str) -> CommitResult:
        """Convert typed text into the field's canonical value.

        Unparseable text leaves the value alone and reverts the text to the
        last good display string.
        """
        try:
            parsed = parse_dimension(text, self.units)
        except DimensionParseError as exc:
            logger.debug("Commit rejected, keeping %r: %s", self.value, exc)
            return CommitResult(value=self.value, text=self.display(), changed=False, error=str(exc))

        clamped = clamp(parsed, self.min_inches, self.max_inches)
        if clamped != parsed:
            logger.debug("Clamped %s in to %s in", parsed, clamped)

        changed = clamped != self.value
        self.value = clamped
        return CommitResult(value=clamped, text=self.display(), changed=changed)
