"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, field_validator

from cabinet_dims.config import settings
from cabinet_dims.core.format.formatter import DisplayStyle
from cabinet_dims.core.format.rounding import Rounding
from cabinet_dims.utils.units import Units, coerce_units

_DEFAULT_UNITS = coerce_units(settings.default_units)


def _finite_or_none(v: Optional[float]) -> Optional[float]:
    if v is not None and not math.isfinite(v):
        raise ValueError("Value must be a finite number")
    return v


class DimensionTextRequest(BaseModel):
    text: str
    units: Units = _DEFAULT_UNITS

    @field_validator("text")
    @classmethod
    def text_not_too_long(cls, v: str) -> str:
        if len(v) > settings.max_text_length:
            raise ValueError(f"Dimension text is longer than {settings.max_text_length} characters")
        return v


class DimensionResponse(BaseModel):
    inches: float
    mm: float


class FormatRequest(BaseModel):
    inches: Optional[float] = None
    units: Units = _DEFAULT_UNITS
    style: DisplayStyle = DisplayStyle.FRACTION
    rounding: Rounding = Rounding.NEAREST

    @field_validator("inches")
    @classmethod
    def must_be_finite(cls, v: Optional[float]) -> Optional[float]:
        return _finite_or_none(v)


class FormatResponse(BaseModel):
    text: str


class ConvertRequest(BaseModel):
    value: float
    units: Units = Units.INCHES  # unit the value is expressed in

    @field_validator("value")
    @classmethod
    def must_be_finite(cls, v: float) -> float:
        return _finite_or_none(v)


class CommitRequest(DimensionTextRequest):
    previous_inches: Optional[float] = None
    min_inches: Optional[float] = None
    max_inches: Optional[float] = None

    @field_validator("previous_inches", "min_inches", "max_inches")
    @classmethod
    def must_be_finite(cls, v: Optional[float]) -> Optional[float]:
        return _finite_or_none(v)


class CommitResponse(BaseModel):
    value: Optional[float]
    text: str
    changed: bool
    error: Optional[str] = None


class UnitsPreference(BaseModel):
    units: Units
