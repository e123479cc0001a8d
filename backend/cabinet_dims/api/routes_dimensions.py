"""Dimension endpoints — parse, format, convert and commit field text."""

from fastapi import APIRouter, HTTPException

from cabinet_dims.models.schemas import (
    CommitRequest,
    CommitResponse,
    ConvertRequest,
    DimensionResponse,
    DimensionTextRequest,
    FormatRequest,
    FormatResponse,
)
from cabinet_dims.core.parser.dimension_parser import parse_dimension, DimensionParseError
from cabinet_dims.core.format.formatter import format_for_display
from cabinet_dims.core.field.dimension_field import DimensionField
from cabinet_dims.utils.units import inches_to_mm, to_inches

router = APIRouter(tags=["dimensions"])


@router.post("/dimensions/parse", response_model=DimensionResponse)
async def parse_text(req: DimensionTextRequest):
    """Parse dimension text in the caller's unit mode into canonical inches."""
    try:
        inches = parse_dimension(req.text, req.units)
    except DimensionParseError as e:
        raise HTTPException(
            status_code=422,
            detail=[{"message": e.reason, "text": req.text}],
        )
    return {"inches": inches, "mm": inches_to_mm(inches)}


@router.post("/dimensions/format", response_model=FormatResponse)
async def format_value(req: FormatRequest):
    """Render canonical inches for display."""
    return {"text": format_for_display(req.inches, req.units, req.style, req.rounding)}


@router.post("/dimensions/convert", response_model=DimensionResponse)
async def convert_value(req: ConvertRequest):
    """Express a value given in inches or mm in both units."""
    inches = to_inches(req.value, req.units)
    return {"inches": inches, "mm": inches_to_mm(inches)}


@router.post("/dimensions/commit", response_model=CommitResponse)
async def commit_text(req: CommitRequest):
    """Apply field text to a previous value. A failed parse keeps the previous value."""
    try:
        field = DimensionField(
            value=req.previous_inches,
            units=req.units,
            min_inches=req.min_inches,
            max_inches=req.max_inches,
        )
    except ValueError as e:
        raise HTTPException(422, detail=[{"message": str(e)}])

    result = field.commit(req.text)
    return {
        "value": result.value,
        "text": result.text,
        "changed": result.changed,
        "error": result.error,
    }
