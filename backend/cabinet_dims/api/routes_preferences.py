"""Preference endpoints - the persisted unit mode."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from cabinet_dims.config import settings
from cabinet_dims.core.prefs.store import CorruptStoreError, JsonKeyValueStore
from cabinet_dims.core.prefs.unit_preference import load_units_preference, save_units_preference
from cabinet_dims.models.schemas import UnitsPreference
from cabinet_dims.utils.units import coerce_units

router = APIRouter(tags=["preferences"])
logger = logging.getLogger(__name__)


def get_preference_store() -> JsonKeyValueStore:
    return JsonKeyValueStore(settings.preferences_path)


@router.get("/preferences/units", response_model=UnitsPreference)
async def get_units(store: JsonKeyValueStore = Depends(get_preference_store)):
    """Return the stored unit mode, falling back to the configured default."""
    return {"units": load_units_preference(store, default=coerce_units(settings.default_units))}


@router.put("/preferences/units", response_model=UnitsPreference)
async def put_units(req: UnitsPreference, store: JsonKeyValueStore = Depends(get_preference_store)):
    """Persist the unit mode."""
    try:
        save_units_preference(store, req.units)
    except CorruptStoreError as exc:
        raise HTTPException(409, detail=str(exc))
    except OSError as exc:
        logger.error("Could not write unit preference to %s: %s", store.path, exc)
        raise HTTPException(500, detail=f"Could not save preference: {exc.strerror or exc}")
    return {"units": req.units}
