"""The user's persisted unit mode ("in" or "mm").

Only the surrounding application reads this; parse and format calls take
the unit mode as an explicit argument.
"""

from __future__ import annotations

import logging

from cabinet_dims.core.prefs.store import CorruptStoreError, JsonKeyValueStore
from cabinet_dims.utils.units import DEFAULT_UNITS, Units

logger = logging.getLogger(__name__)

UNITS_PREFERENCE_KEY = "cc.units"


def load_units_preference(store: JsonKeyValueStore, default: Units = DEFAULT_UNITS) -> Units:
    """Return the stored unit mode, or ``default`` if none or unrecognised.

    Only the exact values "in" and "mm" are honoured.
    """
    try:
        stored = store.get(UNITS_PREFERENCE_KEY)
    except (CorruptStoreError, OSError) as exc:
        logger.warning("Could not read unit preference, using %s: %s", default.value, exc)
        return default

    if stored in (Units.INCHES.value, Units.MILLIMETERS.value):
        return Units(stored)
    if stored is not None:
        logger.warning("Ignoring unknown stored unit %r", stored)
    return default


def save_units_preference(store: JsonKeyValueStore, units: Units) -> None:
    store.set(UNITS_PREFERENCE_KEY, Units(units).value)
    logger.info("Unit preference set to %s", Units(units).value)
