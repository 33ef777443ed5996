"""
Development yield for a rectangular lot.

Footprint, potential volume and a rough unit count. The unit count is a
placeholder heuristic (a fixed volume per unit), not a unit-mix model.
"""

from __future__ import annotations

import logging
import math

from envelope.models.schemas import LotSpec, Setbacks, YieldMetrics

logger = logging.getLogger(__name__)


# Smallest effective dimension used for yield. Unlike the envelope box
# (see geometry.ENVELOPE_MIN_DIMENSION) this reports a true zero when the
# setbacks consume the lot.
YIELD_MIN_DIMENSION = 0.0

VOLUME_PER_UNIT_M3 = 250  # gross m³ per notional dwelling unit


def effective_dimensions(lot: LotSpec, setbacks: Setbacks) -> tuple[float, float]:
    """Lot width and depth left after setbacks, before any floor is applied."""
    return (
        lot.width - setbacks.left - setbacks.right,
        lot.depth - setbacks.front - setbacks.rear,
    )


def compute_yield(lot: LotSpec, setbacks: Setbacks, max_height: float) -> YieldMetrics:
    """Calculate footprint area, volume and estimated units.

    Args:
        lot: Lot width and depth in meters
        setbacks: Front/rear/left/right setbacks in meters
        max_height: Height limit in meters, used as given (no floor)

    Returns YieldMetrics with:
        footprint_area (m²), volume (m³), estimated_units
    """
    raw_width, raw_depth = effective_dimensions(lot, setbacks)
    width = max(YIELD_MIN_DIMENSION, raw_width)
    depth = max(YIELD_MIN_DIMENSION, raw_depth)

    footprint_area = width * depth
    volume = footprint_area * max_height
    # A negative height limit gives a negative volume; the count stays at 0
    units = max(0, math.floor(volume / VOLUME_PER_UNIT_M3))

    if footprint_area == 0:
        logger.debug(
            "No buildable footprint on %.2f x %.2f lot", lot.width, lot.depth,
        )

    return YieldMetrics(
        footprint_area=footprint_area,
        volume=volume,
        estimated_units=units,
    )
