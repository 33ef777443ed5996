"""
Buildable envelope geometry.

The lot is a rectangle centered on the world origin. x runs along the lot
width (left side at -x), z runs along the lot depth with the front edge at
+z, and y points up. The envelope is the box left over after pulling each
edge in by its setback and capping the height.
"""

from __future__ import annotations

import logging

from shapely.geometry import box, Polygon

from envelope.models.schemas import (
    Envelope, LotOutline, LotSpec, Point3D, Setbacks,
)

logger = logging.getLogger(__name__)


# Smallest box edge the envelope may have. Keeps the render size non-zero
# when setbacks consume the whole lot.
ENVELOPE_MIN_DIMENSION = 0.1


def compute_envelope(lot: LotSpec, setbacks: Setbacks, max_height: float) -> Envelope:
    """Compute the buildable box for a lot.

    Args:
        lot: Lot width and depth in meters
        setbacks: Front/rear/left/right setbacks in meters
        max_height: Height limit in meters

    Returns an Envelope whose width, depth and height are at least
    ENVELOPE_MIN_DIMENSION. The horizontal center is taken from the raw
    setbacks, so an over-constrained envelope can sit off-center on the lot.
    """
    raw_width = lot.width - setbacks.left - setbacks.right
    raw_depth = lot.depth - setbacks.front - setbacks.rear
    width = max(ENVELOPE_MIN_DIMENSION, raw_width)
    depth = max(ENVELOPE_MIN_DIMENSION, raw_depth)
    height = max(ENVELOPE_MIN_DIMENSION, max_height)

    if raw_width < ENVELOPE_MIN_DIMENSION or raw_depth < ENVELOPE_MIN_DIMENSION:
        logger.debug(
            "Setbacks consume the lot (%.2f x %.2f); envelope floored to %.2f x %.2f",
            lot.width, lot.depth, width, depth,
        )

    # Lot spans x in [-w/2, w/2] and z in [-d/2, d/2]. The box runs from
    # -w/2 + left to w/2 - right, and from -d/2 + rear to d/2 - front.
    center = Point3D(
        x=(setbacks.left - setbacks.right) / 2,
        y=height / 2,
        z=(setbacks.rear - setbacks.front) / 2,
    )
    return Envelope(width=width, depth=depth, height=height, center=center)


def compute_lot_outline(lot: LotSpec) -> LotOutline:
    """The lot rectangle on the ground plane, centered on the origin."""
    half_w = lot.width / 2
    half_d = lot.depth / 2
    corners = [
        (-half_w, -half_d),
        (half_w, -half_d),
        (half_w, half_d),
        (-half_w, half_d),
    ]
    geometry = {
        "type": "Polygon",
        "coordinates": [[list(c) for c in corners + corners[:1]]],
    }
    return LotOutline(
        width=lot.width, depth=lot.depth, corners=corners, geometry=geometry,
    )


def envelope_bounds(envelope: Envelope) -> tuple[float, float, float, float]:
    """Ground-plane extents of the box as (min_x, min_z, max_x, max_z)."""
    cx, cz = envelope.center.x, envelope.center.z
    return (
        cx - envelope.width / 2,
        cz - envelope.depth / 2,
        cx + envelope.width / 2,
        cz + envelope.depth / 2,
    )


def envelope_footprint(envelope: Envelope) -> Polygon:
    """Ground footprint of the envelope as a shapely polygon in (x, z)."""
    return box(*envelope_bounds(envelope))

