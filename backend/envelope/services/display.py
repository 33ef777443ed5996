"""
Display strings for the yield panel and dimension captions.
"""

from __future__ import annotations

from envelope.models.schemas import DimensionLabel, LotSpec, Point3D, YieldMetrics

LABEL_OFFSET_M = 2.0  # caption distance outside the lot edge


def format_dimension(value: float) -> str:
    """Meters as a caption: 25 -> "25m", 12.5 -> "12.5m"."""
    if float(value).is_integer():
        return f"{int(value)}m"
    return f"{value:g}m"


def format_metrics(metrics: YieldMetrics) -> dict[str, str]:
    """Area and volume to one decimal place, units as a plain integer."""
    return {
        "footprint_area": f"{metrics.footprint_area:.1f} m²",
        "volume": f"{metrics.volume:.1f} m³",
        "estimated_units": str(metrics.estimated_units),
    }


def dimension_labels(lot: LotSpec) -> list[DimensionLabel]:
    """Caption anchors for the lot edges: depth on the right side, width at the front."""
    return [
        DimensionLabel(
            text=format_dimension(lot.depth),
            position=Point3D(x=lot.width / 2 + LABEL_OFFSET_M, y=0, z=0),
            rotation_y=90,
        ),
        DimensionLabel(
            text=format_dimension(lot.width),
            position=Point3D(x=0, y=0, z=lot.depth / 2 + LABEL_OFFSET_M),
        ),
    ]
