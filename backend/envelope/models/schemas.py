from __future__ import annotations

from pydantic import BaseModel
from typing import Optional


class LotSpec(BaseModel):
    """Rectangular lot, meters. Zero or negative sizes are clamped downstream."""
    width: float
    depth: float

    model_config = {"frozen": True}


class Setbacks(BaseModel):
    """Inward distances from each lot edge, meters. Front faces +z."""
    front: float = 0
    rear: float = 0
    left: float = 0
    right: float = 0

    model_config = {"frozen": True}


class Point3D(BaseModel):
    x: float
    y: float
    z: float

    model_config = {"frozen": True}


class Envelope(BaseModel):
    """Axis-aligned buildable box. Center is relative to the lot center, y up."""
    width: float
    depth: float
    height: float
    center: Point3D

    model_config = {"frozen": True}


class LotOutline(BaseModel):
    width: float
    depth: float
    corners: list[tuple[float, float]]  # (x, z) on the ground plane
    geometry: dict  # GeoJSON Polygon

    model_config = {"frozen": True}


class YieldMetrics(BaseModel):
    footprint_area: float
    volume: float
    estimated_units: int

    model_config = {"frozen": True}


class DimensionLabel(BaseModel):
    text: str
    position: Point3D
    rotation_y: float = 0


class DesignParameters(BaseModel):
    """The five independent inputs, flattened the way a control panel holds them."""
    lot_width: float = 25
    lot_depth: float = 40
    max_height: float = 12
    front: float = 6
    rear: float = 8
    left: float = 3
    right: float = 3

    model_config = {"frozen": True}

    @property
    def lot(self) -> LotSpec:
        return LotSpec(width=self.lot_width, depth=self.lot_depth)

    @property
    def setbacks(self) -> Setbacks:
        return Setbacks(
            front=self.front, rear=self.rear, left=self.left, right=self.right,
        )


class ParameterRequest(BaseModel):
    """Partial parameter set; missing fields fall back to configured defaults."""
    lot_width: Optional[float] = None
    lot_depth: Optional[float] = None
    max_height: Optional[float] = None
    front: Optional[float] = None
    rear: Optional[float] = None
    left: Optional[float] = None
    right: Optional[float] = None


class Range(BaseModel):
    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class ParameterBounds(BaseModel):
    """Slider ranges of the control panel. Informational only."""
    lot_width: Range = Range(min=10, max=100)
    lot_depth: Range = Range(min=10, max=150)
    setback: Range = Range(min=0, max=30)
    max_height: Range = Range(min=3, max=50)


class EnvelopeAnalysis(BaseModel):
    parameters: DesignParameters
    lot_outline: LotOutline
    envelope: Envelope
    yield_metrics: YieldMetrics


class EnvelopeResponse(EnvelopeAnalysis):
    mesh: Optional[dict] = None  # box geometry for Three.js
    labels: list[DimensionLabel] = []
    display: dict[str, str] = {}
    warnings: list[str] = []
