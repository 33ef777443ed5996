from __future__ import annotations

from envelope.engine.geometry import compute_envelope, compute_lot_outline
from envelope.engine.yields import compute_yield

__all__ = ["compute_envelope", "compute_lot_outline", "compute_yield"]
