from __future__ import annotations

from envelope.models.schemas import (
    DesignParameters,
    Envelope,
    LotOutline,
    LotSpec,
    Setbacks,
    YieldMetrics,
)

__all__ = [
    "DesignParameters", "Envelope", "LotOutline", "LotSpec", "Setbacks",
    "YieldMetrics",
]
