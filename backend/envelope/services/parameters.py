"""
Parameter source for an envelope session.

Holds the five independent inputs (lot width, lot depth, max height and the
four setbacks) and recomputes the envelope and yield from scratch whenever
asked. Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from typing import Optional

from envelope.config import Settings, settings
from envelope.engine.geometry import compute_envelope, compute_lot_outline
from envelope.engine.yields import compute_yield
from envelope.models.schemas import (
    DesignParameters, EnvelopeAnalysis, ParameterBounds,
)

logger = logging.getLogger(__name__)

PARAMETER_NAMES = tuple(DesignParameters.model_fields)
SETBACK_NAMES = ("front", "rear", "left", "right")


def defaults_from_settings(config: Optional[Settings] = None) -> DesignParameters:
    """Build the default parameter set from configuration."""
    config = config or settings
    return DesignParameters(
        lot_width=config.default_lot_width,
        lot_depth=config.default_lot_depth,
        max_height=config.default_max_height,
        front=config.default_front_setback,
        rear=config.default_rear_setback,
        left=config.default_left_setback,
        right=config.default_right_setback,
    )


def analyze_parameters(params: DesignParameters) -> EnvelopeAnalysis:
    """Run both calculators on one parameter set."""
    lot = params.lot
    setbacks = params.setbacks
    return EnvelopeAnalysis(
        parameters=params,
        lot_outline=compute_lot_outline(lot),
        envelope=compute_envelope(lot, setbacks, params.max_height),
        yield_metrics=compute_yield(lot, setbacks, params.max_height),
    )


def out_of_bounds(
    params: DesignParameters, bounds: Optional[ParameterBounds] = None,
) -> list[str]:
    """Names of parameters outside the control panel ranges.

    The engine accepts them regardless; this is for user-facing messaging.
    """
    bounds = bounds or ParameterBounds()
    flagged = []
    if not bounds.lot_width.contains(params.lot_width):
        flagged.append("lot_width")
    if not bounds.lot_depth.contains(params.lot_depth):
        flagged.append("lot_depth")
    if not bounds.max_height.contains(params.max_height):
        flagged.append("max_height")
    for name in SETBACK_NAMES:
        if not bounds.setback.contains(getattr(params, name)):
            flagged.append(name)
    return flagged


class ParameterSource:
    """Current inputs for one session, seeded from an explicit default set."""

    def __init__(self, defaults: Optional[DesignParameters] = None):
        self._defaults = defaults or DesignParameters()
        self._current = self._defaults

    @property
    def defaults(self) -> DesignParameters:
        return self._defaults

    @property
    def current(self) -> DesignParameters:
        return self._current

    def update(self, **changes: float) -> DesignParameters:
        """Apply parameter changes. Unknown names raise ValueError."""
        unknown = sorted(set(changes) - set(PARAMETER_NAMES))
        if unknown:
            raise ValueError(f"Unknown parameter(s): {', '.join(unknown)}")
        self._current = DesignParameters(**{**self._current.model_dump(), **changes})
        logger.debug("Parameters updated: %s", changes)
        return self._current

    def reset(self) -> DesignParameters:
        self._current = self._defaults
        return self._current

    def analyze(self) -> EnvelopeAnalysis:
        return analyze_parameters(self._current)
