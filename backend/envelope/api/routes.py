from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Query

from envelope.engine.massing import build_envelope_mesh
from envelope.models.schemas import (
    DesignParameters, EnvelopeResponse, ParameterBounds, ParameterRequest,
)
from envelope.services.display import dimension_labels, format_metrics
from envelope.services.parameters import (
    ParameterSource, analyze_parameters, defaults_from_settings, out_of_bounds,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _resolve_parameters(request: ParameterRequest) -> DesignParameters:
    """Overlay the provided fields on the configured defaults."""
    source = ParameterSource(defaults_from_settings())
    return source.update(**request.model_dump(exclude_none=True))


def _build_response(params: DesignParameters) -> EnvelopeResponse:
    analysis = analyze_parameters(params)
    warnings = out_of_bounds(params)
    if warnings:
        logger.warning("Parameters outside control ranges: %s", ", ".join(warnings))

    return EnvelopeResponse(
        **analysis.model_dump(),
        mesh=build_envelope_mesh(analysis.envelope),
        labels=dimension_labels(params.lot),
        display=format_metrics(analysis.yield_metrics),
        warnings=warnings,
    )


@router.get("/defaults", response_model=DesignParameters)
async def get_defaults():
    """Initial control panel values."""
    return defaults_from_settings()


@router.get("/bounds", response_model=ParameterBounds)
async def get_bounds():
    """Slider ranges. Values outside them are still accepted."""
    return ParameterBounds()


@router.post("/envelope", response_model=EnvelopeResponse)
async def compute_envelope_analysis(request: ParameterRequest):
    """Compute envelope, lot outline and yield for a parameter set."""
    return _build_response(_resolve_parameters(request))


@router.get("/envelope", response_model=EnvelopeResponse)
async def compute_envelope_analysis_query(
    lot_width: Optional[float] = Query(None, description="Lot width (m)"),
    lot_depth: Optional[float] = Query(None, description="Lot depth (m)"),
    max_height: Optional[float] = Query(None, description="Max building height (m)"),
    front: Optional[float] = Query(None, description="Front setback (m)"),
    rear: Optional[float] = Query(None, description="Rear setback (m)"),
    left: Optional[float] = Query(None, description="Left setback (m)"),
    right: Optional[float] = Query(None, description="Right setback (m)"),
):
    request = ParameterRequest(
        lot_width=lot_width, lot_depth=lot_depth, max_height=max_height,
        front=front, rear=rear, left=left, right=right,
    )
    return _build_response(_resolve_parameters(request))
