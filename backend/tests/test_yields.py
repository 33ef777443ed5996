"""Tests for the yield calculator."""

from __future__ import annotations

import math

import pytest

from envelope.engine.geometry import compute_envelope
from envelope.engine.yields import (
    VOLUME_PER_UNIT_M3,
    compute_yield,
    effective_dimensions,
)
from envelope.models.schemas import LotSpec, Setbacks


def _make_lot(width: float = 25, depth: float = 40) -> LotSpec:
    return LotSpec(width=width, depth=depth)


def _make_setbacks(
    front: float = 6, rear: float = 8, left: float = 3, right: float = 3,
) -> Setbacks:
    return Setbacks(front=front, rear=rear, left=left, right=right)


class TestReferenceScenarios:
    """Known lots with hand-checked yields."""

    def test_reference_lot(self):
        lot, setbacks = _make_lot(), _make_setbacks()
        assert effective_dimensions(lot, setbacks) == (19, 26)
        result = compute_yield(lot, setbacks, 12)
        assert result.footprint_area == 494.0
        assert result.volume == 5928.0
        assert result.estimated_units == 23

    def test_setbacks_consume_lot(self):
        result = compute_yield(
            _make_lot(10, 10), _make_setbacks(10, 10, 10, 10), 5,
        )
        assert result.footprint_area == 0.0
        assert result.volume == 0.0
        assert result.estimated_units == 0

    def test_no_setbacks_full_lot(self):
        result = compute_yield(_make_lot(37, 83), _make_setbacks(0, 0, 0, 0), 9)
        assert result.footprint_area == 37 * 83


class TestFootprint:
    """Footprint area and the zero floor."""

    def test_sliver_reports_true_width(self):
        """A 0.05 m strip yields 0.05 m of width even though the box shows 0.1 m."""
        lot, setbacks = _make_lot(10, 40), _make_setbacks(front=0, rear=0, left=5, right=4.95)
        result = compute_yield(lot, setbacks, 12)
        env = compute_envelope(lot, setbacks, 12)
        assert env.width == 0.1
        assert result.footprint_area / 40 == pytest.approx(0.05)

    def test_one_axis_consumed_zeroes_area(self):
        result = compute_yield(_make_lot(10, 40), _make_setbacks(0, 0, 6, 6), 12)
        assert result.footprint_area == 0

    def test_negative_lot_does_not_raise(self):
        result = compute_yield(_make_lot(-10, -10), _make_setbacks(), 12)
        assert result.footprint_area == 0
        assert result.estimated_units == 0

    @pytest.mark.parametrize("width,depth,front,rear,left,right", [
        (25, 40, 6, 8, 3, 3),
        (10, 10, 30, 30, 30, 30),
        (100, 150, 0, 0, 0, 0),
        (12.5, 18.25, 9, 9.1, 6, 6.4),
        (0, 0, 0, 0, 0, 0),
    ])
    def test_area_formula(self, width, depth, front, rear, left, right):
        result = compute_yield(
            _make_lot(width, depth), _make_setbacks(front, rear, left, right), 10,
        )
        expected = max(0, width - left - right) * max(0, depth - front - rear)
        assert result.footprint_area >= 0
        assert result.footprint_area == expected


class TestVolumeAndUnits:
    """Volume from raw height, units from the volume heuristic."""

    def test_volume_uses_raw_height(self):
        """No 0.1 floor on height here, unlike the envelope box."""
        result = compute_yield(_make_lot(), _make_setbacks(), 0.05)
        assert result.volume == 494.0 * 0.05

    def test_zero_height_zero_volume(self):
        result = compute_yield(_make_lot(), _make_setbacks(), 0)
        assert result.volume == 0
        assert result.estimated_units == 0

    def test_units_floor_division(self):
        # 10 x 25 footprint, 1 m high -> exactly one unit
        result = compute_yield(_make_lot(10, 25), _make_setbacks(0, 0, 0, 0), 1)
        assert result.volume == VOLUME_PER_UNIT_M3
        assert result.estimated_units == 1

    def test_units_round_down(self):
        result = compute_yield(_make_lot(10, 25), _make_setbacks(0, 0, 0, 0), 1.99)
        assert result.estimated_units == 1

    @pytest.mark.parametrize("height", [3, 7.5, 12, 33.3, 50])
    def test_units_match_volume(self, height):
        result = compute_yield(_make_lot(41, 77), _make_setbacks(5, 7, 2, 4), height)
        assert result.volume == result.footprint_area * height
        assert result.estimated_units == math.floor(result.volume / 250)
        assert isinstance(result.estimated_units, int)

    def test_negative_height_no_negative_units(self):
        result = compute_yield(_make_lot(), _make_setbacks(), -12)
        assert result.volume == -5928.0
        assert result.estimated_units == 0


class TestPurity:
    """Same inputs, same output."""

    def test_repeat_call_identical(self):
        lot, setbacks = _make_lot(27.3, 41.9), _make_setbacks(6.1, 8.7, 3.3, 2.9)
        assert compute_yield(lot, setbacks, 12.4) == compute_yield(lot, setbacks, 12.4)
