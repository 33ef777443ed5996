#!/usr/bin/env python3
"""
Check the Buildable Envelope Engine against reference lots.

Runs each scenario and compares the envelope and yield against expected
values. Can be run against the live API or directly importing the engine.

Usage:
    # Against live API:
    python3 scripts/check_scenarios.py --api http://localhost:8000

    # Direct import (no server needed):
    python3 scripts/check_scenarios.py
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from datetime import datetime

# Add backend to path for direct import mode
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.join(os.path.dirname(SCRIPT_DIR), "backend")
sys.path.insert(0, BACKEND_DIR)

# ──────────────────────────────────────────────────────────────────
# SCENARIOS
# ──────────────────────────────────────────────────────────────────

SCENARIOS = [
    {
        "name": "Reference lot (control panel defaults)",
        "parameters": {
            "lot_width": 25, "lot_depth": 40, "max_height": 12,
            "front": 6, "rear": 8, "left": 3, "right": 3,
        },
        "expect": {
            "envelope": {"width": 19, "depth": 26, "height": 12},
            "yield": {"footprint_area": 494.0, "volume": 5928.0, "estimated_units": 23},
        },
    },
    {
        "name": "Setbacks consume the lot",
        "parameters": {
            "lot_width": 10, "lot_depth": 10, "max_height": 5,
            "front": 10, "rear": 10, "left": 10, "right": 10,
        },
        "expect": {
            "envelope": {"width": 0.1, "depth": 0.1, "height": 5},
            "yield": {"footprint_area": 0.0, "volume": 0.0, "estimated_units": 0},
        },
    },
    {
        "name": "No setbacks",
        "parameters": {
            "lot_width": 40, "lot_depth": 60, "max_height": 20,
            "front": 0, "rear": 0, "left": 0, "right": 0,
        },
        "expect": {
            "envelope": {"width": 40, "depth": 60, "height": 20},
            "yield": {"footprint_area": 2400.0, "volume": 48000.0, "estimated_units": 192},
        },
    },
    {
        "name": "Sub-floor sliver (envelope 0.1 m, yield 0.05 m)",
        "parameters": {
            "lot_width": 10, "lot_depth": 40, "max_height": 12,
            "front": 0, "rear": 0, "left": 5, "right": 4.95,
        },
        "expect": {
            "envelope": {"width": 0.1, "depth": 40, "height": 12},
            "yield": {"footprint_area": 2.0, "volume": 24.0, "estimated_units": 0},
        },
    },
]

TOLERANCE = 1e-6


# ──────────────────────────────────────────────────────────────────
# DIRECT MODE
# ──────────────────────────────────────────────────────────────────

def run_direct_analysis(parameters: dict) -> dict:
    from envelope.models.schemas import DesignParameters
    from envelope.services.display import format_metrics
    from envelope.services.parameters import analyze_parameters

    analysis = analyze_parameters(DesignParameters(**parameters))
    return {
        "envelope": analysis.envelope.model_dump(),
        "yield": analysis.yield_metrics.model_dump(),
        "display": format_metrics(analysis.yield_metrics),
    }


# ──────────────────────────────────────────────────────────────────
# API MODE
# ──────────────────────────────────────────────────────────────────

async def run_api_analysis(parameters: dict, api_base: str) -> dict:
    import httpx
    async with httpx.AsyncClient(timeout=30) as client:
        resp = await client.post(f"{api_base}/api/envelope", json=parameters)
        if resp.status_code != 200:
            return {"error": f"API returned {resp.status_code}: {resp.text[:500]}"}
        body = resp.json()
        return {
            "envelope": body["envelope"],
            "yield": body["yield_metrics"],
            "display": body["display"],
        }


# ──────────────────────────────────────────────────────────────────
# OUTPUT FORMATTING
# ──────────────────────────────────────────────────────────────────

def compare(expected: dict, actual: dict) -> list[str]:
    mismatches = []
    for section, fields in expected.items():
        for key, want in fields.items():
            got = actual[section][key]
            if abs(got - want) > TOLERANCE:
                mismatches.append(f"{section}.{key}: expected {want}, got {got}")
    return mismatches


def format_result(scenario: dict, result: dict, mismatches: list[str]) -> str:
    lines = []
    lines.append(f"\n{'='*70}")
    lines.append(f"SCENARIO: {scenario['name']}")
    lines.append(f"{'='*70}")

    if "error" in result:
        lines.append(f"  ERROR: {result['error']}")
        return "\n".join(lines)

    p = scenario["parameters"]
    lines.append(f"  Lot:       {p['lot_width']}m × {p['lot_depth']}m, max height {p['max_height']}m")
    lines.append(
        f"  Setbacks:  front {p['front']}, rear {p['rear']}, "
        f"left {p['left']}, right {p['right']}"
    )

    env = result["envelope"]
    c = env["center"]
    lines.append(f"\n  ENVELOPE:")
    lines.append(f"    Size:    {env['width']:g} × {env['depth']:g} × {env['height']:g} m")
    lines.append(f"    Center:  ({c['x']:g}, {c['y']:g}, {c['z']:g})")

    d = result["display"]
    lines.append(f"\n  YIELD:")
    lines.append(f"    Footprint:  {d['footprint_area']}")
    lines.append(f"    Volume:     {d['volume']}")
    lines.append(f"    Units:      {d['estimated_units']}")

    lines.append(f"\n  CHECK:")
    if mismatches:
        for m in mismatches:
            lines.append(f"    [x] {m}")
    else:
        lines.append("    [ok] matches expected values")

    return "\n".join(lines)


# ──────────────────────────────────────────────────────────────────
# MAIN
# ──────────────────────────────────────────────────────────────────

async def main():
    parser = argparse.ArgumentParser(description="Check the envelope engine against reference lots")
    parser.add_argument("--api", default=None, help="API base URL (e.g., http://localhost:8000)")
    parser.add_argument("--scenarios", nargs="*", type=int, help="Run specific scenario numbers (1-indexed)")
    args = parser.parse_args()

    print(f"\nBuildable Envelope Engine Check")
    print(f"Date: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"Mode: {'API' if args.api else 'Direct Import'}")
    if args.api:
        print(f"API:  {args.api}")

    to_run = SCENARIOS
    if args.scenarios:
        to_run = [SCENARIOS[i-1] for i in args.scenarios if 1 <= i <= len(SCENARIOS)]

    results = []
    for i, scenario in enumerate(to_run, 1):
        print(f"\n>>> Running scenario {i}/{len(to_run)}: {scenario['name']}...")
        if args.api:
            result = await run_api_analysis(scenario["parameters"], args.api)
        else:
            result = run_direct_analysis(scenario["parameters"])
        mismatches = [] if "error" in result else compare(scenario["expect"], result)
        print(format_result(scenario, result, mismatches))
        ok = "error" not in result and not mismatches
        results.append({"scenario": scenario["name"], "ok": ok})

    print(f"\n{'='*70}")
    print("SUMMARY")
    print(f"{'='*70}")
    passed = sum(1 for r in results if r["ok"])
    print(f"  Passed: {passed}/{len(results)}")
    for r in results:
        if not r["ok"]:
            print(f"    - {r['scenario']}")
    print()
    return 0 if passed == len(results) else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
