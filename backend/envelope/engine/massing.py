"""
Envelope mesh for the 3D viewer.

The envelope is always an axis-aligned box, so the mesh is its 8 corners,
12 triangles and 12 edges, in the local meter coordinates (y up) the
viewer uses. Triangles wind counter-clockwise seen from outside the box.
"""

from __future__ import annotations

from shapely.geometry import mapping

from envelope.engine.geometry import envelope_bounds, envelope_footprint
from envelope.models.schemas import Envelope


# Corners 0-3 sit on the ground, 4-7 directly above them.
# Ground order: (min_x, min_z), (max_x, min_z), (max_x, max_z), (min_x, max_z)
BOX_FACES = [
    [0, 1, 2], [0, 2, 3],  # ground, -y
    [4, 6, 5], [4, 7, 6],  # roof, +y
    [0, 5, 1], [0, 4, 5],  # rear, -z
    [3, 2, 6], [3, 6, 7],  # front, +z
    [0, 3, 7], [0, 7, 4],  # left, -x
    [1, 6, 2], [1, 5, 6],  # right, +x
]

BOX_EDGES = [
    (0, 1), (1, 2), (2, 3), (3, 0),
    (0, 4), (1, 5), (2, 6), (3, 7),
    (4, 5), (5, 6), (6, 7), (7, 4),
]


def build_envelope_mesh(envelope: Envelope) -> dict:
    """Compute renderable geometry for an envelope.

    Returns dict with:
        vertices: list of [x, y, z]
        faces: list of [i, j, k] vertex indices, outward facing
        wireframe: list of {"start", "end"} edges
        footprint: GeoJSON polygon of the ground footprint in (x, z)
        center, size: box placement for renderers that draw primitives
    """
    vertices = _box_corners(envelope)
    wireframe = [
        {"start": vertices[a], "end": vertices[b]} for a, b in BOX_EDGES
    ]

    return {
        "vertices": vertices,
        "faces": [list(face) for face in BOX_FACES],
        "wireframe": wireframe,
        "footprint": mapping(envelope_footprint(envelope)),
        "center": [envelope.center.x, envelope.center.y, envelope.center.z],
        "size": [envelope.width, envelope.height, envelope.depth],
    }


def _box_corners(envelope: Envelope) -> list[list[float]]:
    min_x, min_z, max_x, max_z = envelope_bounds(envelope)
    ground = [(min_x, min_z), (max_x, min_z), (max_x, max_z), (min_x, max_z)]
    return (
        [[x, 0, z] for x, z in ground]
        + [[x, envelope.height, z] for x, z in ground]
    )
