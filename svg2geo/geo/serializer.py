"""Houdini .geo JSON writer.

The geo format is a JSON array of alternating keys and values. Points live in
a single pool; each primitive references a contiguous vertex range of it.
"""

from __future__ import annotations

import json
from typing import Any

import numpy as np

from svg2geo.engine.builder import Primitive
from svg2geo.engine.segments import CurveOrder
from svg2geo.geo import GEO_FILE_VERSION


def vertex_ranges(prims: list[Primitive]) -> list[range]:
    """Contiguous vertex range of each primitive in the shared point pool."""
    ranges: list[range] = []
    offset = 0
    for prim in prims:
        ranges.append(range(offset, offset + len(prim.points)))
        offset += len(prim.points)
    return ranges


def point_pool(prims: list[Primitive]) -> np.ndarray:
    """All primitive points concatenated in primitive order, as Nx3 float32 (z = 0)."""
    coords = [(p.x, p.y, 0.0) for prim in prims for p in prim.points]
    if not coords:
        return np.empty((0, 3), dtype=np.float32)
    return np.asarray(coords, dtype=np.float32)


def knots(prim: Primitive) -> list[int]:
    """Uniform knot vector: one knot per span boundary."""
    step = prim.order.basis_order - 1
    n = len(prim.points) if prim.closed else len(prim.points) - 1
    return list(range(n // step + 1))


def primitive_value(prim: Primitive, vertices: range) -> list[Any]:
    if prim.order == CurveOrder.LINE:
        return [
            ["type", "PolygonCurve_run"],
            ["startvertex", vertices.start, "nprimitives", 1, "nvertices", [len(vertices)]],
        ]
    return [
        ["type", "BezierCurve"],
        [
            "vertex",
            list(vertices),
            "closed",
            prim.closed,
            "basis",
            ["type", "Bezier", "order", prim.order.basis_order, "knots", knots(prim)],
        ],
    ]


def _point_attribute(pool: np.ndarray) -> list[Any]:
    return [
        ["scope", "public", "type", "numeric", "name", "P", "options", {"type": {"type": "string", "value": "point"}}],
        [
            "size", 3,
            "storage", "fpreal32",
            "defaults", ["size", 1, "storage", "fpreal64", "values", [0]],
            "values", ["size", 3, "storage", "fpreal32", "tuples", pool.tolist()],
        ],
    ]


def _name_attribute(prims: list[Primitive]) -> list[Any]:
    # String attributes store a table of unique strings plus one index per primitive
    strings: list[str] = []
    lookup: dict[str, int] = {}
    indices: list[int] = []
    for prim in prims:
        if prim.identifier not in lookup:
            lookup[prim.identifier] = len(strings)
            strings.append(prim.identifier)
        indices.append(lookup[prim.identifier])
    return [
        ["scope", "public", "type", "string", "name", "name", "options", {}],
        [
            "size", 1,
            "storage", "int32",
            "strings", strings,
            "indices", ["size", 1, "storage", "int32", "arrays", [indices]],
        ],
    ]


def build_geo(
    prims: list[Primitive],
    file_version: str = GEO_FILE_VERSION,
    emit_names: bool = True,
) -> list[Any]:
    """Build the geo value tree for a list of primitives."""
    pool = point_pool(prims)
    point_count = len(pool)
    ranges = vertex_ranges(prims)

    attributes: list[Any] = ["pointattributes", [_point_attribute(pool)]]
    if emit_names and prims:
        attributes += ["primitiveattributes", [_name_attribute(prims)]]

    return [
        "fileversion", file_version,
        "hasindex", False,
        "pointcount", point_count,
        "vertexcount", point_count,
        "primitivecount", len(prims),
        "info", {},
        "topology", ["pointref", ["indices", list(range(point_count))]],
        "attributes", attributes,
        "primitives", [primitive_value(p, r) for p, r in zip(prims, ranges)],
    ]


def dumps(value: Any) -> str:
    """Render a value tree as compact JSON."""
    return json.dumps(value, separators=(",", ":"))
