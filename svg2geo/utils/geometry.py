"""Leaf-node geometry helpers. No engine state."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from svg2geo.engine.segments import (
    Close,
    CubicTo,
    LineTo,
    MoveTo,
    Point,
    QuadTo,
    SegmentCommand,
    map_command,
)


def apply_affine(matrix: NDArray[np.float64], p: Point) -> Point:
    """Map a point through a 3x3 affine matrix (SVG column-vector convention)."""
    x, y, _ = matrix @ np.array([p.x, p.y, 1.0])
    return Point(float(x), float(y))


def is_identity(matrix: NDArray[np.float64]) -> bool:
    return bool(np.allclose(matrix, np.identity(3)))


def transform_commands(commands: list[SegmentCommand], matrix: NDArray[np.float64]) -> list[SegmentCommand]:
    """Apply an affine transform to a command stream.

    Affine maps commute with Bezier evaluation, so mapping control points is exact.
    """
    if is_identity(matrix):
        return list(commands)
    return [map_command(cmd, lambda p: apply_affine(matrix, p)) for cmd in commands]


def linear_scale(matrix: NDArray[np.float64]) -> float:
    """Geometric-mean scale factor of the linear part, used to scale stroke widths."""
    return float(np.sqrt(abs(np.linalg.det(matrix[:2, :2]))))


def bezier_point(control: list[Point] | tuple[Point, ...], t: float) -> Point:
    """Evaluate a Bezier curve of any degree at ``t`` (de Casteljau)."""
    pts = np.array([p.as_tuple() for p in control], dtype=np.float64)
    while len(pts) > 1:
        pts = (1.0 - t) * pts[:-1] + t * pts[1:]
    return Point(float(pts[0, 0]), float(pts[0, 1]))


def sample_bezier(control: list[Point] | tuple[Point, ...], n: int) -> NDArray[np.float64]:
    """Sample ``n`` points at t in (0, 1] — the start point is excluded."""
    pts = np.array([p.as_tuple() for p in control], dtype=np.float64)
    ts = np.linspace(0.0, 1.0, n + 1)[1:, None]
    degree = len(pts) - 1
    out = np.zeros((n, 2))
    # Bernstein form
    coeff = 1.0
    for i, cp in enumerate(pts):
        if i > 0:
            coeff = coeff * (degree - i + 1) / i
        out += coeff * (ts**i) * ((1.0 - ts) ** (degree - i)) * cp
    return out


def polylines(commands: list[SegmentCommand], samples_per_curve: int = 16) -> list[tuple[NDArray[np.float64], bool]]:
    """Flatten a command stream into (points, closed) polylines.

    Closed polylines end with a copy of their first point.
    """
    out: list[tuple[NDArray[np.float64], bool]] = []
    current: list[NDArray[np.float64]] = []
    start = pen = None

    def finish(closed: bool) -> None:
        if current:
            out.append((np.vstack(current), closed))

    for cmd in commands:
        if isinstance(cmd, MoveTo):
            finish(False)
            start = pen = cmd.p
            current = [np.array([[pen.x, pen.y]])]
        elif pen is None:
            continue
        elif isinstance(cmd, LineTo):
            current.append(np.array([[cmd.p.x, cmd.p.y]]))
            pen = cmd.p
        elif isinstance(cmd, QuadTo):
            current.append(sample_bezier((pen, cmd.c, cmd.p), samples_per_curve))
            pen = cmd.p
        elif isinstance(cmd, CubicTo):
            current.append(sample_bezier((pen, cmd.c1, cmd.c2, cmd.p), samples_per_curve))
            pen = cmd.p
        elif isinstance(cmd, Close):
            if pen != start:
                current.append(np.array([[start.x, start.y]]))
            finish(True)
            current = []
            pen = start = None

    finish(False)
    return out
