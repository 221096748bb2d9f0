"""Path commands, curve orders and exact Bezier order promotion.

Two tagged unions live here:

- ``SegmentCommand`` — what a document path streams: ``MoveTo``, ``LineTo``,
  ``QuadTo``, ``CubicTo``, ``Close``.
- ``NormalizedSegment`` — a drawing segment as held by a primitive builder:
  ``Line``, ``Quad``, ``Cube``. Its start point is implicit (the previous tail).

Promotion re-expresses a lower-degree segment as an algebraically identical
higher-degree Bezier. Line→quad, line→cubic and quad→cubic are exact; there is
no demotion.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Union

from svg2geo.errors import OrderInvariantError


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Point:
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Point:
        return Point(self.x / k, self.y / k)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


# ── Document path commands ────────────────────────────────────────────────


@dataclass(frozen=True)
class MoveTo:
    p: Point


@dataclass(frozen=True)
class LineTo:
    p: Point


@dataclass(frozen=True)
class QuadTo:
    c: Point
    p: Point


@dataclass(frozen=True)
class CubicTo:
    c1: Point
    c2: Point
    p: Point


@dataclass(frozen=True)
class Close:
    pass


SegmentCommand = Union[MoveTo, LineTo, QuadTo, CubicTo, Close]


def map_command(cmd: SegmentCommand, fn: Callable[[Point], Point]) -> SegmentCommand:
    """Apply ``fn`` to every point of a command (used for affine transforms)."""
    if isinstance(cmd, MoveTo):
        return MoveTo(fn(cmd.p))
    if isinstance(cmd, LineTo):
        return LineTo(fn(cmd.p))
    if isinstance(cmd, QuadTo):
        return QuadTo(fn(cmd.c), fn(cmd.p))
    if isinstance(cmd, CubicTo):
        return CubicTo(fn(cmd.c1), fn(cmd.c2), fn(cmd.p))
    return cmd


# ── Curve order ───────────────────────────────────────────────────────────


class CurveOrder(enum.IntEnum):
    """Minimal Bezier degree able to hold a primitive's segments.

    The value is the number of points a segment contributes after promotion.
    """

    LINE = 1
    QUAD = 2
    CUBE = 3

    @property
    def arity(self) -> int:
        return int(self)

    @property
    def basis_order(self) -> int:
        """Bezier basis order in the geo sense (degree + 1)."""
        return int(self) + 1


# ── Normalized segments ───────────────────────────────────────────────────


@dataclass(frozen=True)
class Line:
    end: Point


@dataclass(frozen=True)
class Quad:
    ctrl: Point
    end: Point


@dataclass(frozen=True)
class Cube:
    ctrl1: Point
    ctrl2: Point
    end: Point


NormalizedSegment = Union[Line, Quad, Cube]

_R13 = 1.0 / 3.0
_R23 = 2.0 / 3.0


def to_quad(seg: NormalizedSegment, p0: Point) -> tuple[Point, Point]:
    """Quadratic form of ``seg`` starting at ``p0``: (control, end)."""
    if isinstance(seg, Line):
        return ((p0 + seg.end) / 2.0, seg.end)
    if isinstance(seg, Quad):
        return (seg.ctrl, seg.end)
    raise OrderInvariantError("Can't convert cube to quad")


def to_cube(seg: NormalizedSegment, p0: Point) -> tuple[Point, Point, Point]:
    """Cubic form of ``seg`` starting at ``p0``: (control1, control2, end)."""
    if isinstance(seg, Line):
        d = seg.end - p0
        return (p0 + d * _R13, p0 + d * _R23, seg.end)
    if isinstance(seg, Quad):
        return (
            p0 + (seg.ctrl - p0) * _R23,
            seg.end + (seg.ctrl - seg.end) * _R23,
            seg.end,
        )
    return (seg.ctrl1, seg.ctrl2, seg.end)


def promote(seg: NormalizedSegment, p0: Point, order: CurveOrder) -> tuple[Point, ...]:
    """Points ``seg`` contributes to a primitive of ``order``, start excluded."""
    if order == CurveOrder.LINE:
        if not isinstance(seg, Line):
            raise OrderInvariantError(f"Expected a line, got {type(seg).__name__}")
        return (seg.end,)
    if order == CurveOrder.QUAD:
        return to_quad(seg, p0)
    return to_cube(seg, p0)
