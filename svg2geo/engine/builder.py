"""Primitive builder — turns one sub-path's command stream into uniform-order primitives.

A primitive must use a single Bezier order for all of its segments, so the
builder tracks the highest order seen (a one-way ratchet: lines never demote a
quadratic, and one cubic forces the whole primitive to cubic) and promotes
every segment to that order when it is finalized.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from svg2geo.engine.segments import (
    Close,
    Cube,
    CubicTo,
    CurveOrder,
    Line,
    LineTo,
    MoveTo,
    NormalizedSegment,
    Point,
    Quad,
    QuadTo,
    SegmentCommand,
    promote,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Primitive:
    """One output curve or polyline.

    Closed primitives do not repeat their start point at the end.
    """

    identifier: str
    order: CurveOrder
    closed: bool
    points: tuple[Point, ...]


@dataclass
class PrimitiveBuilder:
    """Accumulates the segments drawn since the last ``MoveTo``."""

    start: Point
    identifier: str = ""
    order: CurveOrder = CurveOrder.LINE
    closed: bool = False
    segments: list[NormalizedSegment] = field(default_factory=list)

    @property
    def tail(self) -> Point:
        if not self.segments:
            return self.start
        return self.segments[-1].end

    def line_to(self, p: Point) -> None:
        self.segments.append(Line(p))

    def quad_to(self, c: Point, p: Point) -> None:
        self.order = max(self.order, CurveOrder.QUAD)
        self.segments.append(Quad(c, p))

    def cubic_to(self, c1: Point, c2: Point, p: Point) -> None:
        self.order = CurveOrder.CUBE
        self.segments.append(Cube(c1, c2, p))

    def close(self) -> None:
        # Z draws the closing edge when the pen is not already back at the start
        if self.segments and self.tail != self.start:
            self.line_to(self.start)
        self.closed = True

    def build(self) -> Primitive:
        points = [self.start]
        for seg in self.segments:
            points.extend(promote(seg, points[-1], self.order))
        if self.closed:
            points.pop()
        return Primitive(
            identifier=self.identifier,
            order=self.order,
            closed=self.closed,
            points=tuple(points),
        )


def build_primitives(commands: Iterable[SegmentCommand], identifier: str = "") -> list[Primitive]:
    """Run the builder state machine over one command stream.

    A builder is finalized on ``Close`` (closed), on the next ``MoveTo`` or at
    the end of the stream (open). Builders without segments are dropped.
    Drawing commands arriving while no builder is active are ignored.
    """
    prims: list[Primitive] = []
    active: PrimitiveBuilder | None = None

    def flush(builder: PrimitiveBuilder) -> None:
        if not builder.segments:
            logger.debug("Dropping degenerate sub-path at (%g, %g)", builder.start.x, builder.start.y)
            return
        prims.append(builder.build())

    for cmd in commands:
        if isinstance(cmd, MoveTo):
            if active is not None:
                flush(active)
            active = PrimitiveBuilder(start=cmd.p, identifier=identifier)
        elif active is None:
            continue
        elif isinstance(cmd, LineTo):
            active.line_to(cmd.p)
        elif isinstance(cmd, QuadTo):
            active.quad_to(cmd.c, cmd.p)
        elif isinstance(cmd, CubicTo):
            active.cubic_to(cmd.c1, cmd.c2, cmd.p)
        elif isinstance(cmd, Close):
            active.close()
            flush(active)
            active = None

    if active is not None:
        flush(active)

    return prims
