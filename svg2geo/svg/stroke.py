"""Stroke outlining — the filled shape a stroked path paints, via shapely buffers.

Each polyline of the path is buffered on its own (contours are not unioned),
and every ring of the resulting polygons becomes a closed ``MoveTo … Close``
run of straight segments.
"""

from __future__ import annotations

import logging

from shapely.geometry import LinearRing, LineString

from svg2geo.engine.segments import Close, LineTo, MoveTo, Point, SegmentCommand
from svg2geo.models.document import Stroke
from svg2geo.utils.geometry import polylines

logger = logging.getLogger(__name__)

# SVG stroke-linecap / stroke-linejoin → shapely buffer styles
_CAP_STYLES = {"butt": "flat", "round": "round", "square": "square"}
_JOIN_STYLES = {"miter": "mitre", "miter-clip": "mitre", "arcs": "round", "round": "round", "bevel": "bevel"}


def stroke_outline(
    commands: list[SegmentCommand],
    stroke: Stroke,
    width_scale: float = 1.0,
    samples_per_curve: int = 16,
    quad_segs: int = 8,
) -> list[SegmentCommand]:
    """Return the outline of ``stroke`` applied to ``commands``.

    Returns an empty list when the stroke paints nothing.
    """
    half = stroke.width * width_scale / 2.0
    if half <= 0:
        return []

    cap = _CAP_STYLES.get(stroke.linecap, "flat")
    join = _JOIN_STYLES.get(stroke.linejoin, "mitre")

    out: list[SegmentCommand] = []
    for pts, closed in polylines(commands, samples_per_curve):
        distinct = {(float(x), float(y)) for x, y in pts}
        if len(distinct) < 2:
            continue
        if closed and len(distinct) >= 3:
            line = LinearRing(pts)
        else:
            line = LineString(pts)
        outline = line.buffer(
            half,
            quad_segs=quad_segs,
            cap_style=cap,
            join_style=join,
            mitre_limit=stroke.miterlimit,
        )
        if outline.is_empty:
            continue
        for polygon in getattr(outline, "geoms", [outline]):
            for ring in [polygon.exterior, *polygon.interiors]:
                out.extend(_ring_commands(list(ring.coords)))

    logger.debug("Stroke outline: %d commands (width %.3g)", len(out), half * 2.0)
    return out


def _ring_commands(coords: list[tuple[float, float]]) -> list[SegmentCommand]:
    # shapely rings repeat their first coordinate at the end
    if len(coords) < 4:
        return []
    cmds: list[SegmentCommand] = [MoveTo(Point(*coords[0]))]
    cmds.extend(LineTo(Point(x, y)) for x, y in coords[1:])
    cmds.append(Close())
    return cmds
