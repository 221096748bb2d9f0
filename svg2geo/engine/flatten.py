"""Path flattener — walks the document tree into a flat list of sub-paths.

The walk is an explicit work list of ``(group, inherited id, inherited
transform)``, so document nesting depth never touches the call stack.

Identifier policy: the nearest non-empty identifier wins (a path's own id,
else its closest ancestor group's id).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from svg2geo.engine.config import ConversionConfig
from svg2geo.engine.segments import SegmentCommand
from svg2geo.models.document import Group, PathNode
from svg2geo.svg.stroke import stroke_outline
from svg2geo.utils.geometry import linear_scale, transform_commands

logger = logging.getLogger(__name__)

FILL = "fill"
STROKE = "stroke"


@dataclass
class SubPath:
    """One logical outline to be turned into primitives."""

    identifier: str
    segments: list[SegmentCommand] = field(default_factory=list)
    # FILL (the path's own outline) or STROKE (its stroke outline)
    kind: str = FILL


def flatten_document(
    root: Group,
    config: ConversionConfig | None = None,
    transform: NDArray[np.float64] | None = None,
) -> list[SubPath]:
    """Collect fill and stroke sub-paths of every visible path under ``root``.

    Order is deterministic: a group's own paths come first, then its
    sub-groups in document order.
    """
    config = config or ConversionConfig()
    base = np.identity(3) if transform is None else transform

    subpaths: list[SubPath] = []
    stack: list[tuple[Group, str, NDArray[np.float64]]] = [(root, root.id, base)]

    while stack:
        group, inherited_id, inherited = stack.pop()
        matrix = inherited @ group.transform

        pending: list[tuple[Group, str, NDArray[np.float64]]] = []
        for child in group.children:
            if isinstance(child, Group):
                pending.append((child, child.id or inherited_id, matrix))
            elif isinstance(child, PathNode):
                subpaths.extend(flatten_path(child, inherited_id, matrix, config))
            # images and text contribute no geometry

        stack.extend(reversed(pending))

    logger.debug("Flattened %d sub-paths", len(subpaths))
    return subpaths


def flatten_path(
    path: PathNode,
    inherited_id: str,
    matrix: NDArray[np.float64],
    config: ConversionConfig,
) -> list[SubPath]:
    """Fill and/or stroke sub-paths of a single path node."""
    if not path.visible:
        return []

    identifier = path.id or inherited_id
    matrix = matrix @ path.transform
    segments = transform_commands(path.segments, matrix)

    out: list[SubPath] = []
    if path.fill is not None:
        out.append(SubPath(identifier=identifier, segments=segments, kind=FILL))

    if path.stroke is not None:
        outline = stroke_outline(
            segments,
            path.stroke,
            width_scale=config.stroke_width_scale * linear_scale(matrix),
            samples_per_curve=config.stroke_samples_per_curve,
            quad_segs=config.stroke_quad_segs,
        )
        if outline:
            out.append(SubPath(identifier=identifier, segments=outline, kind=STROKE))
        else:
            logger.debug("Stroke of %r paints nothing", identifier)

    return out
