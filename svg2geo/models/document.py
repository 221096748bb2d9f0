"""Parsed SVG document tree — what the path flattener walks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from svg2geo.engine.segments import SegmentCommand


def identity() -> NDArray[np.float64]:
    return np.identity(3)


@dataclass
class Stroke:
    """Resolved stroke presentation attributes."""

    width: float = 1.0
    linecap: str = "butt"
    linejoin: str = "miter"
    miterlimit: float = 4.0


@dataclass
class PathNode:
    id: str = ""
    # Own transform (3x3 affine); composed after the enclosing groups'
    transform: NDArray[np.float64] = field(default_factory=identity)
    visible: bool = True
    # Resolved fill paint, None when the fill is "none"
    fill: str | None = "black"
    stroke: Stroke | None = None
    segments: list[SegmentCommand] = field(default_factory=list)
    # Element the path was read from (path, rect, circle, ...)
    source_tag: str = "path"


@dataclass
class ImageNode:
    id: str = ""


@dataclass
class TextNode:
    id: str = ""
    text: str = ""


@dataclass
class Group:
    id: str = ""
    transform: NDArray[np.float64] = field(default_factory=identity)
    children: list[Node] = field(default_factory=list)


Node = Union[Group, PathNode, ImageNode, TextNode]


@dataclass
class Document:
    """Represents a parsed SVG file."""

    root: Group = field(default_factory=Group)
    width: float = 0.0
    height: float = 0.0
    viewbox: tuple[float, float, float, float] | None = None

    @property
    def num_paths(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            group = stack.pop()
            for child in group.children:
                if isinstance(child, Group):
                    stack.append(child)
                elif isinstance(child, PathNode):
                    count += 1
        return count
