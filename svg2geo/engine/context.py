"""ConversionContext — the state object flowing through one conversion."""

from __future__ import annotations

from dataclasses import dataclass, field

from svg2geo.engine.builder import Primitive
from svg2geo.engine.flatten import SubPath
from svg2geo.models.document import Document


@dataclass
class ConversionContext:
    """Shared state of a single SVG → geo conversion."""

    # Raw input bytes
    svg_raw: bytes = b""
    # Parsed document tree
    document: Document | None = None
    # Fill and stroke outlines, in flattening order
    subpaths: list[SubPath] = field(default_factory=list)
    # Final primitives, in emission order
    primitives: list[Primitive] = field(default_factory=list)
    # Stage name → elapsed milliseconds
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def num_primitives(self) -> int:
        return len(self.primitives)

    @property
    def point_count(self) -> int:
        return sum(len(p.points) for p in self.primitives)
