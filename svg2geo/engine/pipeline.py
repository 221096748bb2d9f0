"""Conversion orchestrator — parse, flatten, build primitives, serialize."""

from __future__ import annotations

import logging
import time
from typing import Any

from svg2geo.engine.builder import build_primitives
from svg2geo.engine.config import ConversionConfig
from svg2geo.engine.context import ConversionContext
from svg2geo.engine.flatten import flatten_document
from svg2geo.geo.serializer import build_geo, dumps
from svg2geo.svg.parser import parse_svg

logger = logging.getLogger(__name__)


class Converter:
    """Runs the SVG → geo stages in order. Errors propagate to the caller."""

    def __init__(self, config: ConversionConfig | None = None) -> None:
        self.config = config or ConversionConfig()

    def run(self, data: bytes | str) -> ConversionContext:
        """Parse ``data`` and build its primitives."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        ctx = ConversionContext(svg_raw=data)
        start = time.perf_counter()

        t0 = time.perf_counter()
        ctx.document = parse_svg(data)
        ctx.timings["parse"] = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        ctx.subpaths = flatten_document(ctx.document.root, self.config)
        ctx.timings["flatten"] = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        for sp in ctx.subpaths:
            ctx.primitives.extend(build_primitives(sp.segments, sp.identifier))
        ctx.timings["build"] = (time.perf_counter() - t0) * 1000

        for stage, elapsed in ctx.timings.items():
            logger.debug("  %s completed in %.1fms", stage, elapsed)

        logger.info(
            "Conversion complete: %d sub-paths → %d primitives, %d points in %.0fms",
            len(ctx.subpaths),
            ctx.num_primitives,
            ctx.point_count,
            (time.perf_counter() - start) * 1000,
        )
        return ctx

    def to_geo(self, ctx: ConversionContext) -> list[Any]:
        return build_geo(
            ctx.primitives,
            file_version=self.config.geo_file_version,
            emit_names=self.config.emit_names,
        )

    def convert(self, data: bytes | str) -> str:
        """SVG in, geo JSON text out."""
        return dumps(self.to_geo(self.run(data)))


def convert_svg(data: bytes | str, config: ConversionConfig | None = None) -> str:
    """Convenience wrapper around ``Converter(config).convert(data)``."""
    return Converter(config).convert(data)
