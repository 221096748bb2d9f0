"""Conversion configuration — knobs that shape the emitted geometry."""

from __future__ import annotations

from dataclasses import dataclass

from svg2geo.geo import GEO_FILE_VERSION


@dataclass
class ConversionConfig:
    """Controls stroke outlining and the geo header."""

    # Multiplier applied to every stroke width. Fixed at 1.0 for document output.
    stroke_width_scale: float = 1.0

    # Stroke outlining: curved segments are sampled into this many chords
    stroke_samples_per_curve: int = 16
    # Quarter-circle resolution for round joins and caps (shapely quad_segs)
    stroke_quad_segs: int = 8

    # Emit the "name" primitive attribute
    emit_names: bool = True

    geo_file_version: str = GEO_FILE_VERSION
