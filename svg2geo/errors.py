"""Exception hierarchy. Library code raises these; only the CLI catches them."""

from __future__ import annotations


class Svg2GeoError(Exception):
    """Base class for every error raised by svg2geo."""


class SvgParseError(Svg2GeoError, ValueError):
    """The input bytes are not a readable SVG document."""


class OrderInvariantError(Svg2GeoError, AssertionError):
    """A segment reached a target curve order it cannot be promoted to.

    The order ratchet in the primitive builder makes this unreachable, so
    seeing it means a builder was mutated outside its public methods.
    """
