"""Basic SVG shapes → path data.

Circles, ellipses and rounded rect corners are written as cubic quarter arcs
(the usual 0.5523 handle length) so no arc commands reach the path reader.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Handle length of a cubic quarter circle: 4/3 * (sqrt(2) - 1)
KAPPA = 0.5522847498307936

SHAPE_TAGS = {"rect", "circle", "ellipse", "line", "polyline", "polygon"}

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_UNITS_RE = re.compile(r"(px|pt)$")


def length(value: str | None, default: float = 0.0) -> float:
    """Parse an SVG length. Unitless and px values only; anything else → default."""
    if value is None:
        return default
    try:
        return float(_UNITS_RE.sub("", value.strip()))
    except ValueError:
        logger.debug("Unsupported length %r, using %g", value, default)
        return default


def shape_to_path_data(tag: str, attrs: dict[str, str]) -> str | None:
    """Path data for a basic shape, or None if the shape renders nothing."""
    if tag == "rect":
        return _rect(attrs)
    if tag == "circle":
        r = length(attrs.get("r"))
        return _ellipse(length(attrs.get("cx")), length(attrs.get("cy")), r, r)
    if tag == "ellipse":
        return _ellipse(
            length(attrs.get("cx")),
            length(attrs.get("cy")),
            length(attrs.get("rx")),
            length(attrs.get("ry")),
        )
    if tag == "line":
        x1, y1 = length(attrs.get("x1")), length(attrs.get("y1"))
        x2, y2 = length(attrs.get("x2")), length(attrs.get("y2"))
        return f"M{x1},{y1} L{x2},{y2}"
    if tag in ("polyline", "polygon"):
        return _poly(attrs.get("points", ""), closed=tag == "polygon")
    return None


def _rect(attrs: dict[str, str]) -> str | None:
    x, y = length(attrs.get("x")), length(attrs.get("y"))
    w, h = length(attrs.get("width")), length(attrs.get("height"))
    if w <= 0 or h <= 0:
        return None

    rx_attr, ry_attr = attrs.get("rx"), attrs.get("ry")
    rx = length(rx_attr) if rx_attr is not None else length(ry_attr)
    ry = length(ry_attr) if ry_attr is not None else rx
    rx = min(max(rx, 0.0), w / 2)
    ry = min(max(ry, 0.0), h / 2)

    if rx == 0 or ry == 0:
        return f"M{x},{y} H{x + w} V{y + h} H{x} Z"

    kx, ky = rx * KAPPA, ry * KAPPA
    r, b = x + w, y + h
    return (
        f"M{x + rx},{y} H{r - rx} "
        f"C{r - rx + kx},{y} {r},{y + ry - ky} {r},{y + ry} "
        f"V{b - ry} "
        f"C{r},{b - ry + ky} {r - rx + kx},{b} {r - rx},{b} "
        f"H{x + rx} "
        f"C{x + rx - kx},{b} {x},{b - ry + ky} {x},{b - ry} "
        f"V{y + ry} "
        f"C{x},{y + ry - ky} {x + rx - kx},{y} {x + rx},{y} Z"
    )


def _ellipse(cx: float, cy: float, rx: float, ry: float) -> str | None:
    if rx <= 0 or ry <= 0:
        return None
    kx, ky = rx * KAPPA, ry * KAPPA
    return (
        f"M{cx + rx},{cy} "
        f"C{cx + rx},{cy + ky} {cx + kx},{cy + ry} {cx},{cy + ry} "
        f"C{cx - kx},{cy + ry} {cx - rx},{cy + ky} {cx - rx},{cy} "
        f"C{cx - rx},{cy - ky} {cx - kx},{cy - ry} {cx},{cy - ry} "
        f"C{cx + kx},{cy - ry} {cx + rx},{cy - ky} {cx + rx},{cy} Z"
    )


def _poly(points_attr: str, closed: bool) -> str | None:
    nums = [float(n) for n in _NUMBER_RE.findall(points_attr)]
    pairs = list(zip(nums[0::2], nums[1::2]))
    if len(pairs) < 2:
        return None
    d = "M" + " L".join(f"{x},{y}" for x, y in pairs)
    return d + " Z" if closed else d
