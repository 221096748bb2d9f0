"""SVG parser — facade over xml.etree + svgpathtools.

Converts raw SVG bytes → Document tree of groups and paths with resolved
fill, stroke, visibility and transforms. Each path's ``d`` (or basic shape)
becomes a stream of segment commands.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

import numpy as np
from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier, parse_path
from svgpathtools.parser import parse_transform

from svg2geo.engine.segments import Close, CubicTo, LineTo, MoveTo, Point, QuadTo, SegmentCommand
from svg2geo.errors import SvgParseError
from svg2geo.models.document import Document, Group, ImageNode, PathNode, Stroke, TextNode
from svg2geo.svg.shapes import SHAPE_TAGS, length, shape_to_path_data

logger = logging.getLogger(__name__)

GROUP_TAGS = {"svg", "g", "a", "switch"}

# Subtrees that never paint directly (referenced content, metadata)
SKIP_TAGS = {
    "defs", "clipPath", "mask", "pattern", "marker", "symbol", "style", "script",
    "title", "desc", "metadata", "linearGradient", "radialGradient", "filter", "use",
}

# Presentation properties inherited from ancestors
INHERITED = {
    "fill", "stroke", "stroke-width", "stroke-linecap", "stroke-linejoin",
    "stroke-miterlimit", "visibility",
}

_INITIAL_STYLE = {
    "fill": "black",
    "stroke": "none",
    "stroke-width": "1",
    "stroke-linecap": "butt",
    "stroke-linejoin": "miter",
    "stroke-miterlimit": "4",
    "visibility": "visible",
}

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")
# Path command letters never occur inside numbers
_MOVETO_SPLIT_RE = re.compile(r"(?=[Mm])")
_CLOSE_SPLIT_RE = re.compile(r"(?<=[Zz])")


def parse_svg(data: bytes | str) -> Document:
    """Parse raw SVG into a Document. Raises SvgParseError on malformed input."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise SvgParseError(f"Malformed SVG: {e}") from e

    if _strip_ns(root.tag) != "svg":
        raise SvgParseError(f"No <svg> root element found (got <{_strip_ns(root.tag)}>)")

    doc = Document(
        width=length(root.get("width")),
        height=length(root.get("height")),
        viewbox=_viewbox(root.get("viewBox")),
    )
    doc.root = Group(id=root.get("id", ""), transform=_transform(root))

    n_paths = 0
    # (element, parent group, inherited style); explicit stack, no recursion
    stack: list[tuple[ET.Element, Group, dict[str, str]]] = []
    root_style = _resolve_style(root, _INITIAL_STYLE)
    for child in reversed(list(root)):
        stack.append((child, doc.root, root_style))

    while stack:
        elem, parent, inherited = stack.pop()
        tag = _strip_ns(elem.tag) if isinstance(elem.tag, str) else ""

        if not tag or tag in SKIP_TAGS:
            if tag:
                logger.debug("Skipping <%s>", tag)
            continue

        style = _resolve_style(elem, inherited)
        if style.get("display") == "none":
            continue

        if tag in GROUP_TAGS:
            group = Group(id=elem.get("id", ""), transform=_transform(elem))
            parent.children.append(group)
            for child in reversed(list(elem)):
                stack.append((child, group, style))
        elif tag == "path" or tag in SHAPE_TAGS:
            node = _path_node(elem, tag, style)
            if node is not None:
                parent.children.append(node)
                n_paths += 1
        elif tag == "image":
            parent.children.append(ImageNode(id=elem.get("id", "")))
        elif tag == "text":
            parent.children.append(TextNode(id=elem.get("id", ""), text="".join(elem.itertext())))
        else:
            logger.debug("Unsupported element <%s> ignored", tag)

    logger.info("Parsed SVG: %d paths, canvas %.0f×%.0f", n_paths, doc.width, doc.height)
    return doc


def path_commands(d: str) -> list[SegmentCommand]:
    """Convert SVG path data into a segment command stream.

    Sub-paths follow the path data: each ``M``/``m`` (or drawing resumed after
    ``Z``) starts a ``MoveTo`` run, and only runs ended by ``Z``/``z`` get
    ``Close``. Runs that share endpoints stay separate.
    """
    commands: list[SegmentCommand] = []
    pos = 0j
    for i, chunk in enumerate(_subpath_chunks(d)):
        if i and chunk.lstrip()[0] not in "Mm":
            # drawing after Z resumes at the start of the closed sub-path
            chunk = f"M{pos.real!r},{pos.imag!r} {chunk}"
        closed = chunk.rstrip()[-1] in "Zz"
        # relative m resolves against the current point
        path = parse_path(chunk, current_pos=pos)
        if not len(path):
            continue

        commands.append(MoveTo(_point(path.start)))
        for seg in path:
            if isinstance(seg, Line):
                commands.append(LineTo(_point(seg.end)))
            elif isinstance(seg, QuadraticBezier):
                commands.append(QuadTo(_point(seg.control), _point(seg.end)))
            elif isinstance(seg, CubicBezier):
                commands.append(CubicTo(_point(seg.control1), _point(seg.control2), _point(seg.end)))
            elif isinstance(seg, Arc):
                logger.warning("Arc segments are not supported; replaced by their chord")
                commands.append(LineTo(_point(seg.end)))
        if closed:
            commands.append(Close())
        pos = path.start if closed else path.end
    return commands


def _subpath_chunks(d: str) -> list[str]:
    """Split path data before every moveto and after every closepath."""
    chunks: list[str] = []
    for piece in _MOVETO_SPLIT_RE.split(d):
        chunks.extend(c for c in _CLOSE_SPLIT_RE.split(piece) if c.strip())
    return chunks


def _path_node(elem: ET.Element, tag: str, style: dict[str, str]) -> PathNode | None:
    d = elem.get("d") if tag == "path" else shape_to_path_data(tag, elem.attrib)
    if not d:
        return None

    try:
        segments = path_commands(d)
    except Exception as e:
        logger.warning("Failed to parse path data of <%s id=%r>: %s", tag, elem.get("id", ""), e)
        return None
    if not segments:
        return None

    return PathNode(
        id=elem.get("id", ""),
        transform=_transform(elem),
        visible=style["visibility"] not in ("hidden", "collapse"),
        fill=_paint(style["fill"]),
        stroke=_stroke(style),
        segments=segments,
        source_tag=tag,
    )


def _resolve_style(elem: ET.Element, inherited: dict[str, str]) -> dict[str, str]:
    """Cascade: inherited properties < presentation attributes < style attribute."""
    style = {k: v for k, v in inherited.items() if k in INHERITED}
    for key in (*INHERITED, "display"):
        value = elem.get(key)
        if value is not None:
            style[key] = value.strip()
    for decl in elem.get("style", "").split(";"):
        if ":" not in decl:
            continue
        key, value = decl.split(":", 1)
        style[key.strip()] = value.strip()
    # "inherit" keeps the parent's value
    for key, value in list(style.items()):
        if value == "inherit":
            style[key] = inherited.get(key, _INITIAL_STYLE.get(key, ""))
    return style


def _paint(value: str) -> str | None:
    if value.lower() in ("none", ""):
        return None
    return value


def _stroke(style: dict[str, str]) -> Stroke | None:
    if _paint(style["stroke"]) is None:
        return None
    width = length(style["stroke-width"], default=1.0)
    if width <= 0:
        return None
    return Stroke(
        width=width,
        linecap=style["stroke-linecap"],
        linejoin=style["stroke-linejoin"],
        miterlimit=length(style["stroke-miterlimit"], default=4.0),
    )


def _transform(elem: ET.Element):
    value = elem.get("transform")
    if not value:
        return np.identity(3)
    try:
        return parse_transform(value)
    except Exception as e:
        raise SvgParseError(f"Invalid transform {value!r}: {e}") from e


def _viewbox(value: str | None) -> tuple[float, float, float, float] | None:
    if not value:
        return None
    parts = _VIEWBOX_SPLIT_RE.split(value.strip())
    if len(parts) != 4:
        return None
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError:
        return None
    return (x, y, w, h)


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _point(z: complex) -> Point:
    return Point(float(z.real), float(z.imag))
