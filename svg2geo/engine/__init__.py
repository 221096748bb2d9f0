"""svg2geo curve engine — path flattening and uniform-order primitive assembly."""

from svg2geo.engine.builder import Primitive, PrimitiveBuilder, build_primitives
from svg2geo.engine.config import ConversionConfig
from svg2geo.engine.context import ConversionContext
from svg2geo.engine.flatten import SubPath, flatten_document
from svg2geo.engine.pipeline import Converter, convert_svg
from svg2geo.engine.segments import CurveOrder, Point

__all__ = [
    "Primitive",
    "PrimitiveBuilder",
    "build_primitives",
    "ConversionConfig",
    "ConversionContext",
    "SubPath",
    "flatten_document",
    "Converter",
    "convert_svg",
    "CurveOrder",
    "Point",
]
