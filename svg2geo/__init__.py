"""svg2geo — SVG path drawings to Houdini geo curves."""

from svg2geo.engine import ConversionConfig, Converter, convert_svg
from svg2geo.errors import OrderInvariantError, Svg2GeoError, SvgParseError

__version__ = "0.1.0"

__all__ = [
    "ConversionConfig",
    "Converter",
    "convert_svg",
    "OrderInvariantError",
    "Svg2GeoError",
    "SvgParseError",
]
