"""Command line entry point: read an SVG, write Houdini geo JSON.

    svg2geo drawing.svg -o drawing.geo
    cat drawing.svg | svg2geo > drawing.geo
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from svg2geo.config import settings
from svg2geo.engine.pipeline import Converter
from svg2geo.errors import Svg2GeoError

load_dotenv()


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="svg2geo", description="Convert SVG paths to Houdini geo curves")
    parser.add_argument("input", nargs="?", help="SVG file (default: stdin)")
    parser.add_argument("-o", "--output", help="Output geo file (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args(argv)

    _configure_logging("debug" if args.verbose else settings.svg2geo_log_level)

    if args.input:
        try:
            with open(args.input, "rb") as f:
                data = f.read()
        except OSError as e:
            print(f"svg2geo: {e}", file=sys.stderr)
            return 1
    else:
        data = sys.stdin.buffer.read()

    try:
        text = Converter().convert(data)
    except Svg2GeoError as e:
        print(f"svg2geo: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    else:
        sys.stdout.write(text + "\n")
    return 0
