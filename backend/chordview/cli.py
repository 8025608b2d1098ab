"""Render a relationships CSV to an SVG or PNG chord diagram.

Usage:
  chordview relationships.csv                      # prints SVG to stdout
  chordview relationships.csv -o diagram.svg       # saves SVG
  chordview relationships.csv -o diagram.png -s 2  # saves PNG at 2× scale
  chordview relationships.csv -o clean.csv         # saves the normalized CSV
  chordview relationships.csv -o out.png --palette "#111,#222,#333"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chordview.config import settings
from chordview.engine.config import LayoutConfig
from chordview.export.rasterize import ExportError, export_to_file
from chordview.ingest.csv_io import RelationshipFormatError, parse_relationships, to_csv
from chordview.models.view import ViewState
from chordview.pipeline import build_diagram

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chordview", description="Chord diagram from source,target,value CSV")
    parser.add_argument("input", help="CSV file, one source,target,value per line")
    parser.add_argument("-o", "--output", help="Output .svg, .png or .csv (SVG to stdout if omitted)")
    parser.add_argument("--width", type=float, default=settings.default_width, help="Drawable width in px")
    parser.add_argument("--height", type=float, default=settings.default_height, help="Drawable height in px")
    parser.add_argument("--palette", help="Comma-separated colors, one per entity")
    parser.add_argument("--id", dest="surface_id", help="id attribute for the root <svg>")
    parser.add_argument(
        "-s", "--scale", type=float, default=settings.default_device_pixel_ratio,
        help="Device pixel ratio for PNG output (rounded up, clamped to 1-3)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        relationships = parse_relationships(Path(args.input).read_text(encoding="utf-8"))
    except OSError as e:
        print(f"Cannot read {args.input}: {e}", file=sys.stderr)
        return 1
    except RelationshipFormatError as e:
        print(f"Invalid CSV: {e}", file=sys.stderr)
        return 1

    palette = [c.strip() for c in args.palette.split(",") if c.strip()] if args.palette else None
    view = ViewState(width=args.width, height=args.height, palette=palette, surface_id=args.surface_id)
    diagram = build_diagram(relationships, view, LayoutConfig(pad_angle=settings.pad_angle))
    if diagram.is_empty:
        print("No relationships found; writing an empty diagram.", file=sys.stderr)

    svg = diagram.to_svg()
    if not args.output:
        print(svg)
        return 0

    out = Path(args.output)
    if out.suffix.lower() == ".csv":
        # Normalized table: trimmed fields, integral values without ".0"
        out.write_text(to_csv(relationships) + "\n", encoding="utf-8")
    elif out.suffix.lower() == ".svg":
        out.write_text(svg, encoding="utf-8")
    else:
        try:
            out = export_to_file(svg, out, args.scale)
        except ExportError as e:
            print(f"Export failed: {e}", file=sys.stderr)
            return 1
    print(f"Wrote {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
