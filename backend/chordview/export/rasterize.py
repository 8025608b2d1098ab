"""PNG export — standalone SVG → opaque raster at device scale.

Size rule: view box width/height (falling back to the width/height
attributes) × scale, where scale = clamp(ceil(device_pixel_ratio), 1, 3).
The vector scene is composited over a white canvas so the PNG is never
transparent.
"""

from __future__ import annotations

import asyncio
import io
import logging
import math
import re
from pathlib import Path

import cairosvg
from PIL import Image

from chordview.render.serializer import SVG_NS

logger = logging.getLogger(__name__)

MIN_SCALE = 1
MAX_SCALE = 3

_SVG_OPEN_RE = re.compile(r"<svg\b([^>]*)>", re.IGNORECASE)
_XMLNS_RE = re.compile(r"""\sxmlns\s*=\s*["']""")
_VIEWBOX_RE = re.compile(r"""viewBox\s*=\s*["']([^"']+)["']""")
_WIDTH_RE = re.compile(r"""\swidth\s*=\s*["']([^"']*?)["']""")
_HEIGHT_RE = re.compile(r"""\sheight\s*=\s*["']([^"']*?)["']""")


class ExportError(RuntimeError):
    """The scene could not be turned into a raster image."""


def ensure_namespace(svg_text: str) -> str:
    """Inject the SVG namespace on the root element when it is missing."""
    match = _SVG_OPEN_RE.search(svg_text)
    if match is None:
        raise ExportError("No <svg> root element found")
    if _XMLNS_RE.search(match.group(1)):
        return svg_text
    insert_at = match.start() + len("<svg")
    return f'{svg_text[:insert_at]} xmlns="{SVG_NS}"{svg_text[insert_at:]}'


def device_scale(device_pixel_ratio: float) -> int:
    if not math.isfinite(device_pixel_ratio):
        return MIN_SCALE
    return max(MIN_SCALE, min(MAX_SCALE, math.ceil(device_pixel_ratio)))


def _parse_length(raw: str) -> float | None:
    try:
        return float(raw.strip().replace("px", "").replace("pt", ""))
    except ValueError:
        return None


def intrinsic_size(svg_text: str) -> tuple[float, float]:
    """(width, height) of the root element: view box first, then width/height."""
    match = _SVG_OPEN_RE.search(svg_text)
    if match is None:
        raise ExportError("No <svg> root element found")
    root = match.group(1)

    vb_match = _VIEWBOX_RE.search(root)
    if vb_match:
        parts = vb_match.group(1).replace(",", " ").split()
        if len(parts) >= 4:
            w, h = _parse_length(parts[2]), _parse_length(parts[3])
            if w and h and w > 0 and h > 0:
                return (w, h)

    w_match = _WIDTH_RE.search(root)
    h_match = _HEIGHT_RE.search(root)
    w = _parse_length(w_match.group(1)) if w_match else None
    h = _parse_length(h_match.group(1)) if h_match else None
    if w and h and w > 0 and h > 0:
        return (w, h)
    raise ExportError("SVG declares neither a usable viewBox nor width/height")


def raster_size(svg_text: str, device_pixel_ratio: float = 1.0) -> tuple[int, int]:
    scale = device_scale(device_pixel_ratio)
    w, h = intrinsic_size(svg_text)
    return (math.ceil(w * scale), math.ceil(h * scale))


def export_png(svg_text: str, device_pixel_ratio: float = 1.0) -> bytes:
    """Rasterize an SVG scene to PNG bytes on an opaque white background."""
    svg_text = ensure_namespace(svg_text)
    width, height = raster_size(svg_text, device_pixel_ratio)

    try:
        png_data = cairosvg.svg2png(
            bytestring=svg_text.encode("utf-8"),
            output_width=width,
            output_height=height,
        )
        drawn = Image.open(io.BytesIO(png_data)).convert("RGBA")
    except Exception as e:
        logger.warning("Failed to rasterize SVG: %s", e)
        raise ExportError(f"Could not decode SVG into an image: {e}") from e

    if drawn.size != (width, height):
        drawn = drawn.resize((width, height))

    canvas = Image.new("RGB", (width, height), (255, 255, 255))
    canvas.paste(drawn, (0, 0), drawn)

    out = io.BytesIO()
    canvas.save(out, format="PNG")
    logger.info("Exported PNG %d×%d (scale %d)", width, height, device_scale(device_pixel_ratio))
    return out.getvalue()


async def export_png_async(svg_text: str, device_pixel_ratio: float = 1.0) -> bytes:
    """Same as export_png, off the event loop. Each call owns its canvas."""
    return await asyncio.to_thread(export_png, svg_text, device_pixel_ratio)


def png_filename(filename: str) -> str:
    name = Path(filename).name.replace('"', "") or "diagram"
    return name if name.lower().endswith(".png") else f"{name}.png"


def export_to_file(svg_text: str, filename: str | Path, device_pixel_ratio: float = 1.0) -> Path:
    path = Path(filename)
    if path.suffix.lower() != ".png":
        path = path.with_name(f"{path.name}.png")
    path.write_bytes(export_png(svg_text, device_pixel_ratio))
    return path
