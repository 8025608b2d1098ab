"""Entity colors — deterministic index → color."""

from __future__ import annotations

from collections.abc import Sequence

from PIL import ImageColor

from chordview.engine.context import Category

# 10-color categorical palette (d3 schemeCategory10)
DEFAULT_PALETTE: tuple[str, ...] = (
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
)

# d3 darker(1): each channel × 0.7
_DARKER_FACTOR = 0.7


def resolve_palette(custom: Sequence[str] | None, n: int) -> tuple[str, ...]:
    """Caller palette if it covers every entity, otherwise the default."""
    if custom and len(custom) >= n:
        return tuple(custom)
    return DEFAULT_PALETTE


def color_for(index: int, palette: Sequence[str]) -> str:
    return palette[index % len(palette)]


def darker(color: str, factor: float = _DARKER_FACTOR) -> str:
    """Darker variant used for strokes.

    Colors Pillow cannot parse (currentColor, var(), hsla, ...) are returned
    unchanged so the stroke matches the fill.
    """
    try:
        rgb = ImageColor.getrgb(color)
    except ValueError:
        return color
    r, g, b = (max(0, min(255, round(c * factor))) for c in rgb[:3])
    return f"#{r:02x}{g:02x}{b:02x}"


# Label styling per category: (font-weight, fill)
LABEL_STYLES: dict[Category, tuple[str, str]] = {
    Category.CONTAINER: ("bold", "#1f2937"),
    Category.PROCESS_AREA: ("bold", "#1e40af"),
    Category.PROCESS: ("normal", "#374151"),
    Category.OTHER: ("normal", "#6b7280"),
}
