"""Layout and scene constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """Geometry knobs for the chord layout and its scene."""

    # Gap between consecutive arcs, radians. Not counted as data.
    pad_angle: float = 0.05

    # Margins around the drawable area (px)
    margin_top: float = 40.0
    margin_right: float = 20.0
    margin_bottom: float = 40.0
    margin_left: float = 20.0

    # Inner radius = min(total_w, total_h) / 2 - radius_inset
    radius_inset: float = 40.0
    # Outer radius = inner radius + ring_thickness
    ring_thickness: float = 10.0
    # Labels sit this far outside the outer radius
    label_offset: float = 10.0
    # Floor so tiny surfaces still get a drawable ring
    min_inner_radius: float = 1.0

    ribbon_opacity: float = 0.8
