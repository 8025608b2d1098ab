"""SVG path data for annular arcs and chord ribbons.

Coordinates are relative to the diagram center, SVG y-down. Angle 0 points
up and angles grow clockwise, so a point at radius r is (r·sin a, −r·cos a).
"""

from __future__ import annotations

import math

from chordview.engine.context import SubSpan

# Below this an arc command would be a no-op
_EPSILON = 1e-12


def polar(radius: float, angle: float) -> tuple[float, float]:
    return (radius * math.sin(angle), -radius * math.cos(angle))


def _fmt(v: float) -> str:
    s = f"{v:.3f}".rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s


def _point(radius: float, angle: float) -> str:
    x, y = polar(radius, angle)
    return f"{_fmt(x)},{_fmt(y)}"


def _arc_to(radius: float, a0: float, a1: float) -> str:
    """Elliptical-arc commands from angle a0 to a1 along a circle.

    Sweeps wider than π are split in two so the large-arc flag is never
    needed, which also covers a full turn.
    """
    delta = a1 - a0
    if abs(delta) < _EPSILON:
        return ""
    sweep = 1 if delta > 0 else 0
    r = _fmt(radius)
    if abs(delta) > math.pi:
        mid = a0 + delta / 2
        return f"A{r},{r} 0 0 {sweep} {_point(radius, mid)}A{r},{r} 0 0 {sweep} {_point(radius, a1)}"
    return f"A{r},{r} 0 0 {sweep} {_point(radius, a1)}"


def arc_path(inner_radius: float, outer_radius: float, start_angle: float, end_angle: float) -> str:
    """Annular sector between two radii."""
    return (
        f"M{_point(outer_radius, start_angle)}"
        f"{_arc_to(outer_radius, start_angle, end_angle)}"
        f"L{_point(inner_radius, end_angle)}"
        f"{_arc_to(inner_radius, end_angle, start_angle)}"
        "Z"
    )


def ribbon_path(radius: float, source: SubSpan, target: SubSpan) -> str:
    """Ribbon joining two arc slices with quadratic curves through the center."""
    parts = [
        f"M{_point(radius, source.start_angle)}",
        _arc_to(radius, source.start_angle, source.end_angle),
    ]
    same_slice = (
        source.index == target.index
        and source.start_angle == target.start_angle
        and source.end_angle == target.end_angle
    )
    if not same_slice:
        parts.append(f"Q0,0 {_point(radius, target.start_angle)}")
        parts.append(_arc_to(radius, target.start_angle, target.end_angle))
    parts.append(f"Q0,0 {_point(radius, source.start_angle)}")
    parts.append("Z")
    return "".join(parts)
