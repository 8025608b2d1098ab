"""Pointer hit-testing against ribbon shapes.

Ribbon path data is parsed with svgpathtools, sampled into a point ring and
turned into a shapely polygon, once per scene.
"""

from __future__ import annotations

import logging

import numpy as np
from shapely.geometry import Point, Polygon
from svgpathtools import Path, parse_path

from chordview.render.scene import RibbonShape, Scene

logger = logging.getLogger(__name__)

# Samples per ribbon outline; enough to follow the quadratic curves
_SAMPLES_PER_RIBBON = 200


def _sample_path(path: Path, num_samples: int = _SAMPLES_PER_RIBBON) -> list[tuple[float, float]]:
    """Sample points along a path using parametric evaluation."""
    points: list[tuple[float, float]] = []

    if not path or path.length() < 1e-10:
        return points

    for t in np.linspace(0, 1, num_samples):
        try:
            pt = path.point(t)
        except (ValueError, ZeroDivisionError, IndexError) as e:
            logger.debug("Skipping sample t=%.3f: %s", t, e)
            continue
        points.append((pt.real, pt.imag))

    return points


def ribbon_polygon(ribbon: RibbonShape) -> Polygon | None:
    """Outline of a ribbon in center-relative coordinates, or None when degenerate."""
    points = _sample_path(parse_path(ribbon.d))
    if len(points) < 3:
        return None
    poly = Polygon(points)
    if not poly.is_valid:
        poly = poly.buffer(0)
    if poly.is_empty:
        return None
    return poly


class RibbonHitIndex:
    """Maps view-box coordinates to the topmost ribbon drawn there."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        self._polygons: list[tuple[RibbonShape, Polygon]] = []
        for ribbon in scene.ribbons:
            poly = ribbon_polygon(ribbon)
            if poly is not None:
                self._polygons.append((ribbon, poly))
        logger.debug("Hit index: %d/%d ribbons hittable", len(self._polygons), len(scene.ribbons))

    def __len__(self) -> int:
        return len(self._polygons)

    def ribbon_at(self, x: float, y: float) -> RibbonShape | None:
        pt = Point(x - self.scene.center_x, y - self.scene.center_y)
        # Later ribbons are drawn on top
        for ribbon, poly in reversed(self._polygons):
            if poly.contains(pt):
                return ribbon
        return None
