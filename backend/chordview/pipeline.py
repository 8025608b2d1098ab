"""Pipeline orchestrator — relationships → order → matrix → layout → scene.

Each call is a pure function of (relationships, view, config): nothing from a
previous call is reused, so an empty relationship set always gives an empty
scene.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from chordview.engine.canonical import canonicalize
from chordview.engine.config import LayoutConfig
from chordview.engine.context import CanonicalOrder, ChordLayout, Relationship
from chordview.engine.layout import chord_layout
from chordview.engine.matrix import build_matrix
from chordview.models.view import ViewState
from chordview.render.scene import Scene, render_scene
from chordview.render.serializer import scene_to_svg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagram:
    order: CanonicalOrder
    matrix: NDArray[np.float64]
    layout: ChordLayout
    scene: Scene

    @property
    def is_empty(self) -> bool:
        return self.layout.is_empty

    def to_svg(self) -> str:
        return scene_to_svg(self.scene)


def build_diagram(
    relationships: Sequence[Relationship],
    view: ViewState | None = None,
    config: LayoutConfig | None = None,
) -> Diagram:
    """Run every stage on one relationship snapshot."""
    start = time.perf_counter()
    config = config or LayoutConfig()

    order = canonicalize(relationships)
    matrix = build_matrix(order, relationships)
    layout = chord_layout(matrix, config.pad_angle)
    scene = render_scene(order, layout, view, config)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Diagram: %d relationships → %d entities, %d ribbons in %.1fms",
        len(relationships),
        len(order),
        len(layout.ribbons),
        elapsed,
    )
    return Diagram(order=order, matrix=matrix, layout=layout, scene=scene)
