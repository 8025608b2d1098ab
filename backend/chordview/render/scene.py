"""Scene renderer — layout spans → positioned, colored drawable shapes.

A Scene is rebuilt from scratch for every (relationships, view) pair; it
carries plain data only so the SVG serializer, hit-testing and the API can
all read it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from chordview.engine.config import LayoutConfig
from chordview.engine.context import ArcSpan, CanonicalOrder, Category, ChordLayout
from chordview.models.view import ViewState
from chordview.render.palette import LABEL_STYLES, color_for, darker, resolve_palette
from chordview.render.paths import arc_path, ribbon_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArcShape:
    index: int
    label: str
    category: Category
    d: str
    fill: str
    stroke: str


@dataclass(frozen=True)
class LabelShape:
    index: int
    text: str
    angle: float
    transform: str
    anchor: str
    font_weight: str
    fill: str

    @property
    def flipped(self) -> bool:
        return self.anchor == "end"


@dataclass(frozen=True)
class RibbonShape:
    source_index: int
    target_index: int
    source_label: str
    target_label: str
    value: float
    d: str
    fill: str
    stroke: str
    opacity: float


@dataclass(frozen=True)
class Scene:
    # Full view box size (drawable area + margins)
    width: float
    height: float
    center_x: float
    center_y: float
    inner_radius: float
    outer_radius: float
    arcs: tuple[ArcShape, ...] = ()
    labels: tuple[LabelShape, ...] = ()
    ribbons: tuple[RibbonShape, ...] = ()
    surface_id: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.arcs and not self.ribbons

    @property
    def view_box(self) -> tuple[float, float, float, float]:
        return (0.0, 0.0, self.width, self.height)


def label_placement(angle: float, outer_radius: float, offset: float) -> tuple[str, str]:
    """(transform, text-anchor) for a label centered on ``angle``.

    Labels on the lower half (angle > π) are turned 180° and right-aligned so
    they never read upside-down.
    """
    rotate = math.degrees(angle) - 90
    transform = f"rotate({rotate:.3f}) translate({outer_radius + offset:.3f})"
    if angle > math.pi:
        return f"{transform} rotate(180)", "end"
    return transform, "start"


def _label_for(arc: ArcSpan, order: CanonicalOrder, outer_radius: float, config: LayoutConfig) -> LabelShape:
    entity = order[arc.index]
    angle = arc.mid_angle
    transform, anchor = label_placement(angle, outer_radius, config.label_offset)
    weight, fill = LABEL_STYLES[entity.category]
    return LabelShape(
        index=arc.index,
        text=entity.code,
        angle=angle,
        transform=transform,
        anchor=anchor,
        font_weight=weight,
        fill=fill,
    )


def render_scene(
    order: CanonicalOrder,
    layout: ChordLayout,
    view: ViewState | None = None,
    config: LayoutConfig | None = None,
) -> Scene:
    view = view or ViewState()
    config = config or LayoutConfig()

    total_w = view.width + config.margin_left + config.margin_right
    total_h = view.height + config.margin_top + config.margin_bottom
    center_x = config.margin_left + view.width / 2
    center_y = config.margin_top + view.height / 2
    inner = max(min(total_w, total_h) * 0.5 - config.radius_inset, config.min_inner_radius)
    outer = inner + config.ring_thickness

    palette = resolve_palette(view.palette, len(order))

    arcs: list[ArcShape] = []
    labels: list[LabelShape] = []
    for arc in layout.arcs:
        entity = order[arc.index]
        fill = color_for(arc.index, palette)
        arcs.append(
            ArcShape(
                index=arc.index,
                label=entity.label,
                category=entity.category,
                d=arc_path(inner, outer, arc.start_angle, arc.end_angle),
                fill=fill,
                stroke=darker(fill),
            )
        )
        labels.append(_label_for(arc, order, outer, config))

    ribbons: list[RibbonShape] = []
    for ribbon in layout.ribbons:
        # Ribbons take the target's color so i→j and j→i differ
        fill = color_for(ribbon.target.index, palette)
        ribbons.append(
            RibbonShape(
                source_index=ribbon.source.index,
                target_index=ribbon.target.index,
                source_label=order[ribbon.source.index].label,
                target_label=order[ribbon.target.index].label,
                value=ribbon.value,
                d=ribbon_path(inner, ribbon.source, ribbon.target),
                fill=fill,
                stroke=darker(fill),
                opacity=config.ribbon_opacity,
            )
        )

    scene = Scene(
        width=total_w,
        height=total_h,
        center_x=center_x,
        center_y=center_y,
        inner_radius=inner,
        outer_radius=outer,
        arcs=tuple(arcs),
        labels=tuple(labels),
        ribbons=tuple(ribbons),
        surface_id=view.surface_id,
    )
    logger.debug("Scene: %d arcs, %d ribbons, %.0f×%.0f", len(arcs), len(ribbons), total_w, total_h)
    return scene
