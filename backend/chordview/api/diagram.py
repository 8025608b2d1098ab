"""POST /api/diagram — relationships → layout + rendered SVG."""

from __future__ import annotations

import time
from dataclasses import asdict

from fastapi import APIRouter, Depends

from chordview.config import Settings
from chordview.dependencies import get_layout_config, get_settings
from chordview.engine.config import LayoutConfig
from chordview.models.requests import DiagramRequest
from chordview.models.responses import ArcOut, DiagramResponse, EntityOut, RibbonOut, SubSpanOut
from chordview.models.view import ViewState
from chordview.pipeline import build_diagram

router = APIRouter()


@router.post("/diagram", response_model=DiagramResponse)
async def diagram(
    req: DiagramRequest,
    settings: Settings = Depends(get_settings),
    config: LayoutConfig = Depends(get_layout_config),
) -> DiagramResponse:
    start = time.perf_counter()

    view = req.view or ViewState(width=settings.default_width, height=settings.default_height)
    result = build_diagram([r.to_relationship() for r in req.relationships], view, config)

    colors = {arc.index: arc.fill for arc in result.scene.arcs}
    entities = [
        EntityOut(
            index=i,
            label=e.label,
            code=e.code,
            category=e.category.value,
            color=colors.get(i, ""),
        )
        for i, e in enumerate(result.order)
    ]
    arcs = [
        ArcOut(index=a.index, start_angle=a.start_angle, end_angle=a.end_angle, value=a.value)
        for a in result.layout.arcs
    ]
    ribbons = [
        RibbonOut(
            source=SubSpanOut(**asdict(r.source)),
            target=SubSpanOut(**asdict(r.target)),
            value=r.value,
        )
        for r in result.layout.ribbons
    ]

    elapsed = (time.perf_counter() - start) * 1000
    return DiagramResponse(
        empty=result.is_empty,
        entities=entities,
        arcs=arcs,
        ribbons=ribbons,
        pad_angle=result.layout.pad_angle,
        svg=result.to_svg(),
        processing_time_ms=round(elapsed, 1),
    )
