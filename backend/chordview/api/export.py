"""POST /api/export — rendered scene SVG → PNG download."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from chordview.config import Settings
from chordview.dependencies import get_settings
from chordview.export.rasterize import ExportError, export_png_async, png_filename
from chordview.models.requests import ExportRequest

router = APIRouter()


@router.post("/export")
async def export(req: ExportRequest, settings: Settings = Depends(get_settings)) -> Response:
    ratio = req.device_pixel_ratio or settings.default_device_pixel_ratio
    try:
        png = await export_png_async(req.svg, ratio)
    except ExportError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    filename = png_filename(req.filename)
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
