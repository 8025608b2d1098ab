"""Serializable view state handed to the renderer."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ViewState(BaseModel):
    width: float = Field(default=900.0, gt=0, description="Drawable width in px")
    height: float = Field(default=600.0, gt=0, description="Drawable height in px")
    palette: list[str] | None = Field(
        default=None,
        description="Color per entity; used only if it has at least one color per entity",
    )
    surface_id: str | None = Field(default=None, description="id attribute of the root <svg>")
