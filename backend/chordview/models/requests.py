"""API request models."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field, field_validator

from chordview.engine.context import Relationship
from chordview.models.interaction import InteractionState, PointerEvent
from chordview.models.view import ViewState


class RelationshipIn(BaseModel):
    source: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)
    value: float

    @field_validator("value")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("value must be a finite number")
        return v

    def to_relationship(self) -> Relationship:
        return Relationship(source=self.source, target=self.target, value=self.value)


class ParseCsvRequest(BaseModel):
    csv: str = Field(..., description="One source,target,value per line")


class DiagramRequest(BaseModel):
    relationships: list[RelationshipIn] = Field(default_factory=list)
    view: ViewState | None = Field(default=None, description="Size, palette and surface id")


class InteractionRequest(BaseModel):
    state: InteractionState = Field(default_factory=InteractionState)
    event: PointerEvent


class ExportRequest(BaseModel):
    svg: str = Field(..., description="Rendered scene SVG")
    filename: str = Field(default="chord-diagram.png")
    device_pixel_ratio: float | None = Field(default=None, gt=0)
