"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from chordview.models.interaction import InteractionState, Tooltip


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class RelationshipOut(BaseModel):
    source: str
    target: str
    value: float


class ParseCsvResponse(BaseModel):
    relationships: list[RelationshipOut] = Field(default_factory=list)


class EntityOut(BaseModel):
    index: int
    label: str
    code: str
    category: str
    color: str


class ArcOut(BaseModel):
    index: int
    start_angle: float
    end_angle: float
    value: float


class SubSpanOut(BaseModel):
    index: int
    start_angle: float
    end_angle: float
    value: float


class RibbonOut(BaseModel):
    source: SubSpanOut
    target: SubSpanOut
    value: float


class DiagramResponse(BaseModel):
    empty: bool = True
    entities: list[EntityOut] = Field(default_factory=list)
    arcs: list[ArcOut] = Field(default_factory=list)
    ribbons: list[RibbonOut] = Field(default_factory=list)
    pad_angle: float = 0.0
    svg: str = ""
    processing_time_ms: float = 0.0


class InteractionResponse(BaseModel):
    state: InteractionState
    tooltip: Tooltip
