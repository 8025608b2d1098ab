"""Hover interaction state — serializable so a client can round-trip it."""

from __future__ import annotations

import enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HoverPhase(str, enum.Enum):
    IDLE = "idle"
    HOVER = "hover"


class RibbonRef(BaseModel):
    """What a pointer event knows about the ribbon under it."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    value: float


class PointerEvent(BaseModel):
    kind: Literal["enter", "move", "leave"]
    x: float = 0.0
    y: float = 0.0
    ribbon: RibbonRef | None = None


class InteractionState(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: HoverPhase = HoverPhase.IDLE
    ribbon: RibbonRef | None = None
    pointer_x: float = 0.0
    pointer_y: float = 0.0


class Tooltip(BaseModel):
    visible: bool = False
    x: float = 0.0
    y: float = 0.0
    lines: list[str] = Field(default_factory=list)
