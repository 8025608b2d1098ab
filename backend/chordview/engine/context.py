"""Snapshot types flowing through the chord pipeline.

Each stage returns a new frozen object; nothing downstream mutates what an
upstream stage produced.

Relationship → CanonicalOrder → FlowMatrix (numpy) → ChordLayout
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray


class Category(str, enum.Enum):
    CONTAINER = "Container"
    PROCESS_AREA = "ProcessArea"
    PROCESS = "Process"
    OTHER = "Other"


@dataclass(frozen=True)
class Relationship:
    """One directed, weighted flow between two labels."""

    source: str
    target: str
    value: float


@dataclass(frozen=True)
class Entity:
    label: str
    category: Category
    # Token before the first whitespace (whole label if none)
    code: str
    # Leading uppercase letter for ProcessArea / Process, else None
    letter: str | None = None
    # Container numeric prefix or Process numeric suffix, else None
    number: int | None = None


@dataclass(frozen=True)
class CanonicalOrder:
    """Deterministic index ↔ entity mapping for one relationship snapshot."""

    entities: tuple[Entity, ...] = ()
    _index: dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index = {e.label: i for i, e in enumerate(self.entities)}
        if len(index) != len(self.entities):
            raise ValueError("Duplicate labels in canonical order")
        object.__setattr__(self, "_index", index)

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self):
        return iter(self.entities)

    def __getitem__(self, i: int) -> Entity:
        return self.entities[i]

    def index_of(self, label: str) -> int:
        return self._index[label]

    @property
    def labels(self) -> list[str]:
        return [e.label for e in self.entities]

    @property
    def categories(self) -> list[Category]:
        return [e.category for e in self.entities]


@dataclass(frozen=True)
class ArcSpan:
    """Angular interval owned by one entity. Angles in radians, 0 = 12 o'clock, clockwise."""

    index: int
    start_angle: float
    end_angle: float
    value: float = 0.0

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2


@dataclass(frozen=True)
class SubSpan:
    """Slice of an ArcSpan feeding one ribbon end."""

    index: int
    start_angle: float
    end_angle: float
    value: float

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle


@dataclass(frozen=True)
class RibbonSpan:
    source: SubSpan
    target: SubSpan
    value: float

    @property
    def is_self_loop(self) -> bool:
        return self.source.index == self.target.index


@dataclass(frozen=True)
class ChordLayout:
    arcs: tuple[ArcSpan, ...] = ()
    ribbons: tuple[RibbonSpan, ...] = ()
    pad_angle: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.arcs

    @property
    def total_angle(self) -> float:
        """Sum of arc spans plus one padding per arc (2π for a non-empty layout)."""
        return math.fsum(a.span for a in self.arcs) + len(self.arcs) * self.pad_angle


def frozen_matrix(values: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return a read-only view so a FlowMatrix snapshot cannot be edited in place."""
    values.setflags(write=False)
    return values
