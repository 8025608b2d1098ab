"""Chord layout engine: canonical order, flow matrix, angular layout."""

from chordview.engine.canonical import canonicalize
from chordview.engine.context import (
    ArcSpan,
    CanonicalOrder,
    Category,
    ChordLayout,
    Entity,
    Relationship,
    RibbonSpan,
    SubSpan,
)
from chordview.engine.layout import chord_layout
from chordview.engine.matrix import build_matrix

__all__ = [
    "ArcSpan",
    "CanonicalOrder",
    "Category",
    "ChordLayout",
    "Entity",
    "Relationship",
    "RibbonSpan",
    "SubSpan",
    "build_matrix",
    "canonicalize",
    "chord_layout",
]
