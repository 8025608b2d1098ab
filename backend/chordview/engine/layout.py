"""Chord layout engine — flow matrix → arc spans + ribbon spans.

Angles are radians, 0 at 12 o'clock, increasing clockwise.

Every nonzero cell (i, j) consumes |width| twice: once on arc i as an
outgoing sub-segment and once on arc j as an incoming one. Arc i therefore
spans row_sum(i) + col_sum(i), and a self-loop gets two separate slices of
the same arc.

Σ arc spans + N·pad = 2π for every non-empty matrix.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from chordview.engine.context import ArcSpan, ChordLayout, RibbonSpan, SubSpan

logger = logging.getLogger(__name__)

TAU = 2 * math.pi

_OUTGOING = 0
_INCOMING = 1


@dataclass(frozen=True)
class _Segment:
    peer: int
    direction: int
    value: float


def effective_pad_angle(n: int, pad_angle: float) -> float:
    """Padding actually used. Shrinks to π/N when N·pad would eat the whole circle."""
    if n == 0:
        return 0.0
    if n * pad_angle >= TAU:
        return math.pi / n
    return max(pad_angle, 0.0)


def _segments_for(matrix: NDArray[np.float64], i: int) -> list[_Segment]:
    """Outgoing and incoming slices of arc i, largest value first."""
    n = matrix.shape[0]
    segments: list[_Segment] = []
    for j in range(n):
        out_value = float(matrix[i, j])
        if out_value != 0:
            segments.append(_Segment(peer=j, direction=_OUTGOING, value=out_value))
        in_value = float(matrix[j, i])
        if in_value != 0:
            segments.append(_Segment(peer=j, direction=_INCOMING, value=in_value))
    segments.sort(key=lambda s: (-s.value, s.peer, s.direction))
    return segments


def chord_layout(matrix: NDArray[np.float64], pad_angle: float = 0.05) -> ChordLayout:
    """Lay out arcs in index order starting at angle 0, with sub-segments per arc."""
    n = int(matrix.shape[0]) if matrix.ndim == 2 else 0
    if n == 0:
        return ChordLayout()

    pad = effective_pad_angle(n, pad_angle)
    per_arc = [_segments_for(matrix, i) for i in range(n)]
    group_values = [math.fsum(s.value for s in segs) for segs in per_arc]
    total = math.fsum(group_values)
    data_angle = TAU - n * pad

    proportional = total > 0
    if proportional:
        k = data_angle / total
    else:
        # Nothing positive to size by: split the circle evenly, zero-width slices
        k = 0.0
        logger.debug("Layout: total flow %.3g is not positive, using equal arc spans", total)
    equal_span = data_angle / n

    arcs: list[ArcSpan] = []
    slices: dict[tuple[int, int, int], SubSpan] = {}
    x = 0.0

    for i, segments in enumerate(per_arc):
        start = x
        for seg in segments:
            sub_start = x
            x += seg.value * k
            slices[(i, seg.peer, seg.direction)] = SubSpan(
                index=i, start_angle=sub_start, end_angle=x, value=seg.value
            )
        if not proportional:
            x = start + equal_span
        arcs.append(ArcSpan(index=i, start_angle=start, end_angle=x, value=group_values[i]))
        x += pad

    ribbons: list[RibbonSpan] = []
    for i in range(n):
        for j in range(n):
            value = float(matrix[i, j])
            if value == 0:
                continue
            ribbons.append(
                RibbonSpan(
                    source=slices[(i, j, _OUTGOING)],
                    target=slices[(j, i, _INCOMING)],
                    value=value,
                )
            )

    layout = ChordLayout(arcs=tuple(arcs), ribbons=tuple(ribbons), pad_angle=pad)
    logger.debug(
        "Layout: %d arcs, %d ribbons, pad %.3f rad, total %.6f rad",
        len(layout.arcs), len(layout.ribbons), pad, layout.total_angle,
    )
    return layout
