"""Matrix builder — relationships → N×N flow matrix in canonical index space."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from chordview.engine.context import CanonicalOrder, Relationship, frozen_matrix

logger = logging.getLogger(__name__)


def build_matrix(order: CanonicalOrder, relationships: Sequence[Relationship]) -> NDArray[np.float64]:
    """matrix[i][j] = value of the relationship from entity i to entity j.

    Duplicate (source, target) pairs are last-write-wins: the later value
    replaces the earlier one, nothing is summed.
    """
    n = len(order)
    matrix = np.zeros((n, n), dtype=np.float64)
    written: set[tuple[int, int]] = set()

    for rel in relationships:
        i = order.index_of(rel.source)
        j = order.index_of(rel.target)
        if (i, j) in written:
            logger.debug(
                "Duplicate pair %r → %r: %s replaces %s",
                rel.source, rel.target, rel.value, matrix[i, j],
            )
        matrix[i, j] = rel.value
        written.add((i, j))

    return frozen_matrix(matrix)
