"""Entity canonicalizer — distinct labels → stable, category-bucketed order.

Final order:
  1. Containers by numeric prefix (ties: full label)
  2. Per letter, ascending: that letter's process areas, then its processes
     by numeric suffix (ties: code, then label)
  3. Everything else, lexically

The result depends only on the set of labels, never on relationship order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chordview.engine.classify import DEFAULT_RULES, CategoryRule, describe
from chordview.engine.context import CanonicalOrder, Category, Entity, Relationship

logger = logging.getLogger(__name__)


def distinct_labels(relationships: Iterable[Relationship]) -> list[str]:
    """Unique source/target labels in first-seen order."""
    seen: dict[str, None] = {}
    for rel in relationships:
        seen.setdefault(rel.source, None)
        seen.setdefault(rel.target, None)
    return list(seen)


def _number_key(entity: Entity) -> int:
    return entity.number if entity.number is not None else 0


def order_entities(entities: Iterable[Entity]) -> list[Entity]:
    containers: list[Entity] = []
    areas: dict[str, list[Entity]] = {}
    processes: dict[str, list[Entity]] = {}
    others: list[Entity] = []

    for e in entities:
        if e.category is Category.CONTAINER:
            containers.append(e)
        elif e.category is Category.PROCESS_AREA:
            areas.setdefault(e.letter or "", []).append(e)
        elif e.category is Category.PROCESS:
            processes.setdefault(e.letter or "", []).append(e)
        else:
            others.append(e)

    ordered = sorted(containers, key=lambda e: (_number_key(e), e.label))

    for letter in sorted(set(areas) | set(processes)):
        ordered.extend(sorted(areas.get(letter, []), key=lambda e: e.label))
        ordered.extend(
            sorted(processes.get(letter, []), key=lambda e: (_number_key(e), e.code, e.label))
        )

    ordered.extend(sorted(others, key=lambda e: e.label))
    return ordered


def canonicalize(
    relationships: Iterable[Relationship],
    rules: tuple[CategoryRule, ...] = DEFAULT_RULES,
) -> CanonicalOrder:
    """Build the canonical order for a relationship snapshot. Empty input → empty order."""
    labels = distinct_labels(relationships)
    entities = order_entities(describe(label, rules) for label in labels)
    order = CanonicalOrder(entities=tuple(entities))

    if logger.isEnabledFor(logging.DEBUG):
        counts: dict[str, int] = {}
        for e in entities:
            counts[e.category.value] = counts.get(e.category.value, 0) + 1
        logger.debug("Canonical order: %d entities %s", len(order), counts)
    return order
