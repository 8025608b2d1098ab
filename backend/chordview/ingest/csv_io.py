"""CSV ingestion — ``source,target,value`` lines ↔ Relationship list."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from chordview.engine.context import Relationship

logger = logging.getLogger(__name__)


class RelationshipFormatError(ValueError):
    def __init__(self, line_no: int, line: str, reason: str) -> None:
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_no}: {reason}: {line!r}")


def parse_relationships(text: str) -> list[Relationship]:
    """Parse one relationship per line. Blank lines are skipped."""
    relationships: list[Relationship] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        parts = [p.strip() for p in line.split(",")]
        if len(parts) != 3:
            raise RelationshipFormatError(line_no, line, "expected source,target,value")
        source, target, raw_value = parts
        if not source or not target:
            raise RelationshipFormatError(line_no, line, "source and target must not be empty")
        try:
            value = float(raw_value)
        except ValueError:
            raise RelationshipFormatError(line_no, line, f"invalid value {raw_value!r}") from None
        if not math.isfinite(value):
            raise RelationshipFormatError(line_no, line, f"value must be finite, got {raw_value!r}")
        relationships.append(Relationship(source=source, target=target, value=value))

    logger.debug("Parsed %d relationships", len(relationships))
    return relationships


def _value_text(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def to_csv(relationships: Iterable[Relationship]) -> str:
    return "\n".join(f"{r.source},{r.target},{_value_text(r.value)}" for r in relationships)
