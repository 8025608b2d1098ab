"""Shared test fixtures."""

from __future__ import annotations

import pytest

from chordview.engine.context import Relationship


# Organizational sample: containers, process areas, processes and a free label
ORG_RELATIONSHIPS = [
    Relationship("A1 Intake", "2 Finance", 5),
    Relationship("A2 Review", "2 Finance", 3),
    Relationship("B1 Audit", "10 Operations", 4),
    Relationship("A. Policy", "10 Operations", 2),
    Relationship("A1 Intake", "A2 Review", 1),
    Relationship("misc", "2 Finance", 1),
]

CANONICAL_LABELS = ["2 Finance", "A. Policy", "A1 Intake", "A2 Review", "B1 Audit"]

SAMPLE_CSV = """A1,A1,0
A2,A2,0

B1,A1,5
B2,A2,4
B10,A1,4

C1,A1,6
C2,A2,5
"""

NO_NAMESPACE_SVG = '''<svg viewBox="0 0 900 600" width="450" height="300">
  <rect x="0" y="0" width="100" height="100" fill="#ff0000"/>
</svg>'''

TRANSPARENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 900 600">
  <circle cx="450" cy="300" r="50" fill="#1f77b4"/>
</svg>'''

SIZED_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="120px" height="80px">
  <rect x="10" y="10" width="20" height="20" fill="#000000"/>
</svg>'''

BROKEN_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10"><path d="M0 0 L'


@pytest.fixture
def org_relationships() -> list[Relationship]:
    return list(ORG_RELATIONSHIPS)


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def transparent_svg() -> str:
    return TRANSPARENT_SVG
