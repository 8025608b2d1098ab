"""Label classification — an ordered list of (predicate, category) rules.

First matching rule wins; a label matching nothing is ``Category.OTHER``,
so classification is total over all strings.

    "12 Finance"  → Container    (digits, then whitespace or end)
    "C. Beheer"   → ProcessArea  (uppercase letter + period)
    "C1 Intake"   → Process      (uppercase letter + digits)
    "misc"        → Other
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from chordview.engine.context import Category, Entity

_CONTAINER_RE = re.compile(r"^([0-9]+)(?:\s|$)")
_PROCESS_AREA_RE = re.compile(r"^([A-Z])\.\s*")
_PROCESS_RE = re.compile(r"^([A-Z])([0-9]+)")
_WHITESPACE_RE = re.compile(r"\s")


@dataclass(frozen=True)
class CategoryRule:
    category: Category
    predicate: Callable[[str], bool]
    description: str = ""

    def matches(self, label: str) -> bool:
        return self.predicate(label)


def _regex_rule(category: Category, pattern: re.Pattern[str], description: str) -> CategoryRule:
    return CategoryRule(
        category=category,
        predicate=lambda label: pattern.match(label) is not None,
        description=description,
    )


DEFAULT_RULES: tuple[CategoryRule, ...] = (
    _regex_rule(Category.CONTAINER, _CONTAINER_RE, "decimal prefix followed by whitespace or end"),
    _regex_rule(Category.PROCESS_AREA, _PROCESS_AREA_RE, "uppercase letter followed by a period"),
    _regex_rule(Category.PROCESS, _PROCESS_RE, "uppercase letter followed by digits"),
)


def classify(label: str, rules: tuple[CategoryRule, ...] = DEFAULT_RULES) -> Category:
    for rule in rules:
        if rule.matches(label):
            return rule.category
    return Category.OTHER


def code_prefix(label: str) -> str:
    """Token before the first whitespace character, or the whole label."""
    return _WHITESPACE_RE.split(label, maxsplit=1)[0]


def describe(label: str, rules: tuple[CategoryRule, ...] = DEFAULT_RULES) -> Entity:
    """Classify a label and extract the parts its category sorts on."""
    category = classify(label, rules)
    code = code_prefix(label)
    letter: str | None = None
    number: int | None = None

    if category is Category.CONTAINER:
        m = _CONTAINER_RE.match(label)
        if m:
            number = int(m.group(1))
    elif category is Category.PROCESS_AREA:
        m = _PROCESS_AREA_RE.match(label)
        if m:
            letter = m.group(1)
    elif category is Category.PROCESS:
        m = _PROCESS_RE.match(label)
        if m:
            letter = m.group(1)
            number = int(m.group(2))

    return Entity(label=label, category=category, code=code, letter=letter, number=number)
