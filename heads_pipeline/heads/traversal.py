"""Directional search strategies over a child category list.

Each primitive returns the index of the selected child, or None when no child
qualifies; the caller then moves on to the next rule.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from heads_pipeline.rules.table import Rule

Matcher = Callable[[str, str], bool]


def _exact(pattern: str, category: str) -> bool:
    return pattern == category


def find_left(categories: Sequence[str], candidates: Sequence[str], match: Matcher = _exact) -> Optional[int]:
    for candidate in candidates:
        for i, category in enumerate(categories):
            if match(candidate, category):
                return i
    return None


def find_right(categories: Sequence[str], candidates: Sequence[str], match: Matcher = _exact) -> Optional[int]:
    for candidate in candidates:
        for i in range(len(categories) - 1, -1, -1):
            if match(candidate, categories[i]):
                return i
    return None


def find_left_dis(categories: Sequence[str], candidates: Sequence[str], match: Matcher = _exact) -> Optional[int]:
    for i, category in enumerate(categories):
        if any(match(candidate, category) for candidate in candidates):
            return i
    return None


def find_right_dis(categories: Sequence[str], candidates: Sequence[str], match: Matcher = _exact) -> Optional[int]:
    for i in range(len(categories) - 1, -1, -1):
        if any(match(candidate, categories[i]) for candidate in reversed(candidates)):
            return i
    return None


def find_left_except(categories: Sequence[str], candidates: Sequence[str], match: Matcher = _exact) -> Optional[int]:
    for i, category in enumerate(categories):
        if not any(match(candidate, category) for candidate in candidates):
            return i
    return None


def find_right_except(categories: Sequence[str], candidates: Sequence[str], match: Matcher = _exact) -> Optional[int]:
    for i in range(len(categories) - 1, -1, -1):
        if not any(match(candidate, categories[i]) for candidate in candidates):
            return i
    return None


TRAVERSALS = {
    "left": find_left,
    "right": find_right,
    "leftdis": find_left_dis,
    "rightdis": find_right_dis,
    "leftexcept": find_left_except,
    "rightexcept": find_right_except,
}


def find_by_rule(categories: Sequence[str], rule: Rule, match: Matcher = _exact) -> Optional[int]:
    return TRAVERSALS[rule.mode](categories, rule.candidates, match)
