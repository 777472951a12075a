"""Head rule tables: per-category ordered traversal rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from heads_pipeline.errors import MalformedRuleTable

TRAVERSAL_MODES = ("left", "right", "leftdis", "rightdis", "leftexcept", "rightexcept")
MATCH_MODES = ("exact", "prefix", "regex")

RuleSpec = Sequence[str]


@dataclass(frozen=True)
class Rule:
    mode: str
    candidates: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.mode not in TRAVERSAL_MODES:
            raise MalformedRuleTable(f"traversal mode must be one of: {' | '.join(TRAVERSAL_MODES)}; got {self.mode!r}")
        candidates = tuple(self.candidates)
        for tag in candidates:
            if not isinstance(tag, str) or not tag.strip():
                raise MalformedRuleTable(f"empty or undefined tag in {self.mode!r} rule: {list(candidates)!r}")
        object.__setattr__(self, "candidates", candidates)

    @property
    def leftward(self) -> bool:
        """True for the left-to-right family of modes."""
        return self.mode.startswith("left")

    @classmethod
    def from_spec(cls, spec: RuleSpec) -> "Rule":
        if not spec:
            raise MalformedRuleTable("rule must name a traversal mode")
        return cls(mode=spec[0], candidates=tuple(spec[1:]))


@dataclass(frozen=True)
class RuleTable:
    """Immutable mapping from base category to its ordered rules.

    match_mode decides how a candidate pattern is compared with a child
    category: ``exact`` equality, ``prefix`` starts-with, or ``regex``
    full match. default_rule is applied with last-resort semantics when a
    category has no entry; leave it unset to make a miss an error. avoid
    lists the categories the last-resort fallback skips over.
    """

    name: str
    rules: Mapping[str, Tuple[Rule, ...]]
    match_mode: str = "exact"
    default_rule: Optional[Rule] = None
    avoid: frozenset = frozenset()
    _patterns: Dict[str, "re.Pattern[str]"] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.match_mode not in MATCH_MODES:
            raise MalformedRuleTable(f"match_mode must be one of: {' | '.join(MATCH_MODES)}")
        normalized: Dict[str, Tuple[Rule, ...]] = {}
        for category, rules in self.rules.items():
            if not category:
                raise MalformedRuleTable(f"{self.name}: empty category label")
            rules = tuple(r if isinstance(r, Rule) else Rule.from_spec(r) for r in rules)
            if not rules:
                raise MalformedRuleTable(f"{self.name}: no rules for category {category!r}")
            normalized[category] = rules
        object.__setattr__(self, "rules", MappingProxyType(normalized))
        object.__setattr__(self, "avoid", frozenset(self.avoid))

        if self.match_mode == "regex":
            patterns = [self._literal(c) for c in self.avoid]
            for rules in normalized.values():
                for rule in rules:
                    patterns.extend(rule.candidates)
            if self.default_rule is not None:
                patterns.extend(self.default_rule.candidates)
            for pattern in patterns:
                if pattern in self._patterns:
                    continue
                try:
                    self._patterns[pattern] = re.compile(pattern)
                except re.error as exc:
                    raise MalformedRuleTable(f"{self.name}: bad tag pattern {pattern!r}: {exc}") from exc

    def lookup(self, category: str) -> Optional[Tuple[Rule, ...]]:
        return self.rules.get(category)

    def __contains__(self, category: object) -> bool:
        return category in self.rules

    def matches(self, pattern: str, category: str) -> bool:
        if self.match_mode == "exact":
            return pattern == category
        if self.match_mode == "prefix":
            return category.startswith(pattern)
        compiled = self._patterns.get(pattern)
        if compiled is None:
            compiled = re.compile(pattern)
        return compiled.fullmatch(category) is not None

    def last_resort_rule(self, leftward: bool) -> Rule:
        if self.avoid:
            return Rule("leftexcept" if leftward else "rightexcept", tuple(self._literal(c) for c in sorted(self.avoid)))
        return Rule("left" if leftward else "right")

    def _literal(self, category: str) -> str:
        return re.escape(category) if self.match_mode == "regex" else category

    def with_overrides(self, name: str, entries: Mapping[str, Sequence[RuleSpec]], **changes) -> "RuleTable":
        """New table whose entries replace those of this one, category by category."""
        merged: Dict[str, Sequence] = dict(self.rules)
        merged.update(entries)
        params = {
            "match_mode": self.match_mode,
            "default_rule": self.default_rule,
            "avoid": self.avoid,
        }
        params.update(changes)
        return RuleTable(name=name, rules=merged, **params)


def build_rule_table(name: str, entries: Mapping[str, Sequence[RuleSpec]], **kwargs) -> RuleTable:
    """Build a table from ``{"NP": [["rightdis", "NN", ...], ["left", "NP"]], ...}``."""
    return RuleTable(name=name, rules=dict(entries), **kwargs)


def parse_rule_lines(
    lines: Iterable[str],
    *,
    name: str = "custom",
    match_mode: str = "exact",
    default_rule: Optional[Rule] = Rule("right"),
    avoid: Iterable[str] = (),
) -> RuleTable:
    """Read ``<count> <category> <flag> <tag>...`` lines into a table.

    count is the number of tags plus two; flag ``1`` scans left to right,
    ``0`` right to left. A category listed twice gets both rules, in order.
    """
    entries: Dict[str, List[Rule]] = {}
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        fields = line.split()
        if len(fields) < 3:
            raise MalformedRuleTable(f"{name}:{lineno}: expected '<count> <category> <flag> <tag>...', got {line!r}")
        try:
            count = int(fields[0])
        except ValueError as exc:
            raise MalformedRuleTable(f"{name}:{lineno}: rule count must be an integer, got {fields[0]!r}") from exc
        category, flag, tags = fields[1], fields[2], fields[3:]
        if count != len(tags) + 2:
            raise MalformedRuleTable(f"{name}:{lineno}: count {count} does not match {len(tags)} tags")
        if flag not in {"0", "1"}:
            raise MalformedRuleTable(f"{name}:{lineno}: direction flag must be 0 or 1, got {flag!r}")
        entries.setdefault(category, []).append(Rule("left" if flag == "1" else "right", tuple(tags)))

    return RuleTable(name=name, rules=entries, match_mode=match_mode, default_rule=default_rule, avoid=frozenset(avoid))


def load_rule_file(path: Union[str, Path], **kwargs) -> RuleTable:
    path = Path(path)
    kwargs.setdefault("name", path.stem)
    with open(path, "r", encoding="utf-8") as f:
        return parse_rule_lines(f, **kwargs)


def dump_rule_lines(table: RuleTable) -> List[str]:
    out: List[str] = []
    for category, rules in table.rules.items():
        for rule in rules:
            if rule.mode not in {"left", "right"}:
                raise ValueError(f"{category}: {rule.mode!r} rules cannot be written in the line format")
            flag = "1" if rule.mode == "left" else "0"
            out.append(" ".join([str(len(rule.candidates) + 2), category, flag, *rule.candidates]))
    return out
