"""Head rule engine: rule lookup, traversal and last-resort fallback for one node."""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence, Tuple

from heads_pipeline.errors import InvalidArgument, NoRuleForCategory
from heads_pipeline.heads.coordination import CoordinationCorrector
from heads_pipeline.heads.traversal import find_by_rule
from heads_pipeline.rules.table import Rule, RuleTable
from heads_pipeline.tree.node import Constituent

logger = logging.getLogger(__name__)


class HeadOverride(Protocol):
    def attempt(self, finder: "HeadFinder", node: Constituent, parent: Optional[Constituent]) -> Optional[int]:
        ...


class HeadFinder:
    """Structural head resolver plus an ordered list of override strategies.

    The finder holds no per-tree state, so one instance can be shared by any
    number of threads annotating different trees.
    """

    def __init__(
        self,
        table: RuleTable,
        corrector: Optional[CoordinationCorrector] = None,
        overrides: Sequence[HeadOverride] = (),
    ) -> None:
        self.table = table
        self.corrector = corrector
        self.overrides: Tuple[HeadOverride, ...] = tuple(overrides)

    def get_head(self, node: Constituent, parent: Optional[Constituent] = None) -> int:
        """Index of the head child of ``node``."""
        if node is None or node.is_leaf:
            raise InvalidArgument("Can't return head of null or leaf node.")
        if len(node.children) == 1:
            return 0
        for override in self.overrides:
            index = override.attempt(self, node, parent)
            if index is not None:
                return index
        return self.structural_head(node)

    def structural_head(self, node: Constituent) -> int:
        category = node.category
        rules = self.table.lookup(category)
        if rules is None:
            if self.table.default_rule is None:
                raise NoRuleForCategory(category, self.table.name)
            logger.debug("no rule for %s in %s, applying default %s", category, self.table.name, self.table.default_rule)
            return self.traverse(node.children, self.table.default_rule, last_resort=True)

        for i, rule in enumerate(rules):
            index = self.traverse(node.children, rule, last_resort=i == len(rules) - 1)
            if index is not None:
                logger.debug("head of %s is %s (rule %d: %s)", category, node.children[index].category, i, rule.mode)
                return index
        raise AssertionError("last-resort traversal always selects a child")

    def traverse(self, children: Sequence[Constituent], rule: Rule, last_resort: bool = False) -> Optional[int]:
        """Apply one rule; on the last rule fall back instead of returning None."""
        categories = [child.category for child in children]
        index = find_by_rule(categories, rule, self.table.matches)
        if index is None:
            if not last_resort:
                return None
            index = self.traverse(children, self.table.last_resort_rule(rule.leftward))
            if index is not None:
                return index
            return 0 if rule.leftward else len(children) - 1
        if self.corrector is not None:
            index = self.corrector.correct(index, children)
        return index
