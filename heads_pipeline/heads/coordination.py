"""Head correction next to coordinating conjunctions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from heads_pipeline.constants import PUNCTUATION_TAGS, SEPARATOR_TAGS
from heads_pipeline.tree.node import Constituent


@dataclass(frozen=True)
class CoordinationCorrector:
    """Moves a head that sits right after a conjunction to the first conjunct.

    With multi_conjunct off only punctuation is skipped on the way back, as in
    Collins (1999). With it on, interjections are skipped too (unless
    the chosen head is one) and comma/colon-separated lists of three or more
    conjuncts are walked back to the first one.
    """

    conjunctions: frozenset
    punctuation: frozenset = PUNCTUATION_TAGS
    separators: frozenset = SEPARATOR_TAGS
    interjection_tags: frozenset = frozenset()
    interjection_phrases: frozenset = frozenset()
    multi_conjunct: bool = False

    def correct(self, head_index: int, children: Sequence[Constituent]) -> int:
        if head_index < 2 or children[head_index - 1].category not in self.conjunctions:
            return head_index
        if not self.multi_conjunct:
            return self._simple(head_index, children)

        head_is_interjection = children[head_index].category in self.interjection_tags
        new_index = head_index - 2
        while new_index >= 0 and self._skippable(children[new_index], head_is_interjection):
            new_index -= 1
        while new_index >= 2:
            previous = self._previous_conjunct(new_index, children, head_is_interjection)
            if previous < 0:
                break
            new_index = previous
        return new_index if new_index >= 0 else head_index

    def _simple(self, head_index: int, children: Sequence[Constituent]) -> int:
        new_index = head_index - 2
        while new_index >= 0 and children[new_index].is_preterminal and children[new_index].category in self.punctuation:
            new_index -= 1
        return new_index if new_index >= 0 else head_index

    def _skippable(self, node: Constituent, head_is_interjection: bool) -> bool:
        category = node.category
        if node.is_preterminal and (
            category in self.punctuation or (not head_is_interjection and category in self.interjection_tags)
        ):
            return True
        return category in self.interjection_phrases and not head_is_interjection

    def _previous_conjunct(self, index: int, children: Sequence[Constituent], head_is_interjection: bool) -> int:
        # -1 unless a separator precedes the next non-skippable sibling.
        seen_separator = False
        while index > 0:
            index -= 1
            node = children[index]
            if node.category in self.separators:
                seen_separator = True
            elif self._skippable(node, head_is_interjection):
                continue
            else:
                return index if seen_separator else -1
        return -1
