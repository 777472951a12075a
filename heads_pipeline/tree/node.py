"""Constituent node used by rule lookup and head annotation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from heads_pipeline.constants import HEAD_MARK


def strip_head_mark(label: str) -> str:
    return label.replace(HEAD_MARK, "")


@dataclass(eq=False)
class Constituent:
    """A labeled span of a parse tree.

    Leaves carry the word form as their label. Every other node may record
    the position of its head child in ``head_index``; the head is stored on
    the parent, so a child's label never has to change to mark it.
    """

    label: str
    children: List["Constituent"] = field(default_factory=list)
    head_index: Optional[int] = None

    @property
    def category(self) -> str:
        """Label with any head marker removed; the rule-table lookup key."""
        return strip_head_mark(self.label)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_preterminal(self) -> bool:
        return len(self.children) == 1 and self.children[0].is_leaf

    @property
    def is_phrasal(self) -> bool:
        return not self.is_leaf and not self.is_preterminal

    @property
    def head(self) -> Optional["Constituent"]:
        if self.head_index is None:
            return None
        return self.children[self.head_index]

    @property
    def word(self) -> str:
        """Word form of a pre-terminal (or the label of a leaf)."""
        if self.is_leaf:
            return self.label
        if not self.is_preterminal:
            raise ValueError(f"{self.category!r} is not a pre-terminal")
        return self.children[0].label

    def leaves(self) -> Iterator["Constituent"]:
        if self.is_leaf:
            yield self
            return
        for child in self.children:
            yield from child.leaves()

    def covered_text(self) -> str:
        return " ".join(leaf.label for leaf in self.leaves())

    def preterminals(self) -> Iterator["Constituent"]:
        if self.is_preterminal:
            yield self
            return
        for child in self.children:
            yield from child.preterminals()

    def preterminal_yield(self) -> List[str]:
        """Part-of-speech tags under this node, left to right."""
        return [node.category for node in self.preterminals()]

    def subtrees(self) -> Iterator["Constituent"]:
        yield self
        for child in self.children:
            yield from child.subtrees()
