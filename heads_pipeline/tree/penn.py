"""Penn Treebank bracket reading and writing via nltk."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from nltk import Tree

from heads_pipeline.constants import HEAD_MARK
from heads_pipeline.tree.node import Constituent, strip_head_mark


def from_nltk(tree: Union[Tree, str]) -> Constituent:
    """Convert an nltk tree; ``=H`` suffixes become the parent's head_index."""
    if isinstance(tree, str):
        return Constituent(label=tree)

    node = Constituent(label=strip_head_mark(tree.label()))
    for i, child in enumerate(tree):
        if isinstance(child, Tree) and child.label().endswith(HEAD_MARK):
            if node.head_index is not None:
                raise ValueError(f"multiple head-marked children under {node.category!r}")
            node.head_index = i
        node.children.append(from_nltk(child))
    return node


def to_nltk(node: Constituent) -> Union[Tree, str]:
    if node.is_leaf:
        return node.label
    children = []
    for i, child in enumerate(node.children):
        converted = to_nltk(child)
        if i == node.head_index and isinstance(converted, Tree):
            converted.set_label(child.category + HEAD_MARK)
        children.append(converted)
    return Tree(node.category, children)


def read_penn(text: str) -> Constituent:
    raw = (text or "").strip()
    if not raw:
        raise ValueError("Penn tree text is empty.")
    try:
        tree = Tree.fromstring(raw)
    except ValueError as exc:
        raise ValueError(f"Malformed Penn tree: {raw[:80]!r}") from exc
    return from_nltk(tree)


def to_penn(node: Constituent) -> str:
    """Render one line of Penn brackets, head children suffixed with ``=H``."""
    converted = to_nltk(node)
    if isinstance(converted, str):
        return converted
    return converted.pformat(margin=sys.maxsize)


def iter_treebank_lines(lines: Iterable[str]) -> Iterator[Constituent]:
    """Yield one tree per non-blank line (the one-tree-per-line treebank layout)."""
    for line in lines:
        line = line.strip()
        if line:
            yield read_penn(line)


def read_treebank_file(path: Union[str, Path]) -> List[Constituent]:
    with open(path, "r", encoding="utf-8") as f:
        return list(iter_treebank_lines(f))
