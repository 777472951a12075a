"""Whole-tree head annotation."""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional, Tuple

from heads_pipeline.constants import HEAD_MARK
from heads_pipeline.errors import InvalidArgument
from heads_pipeline.heads.finder import HeadFinder
from heads_pipeline.tree.node import Constituent


def annotate_heads(root: Constituent, finder: HeadFinder) -> Constituent:
    """Record the head child of every non-leaf node, breadth first, in place.

    Each node's choice depends only on its own children's categories, so the
    pass is idempotent and any previous annotation is simply overwritten.
    """
    if root is None or root.is_leaf:
        raise InvalidArgument("Can't annotate heads of null or leaf node.")
    queue: Deque[Tuple[Constituent, Optional[Constituent]]] = deque([(root, None)])
    while queue:
        node, parent = queue.popleft()
        if node.is_leaf:
            continue
        node.head_index = finder.get_head(node, parent)
        for child in node.children:
            queue.append((child, node))
    return root


def apply_head_marks(root: Constituent) -> Constituent:
    """Append ``=H`` to the label of every recorded head child that is not a leaf."""
    for node in root.subtrees():
        head = node.head
        if head is not None and not head.is_leaf and not head.label.endswith(HEAD_MARK):
            head.label += HEAD_MARK
    return root


def strip_head_marks(root: Constituent) -> Constituent:
    for node in root.subtrees():
        if not node.is_leaf:
            node.label = node.category
        node.head_index = None
    return root


def head_preterminal(node: Constituent) -> Constituent:
    """Follow recorded heads down to the pre-terminal carrying the lexical head."""
    current = node
    while not current.is_preterminal:
        if current.is_leaf or current.head is None:
            raise InvalidArgument(f"{current.category!r} has no recorded head; annotate the tree first.")
        current = current.head
    return current


def head_word(node: Constituent) -> str:
    return head_preterminal(node).word
