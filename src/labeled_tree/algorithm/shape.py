"""Shape comparison helpers for labeled trees.

``join_equals`` does not promise any child order, so tests and callers that
compare merged trees need order-insensitive views:

- ``shape_signature``: nested ``(label, (child_sig, ...))`` tuples; with
  ``ordered=False`` the child signatures are sorted by ``repr`` so that trees
  differing only in sibling order produce equal signatures.
- ``same_shape``: signature equality.
- ``label_counts``: multiset of ``(label, child_count)`` pairs over all nodes.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from labeled_tree.tree.nodes import Node

__all__ = ["label_counts", "same_shape", "shape_signature"]

Signature = tuple[Any, tuple["Signature", ...]]


def shape_signature(node: Node[Any], ordered: bool = True) -> Signature:
    """Return a hashable nested-tuple description of ``node``'s subtree."""
    children = tuple(shape_signature(child, ordered) for child in node.children)
    if not ordered:
        children = tuple(sorted(children, key=repr))
    return (node.label, children)


def same_shape(a: Node[Any], b: Node[Any], ordered: bool = True) -> bool:
    """True when both subtrees have equal labels and structure.

    Args:
        a:       Left subtree root.
        b:       Right subtree root.
        ordered: When False, sibling order is ignored at every level.
    """
    return shape_signature(a, ordered) == shape_signature(b, ordered)


def label_counts(node: Node[Any]) -> Counter[tuple[Any, int]]:
    """Count ``(label, len(children))`` pairs over every node in the subtree."""
    counts: Counter[tuple[Any, int]] = Counter()
    stack = [node]
    while stack:
        current = stack.pop()
        counts[(current.label, len(current.children))] += 1
        stack.extend(current.children)
    return counts
