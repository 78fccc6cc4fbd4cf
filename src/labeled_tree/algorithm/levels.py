"""Terminal-node depth metrics.

The root sits at level 0.  ``term_levels`` collects the level of every leaf in
pre-order into a numpy array; the min/max helpers reduce over it.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import numpy as np

from labeled_tree.tree.nodes import Node

__all__ = ["max_term_level", "min_term_level", "term_levels"]


def _iter_term_levels(node: Node[Any], depth: int) -> Iterator[int]:
    if not node.children:
        yield depth
        return
    for child in node.children:
        yield from _iter_term_levels(child, depth + 1)


def term_levels(node: Node[Any], depth: int = 0) -> np.ndarray:
    """Return the levels of all terminal nodes under ``node``.

    Args:
        node:  Subtree root.
        depth: Level assigned to ``node`` itself.  Defaults to 0.

    Returns:
        1-D int64 array, one entry per leaf, in pre-order.  Never empty,
        because every finite tree has at least one leaf.
    """
    return np.fromiter(_iter_term_levels(node, depth), dtype=np.int64)


def min_term_level(node: Node[Any]) -> int:
    """Shallowest level at which a terminal node occurs (0 for a lone node)."""
    return int(term_levels(node).min())


def max_term_level(node: Node[Any]) -> int:
    """Deepest level at which a terminal node occurs (0 for a lone node)."""
    return int(term_levels(node).max())
