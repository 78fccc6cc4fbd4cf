"""join_equals: merge same-labeled siblings throughout a tree.

At every node the direct children are grouped by label.  Each group is
replaced by one new node carrying that label and the concatenated child lists
of all group members, so grandchildren move up under the merged node.  The
procedure then recurses into every resulting child, which also merges any
equal labels among the promoted grandchildren.

Child order after the merge is not part of the contract.  Groups are kept in a
dict, so in practice each label appears at the position of its first
occurrence, but callers should compare trees order-insensitively (see
``labeled_tree.algorithm.shape``).
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any

from labeled_tree.tree.nodes import Node

__all__ = ["join_equals"]

logger = logging.getLogger(__name__)


def join_equals(node: Node[Any]) -> None:
    """Merge equal-labeled siblings under ``node``, recursively and in place.

    Labels are grouped with dict semantics: labels that compare equal and hash
    alike merge even across types, so ``1``, ``True`` and ``1.0`` become one
    node carrying the first-seen label.

    Args:
        node: Subtree root.  Its ``children`` list is mutated in place; the
              merged children are new Node instances.

    Raises:
        TypeError: If a child label is unhashable.
    """
    groups: dict[Hashable, list[Node[Any]]] = {}
    for child in node.children:
        groups.setdefault(child.label, []).extend(child.children)

    if len(groups) < len(node.children):
        logger.debug(
            "Merging %d children of %r into %d",
            len(node.children),
            node.label,
            len(groups),
        )

    node.children[:] = [Node(label, merged) for label, merged in groups.items()]

    for child in node.children:
        join_equals(child)
