"""Longest unbranched chain in a labeled tree.

A chain is a downward path where every node except the last has exactly one
child.  Chains may start at the root or at any branch point (a node with two
or more children).

Recursive rule, with ``depth`` the number of single-child nodes already
walked above ``node`` on the current chain:

- leaf:          the chain ends here, length ``depth + 1``;
- one child:     the chain continues into the child at ``depth + 1``;
- branch point:  the chain reaching this node ends here (``depth + 1``, only
                 when ``depth > 0``) and every child starts a fresh search at 0.
"""

from __future__ import annotations

from typing import Any

from labeled_tree.tree.nodes import Node

__all__ = ["longest_branch"]


def longest_branch(node: Node[Any], depth: int = 0) -> int:
    """Return the node count of the longest unbranched chain under ``node``.

    Args:
        node:  Subtree root.
        depth: Length of the single-child chain leading into ``node``.  Callers
               normally leave this at 0.

    Returns:
        Chain length in nodes.  A single node gives 1, a star gives 1.
    """
    if not node.children:
        return depth + 1

    if len(node.children) == 1:
        return longest_branch(node.children[0], depth + 1)

    best = depth + 1 if depth > 0 else 0
    for child in node.children:
        best = max(best, longest_branch(child, 0))
    return best
