"""Render a tree back into bracket notation.

The output uses the same grammar the parser reads, so an unmutated parsed tree
formats to text that parses into an identical tree.  After ``join_equals`` the
child order may differ from the original text.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from labeled_tree.tree.nodes import Node

__all__ = ["format_tree"]


def format_tree(node: Node[Any], label_formatter: Callable[[Any], str] = str) -> str:
    """Format ``node`` and its subtree as ``label(child1, child2, ...)``.

    Args:
        node:            Root of the subtree to render.
        label_formatter: Converts a label to text.  Defaults to ``str``.

    Returns:
        The bracket-notation string; leaves render as ``label()``.
    """
    inner = ", ".join(format_tree(child, label_formatter) for child in node.children)
    return f"{label_formatter(node.label)}({inner})"
