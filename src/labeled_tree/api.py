"""Public API functions for labeled-tree.

Three one-shot entry points: parse, dumps and measure.  Each parse call builds
a fresh BracketParser, so no state is shared between calls.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any, TypeVar

from labeled_tree.algorithm.branches import longest_branch
from labeled_tree.algorithm.levels import term_levels
from labeled_tree.config import ParserConfig
from labeled_tree.labeled import LabeledTree
from labeled_tree.result import TreeMetrics
from labeled_tree.tree.formatter import format_tree
from labeled_tree.tree.nodes import Node

__all__ = ["dumps", "measure", "parse"]

T = TypeVar("T")


def parse(
    source: str,
    label_parser: Callable[[str], T] = str,  # type: ignore[assignment]
    config: ParserConfig | None = None,
) -> LabeledTree[T]:
    """Parse bracket notation into a LabeledTree.

    Args:
        source:       Text such as ``"2(5(1(), 10()), 7())"``.
        label_parser: Converts each label token into a ``T``; for example
                      ``int``.  Its exceptions propagate unchanged.
        config:       Parser options.  Defaults to ``ParserConfig()`` when None.

    Returns:
        The parsed tree.

    Raises:
        EmptyInputError: The input ended while a token was expected.
        MalformedStructureError: Unexpected token or no root node.
        DepthLimitError: Nesting exceeded ``config.max_depth``.
    """
    return LabeledTree.parse(source, label_parser, config)


def dumps(tree: LabeledTree[Any] | Node[Any]) -> str:
    """Render a LabeledTree (or a bare Node) as bracket notation."""
    root = tree.root if isinstance(tree, LabeledTree) else tree
    return format_tree(root)


def measure(tree: LabeledTree[Any] | Node[Any]) -> TreeMetrics:
    """Compute every read-only structural metric of ``tree`` in one call.

    Args:
        tree: A LabeledTree or a bare root Node.  It is not modified.

    Returns:
        A ``TreeMetrics`` with longest_branch, min/max terminal levels, the
        leaf count and computation_time_ms populated.
    """
    start = time.perf_counter()
    root = tree.root if isinstance(tree, LabeledTree) else tree

    levels = term_levels(root)
    branch = longest_branch(root)

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return TreeMetrics(
        longest_branch=branch,
        min_term_level=int(levels.min()),
        max_term_level=int(levels.max()),
        terminal_count=int(levels.size),
        computation_time_ms=elapsed_ms,
    )
