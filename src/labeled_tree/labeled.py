"""LabeledTree: a tree wrapper that owns exactly one root Node.

Each metric delegates to the matching function in ``labeled_tree.algorithm``,
starting at depth 0.  ``join_equals`` is the only mutating operation; it is
destructive and cannot be undone.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

import numpy as np

from labeled_tree.algorithm.branches import longest_branch
from labeled_tree.algorithm.levels import max_term_level, min_term_level, term_levels
from labeled_tree.algorithm.merge import join_equals
from labeled_tree.config import ParserConfig
from labeled_tree.tree.formatter import format_tree
from labeled_tree.tree.nodes import Node
from labeled_tree.tree.parser import BracketParser

__all__ = ["LabeledTree"]

T = TypeVar("T")


class LabeledTree(Generic[T]):
    """A single-rooted labeled tree.

    Example::

        tree = LabeledTree.parse("a(b(c()), d())")
        tree.longest_branch()   # 2
        str(tree)               # "a(b(c()), d())"
    """

    __slots__ = ("_root",)

    def __init__(self, root: Node[T]) -> None:
        """Wrap an already assembled root node.

        Raises:
            TypeError: If ``root`` is not a Node.
        """
        if not isinstance(root, Node):
            msg = f"LabeledTree root must be a Node, got {type(root).__name__}"
            raise TypeError(msg)
        self._root = root

    @classmethod
    def parse(
        cls,
        source: str,
        label_parser: Callable[[str], T] = str,  # type: ignore[assignment]
        config: ParserConfig | None = None,
    ) -> LabeledTree[T]:
        """Build a tree from bracket notation.

        Args:
            source:       Text such as ``"a(b(), c())"``.
            label_parser: Converts each label token into a ``T``.
            config:       Parser options.  Defaults to ``ParserConfig()``.

        Raises:
            ParseError: On malformed input (see ``labeled_tree.errors``).
        """
        parser = BracketParser(
            label_parser, config if config is not None else ParserConfig()
        )
        return parser.parse(source)

    @property
    def root(self) -> Node[T]:
        return self._root

    def longest_branch(self) -> int:
        """Node count of the longest unbranched chain."""
        return longest_branch(self._root)

    def term_levels(self) -> np.ndarray:
        """Levels of all terminal nodes, root at level 0."""
        return term_levels(self._root)

    def min_term_level(self) -> int:
        return min_term_level(self._root)

    def max_term_level(self) -> int:
        return max_term_level(self._root)

    def join_equals(self) -> None:
        """Merge equal-labeled siblings in place.  Child order is not preserved."""
        join_equals(self._root)

    def __str__(self) -> str:
        return format_tree(self._root)

    def __repr__(self) -> str:
        return f"LabeledTree({format_tree(self._root, repr)!r})"
