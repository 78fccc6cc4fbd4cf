"""pytest plugin exposing the ``assert_tree_equivalent`` fixture.

Registered through the ``labeled_tree`` pytest11 entry point, so any test suite
in an environment with labeled-tree installed can request the fixture.  The
comparison ignores sibling order unless asked otherwise, which is what trees
coming out of ``join_equals`` need.
"""

from __future__ import annotations

from typing import Any

import pytest

from labeled_tree import LabeledTree, Node, dumps, parse
from labeled_tree.algorithm.shape import same_shape


def _as_node(tree: LabeledTree[Any] | Node[Any] | str) -> Node[Any]:
    if isinstance(tree, str):
        return parse(tree).root
    if isinstance(tree, LabeledTree):
        return tree.root
    return tree


@pytest.fixture(scope="session")
def assert_tree_equivalent() -> Any:
    """Fixture that returns a callable order-insensitive tree asserter.

    Trees may be given as LabeledTree, Node or bracket-notation text (parsed
    with ``str`` labels).  Sibling order is ignored by default, which is what
    trees returned by ``join_equals`` need.

    Usage in tests::

        def test_merge(assert_tree_equivalent):
            tree = parse("a(b(), c(), b())")
            tree.join_equals()
            assert_tree_equivalent(tree, "a(c(), b())")

    Returns:
        A callable ``_assert(actual, expected, ordered=False) -> None`` that
        raises ``AssertionError`` when the trees differ.
    """

    def _assert(
        actual: LabeledTree[Any] | Node[Any] | str,
        expected: LabeledTree[Any] | Node[Any] | str,
        ordered: bool = False,
    ) -> None:
        """Assert that two trees have equal labels and structure.

        Args:
            actual:   The tree produced by the code under test.
            expected: The reference tree.
            ordered:  When True, sibling order must match as well.

        Raises:
            AssertionError: When the trees differ, with both renderings in the
                message.
        """
        left = _as_node(actual)
        right = _as_node(expected)
        if not same_shape(left, right, ordered=ordered):
            raise AssertionError(
                f"trees not equivalent (ordered={ordered})\n"
                f"  actual:   {dumps(left)}\n"
                f"  expected: {dumps(right)}"
            )

    return _assert
