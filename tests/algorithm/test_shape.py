"""Tests for shape_signature(), same_shape() and label_counts()."""

from __future__ import annotations

from collections import Counter

from labeled_tree.algorithm.shape import label_counts, same_shape, shape_signature
from labeled_tree.tree.nodes import Node


class TestShapeSignature:
    def test_leaf(self) -> None:
        assert shape_signature(Node("a")) == ("a", ())

    def test_nested(self) -> None:
        node = Node("a", [Node("b", [Node("c")])])
        assert shape_signature(node) == ("a", (("b", (("c", ()),)),))

    def test_is_hashable(self) -> None:
        hash(shape_signature(Node("a", [Node("b"), Node("c")])))

    def test_unordered_sorts_children(self) -> None:
        left = Node("a", [Node("c"), Node("b")])
        right = Node("a", [Node("b"), Node("c")])
        assert shape_signature(left, ordered=False) == shape_signature(
            right, ordered=False
        )

    def test_mixed_label_types_can_be_sorted(self) -> None:
        node = Node(0, [Node("x"), Node(1), Node(None)])
        assert len(shape_signature(node, ordered=False)[1]) == 3


class TestSameShape:
    def test_identical(self) -> None:
        assert same_shape(Node("a", [Node("b")]), Node("a", [Node("b")]))

    def test_order_matters_by_default(self) -> None:
        left = Node("a", [Node("b"), Node("c")])
        right = Node("a", [Node("c"), Node("b")])
        assert not same_shape(left, right)
        assert same_shape(left, right, ordered=False)

    def test_nested_order_is_ignored_at_every_level(self) -> None:
        left = Node("a", [Node("b", [Node("y"), Node("x")]), Node("c")])
        right = Node("a", [Node("c"), Node("b", [Node("x"), Node("y")])])
        assert same_shape(left, right, ordered=False)

    def test_different_labels(self) -> None:
        assert not same_shape(Node("a"), Node("b"), ordered=False)

    def test_different_structure(self) -> None:
        left = Node("a", [Node("b", [Node("c")])])
        right = Node("a", [Node("b"), Node("c")])
        assert not same_shape(left, right, ordered=False)


class TestLabelCounts:
    def test_counts_every_node(self) -> None:
        node = Node("a", [Node("b"), Node("b", [Node("c")])])
        assert label_counts(node) == Counter(
            {("a", 2): 1, ("b", 0): 1, ("b", 1): 1, ("c", 0): 1}
        )

    def test_single_node(self) -> None:
        assert label_counts(Node(7)) == Counter({(7, 0): 1})
