"""Tests for format_tree().

Covers leaf rendering, separators, custom label formatters, and the
parse -> format -> parse round trip on unmutated trees.
"""

from __future__ import annotations

import pytest

from labeled_tree.tree.formatter import format_tree
from labeled_tree.tree.nodes import Node
from labeled_tree.tree.parser import BracketParser

SOURCES = [
    "a()",
    "a(b())",
    "a(b(), c(), d())",
    "2(5(1(), 10()), 7(12(), 0(), -6(), 0(1(), 2(), 3())), 6(23()))",
    "Анна(Борис(Василий(), Виктор()), Татьяна(Алексей(), Михаил(), Сергей()), "
    "Ольга(Настасья()))",
]


class TestFormatTree:
    def test_leaf(self) -> None:
        assert format_tree(Node("a")) == "a()"

    def test_children_joined_with_comma_space(self) -> None:
        node = Node("a", [Node("b"), Node("c")])
        assert format_tree(node) == "a(b(), c())"

    def test_no_trailing_separator(self) -> None:
        assert not format_tree(Node("a", [Node("b")])).endswith(", )")

    def test_non_string_labels_use_str(self) -> None:
        node = Node(2, [Node(-6), Node(0, [Node(1)])])
        assert format_tree(node) == "2(-6(), 0(1()))"

    def test_custom_label_formatter(self) -> None:
        node = Node(10, [Node(255)])
        assert format_tree(node, hex) == "0xa(0xff())"

    def test_stored_order_is_kept(self) -> None:
        node = Node("r", [Node("z"), Node("a"), Node("m")])
        assert format_tree(node) == "r(z(), a(), m())"


class TestRoundTrip:
    @pytest.mark.parametrize("source", SOURCES)
    def test_format_reproduces_canonical_source(self, source: str) -> None:
        root = BracketParser().parse_node(source)
        assert format_tree(root) == source

    @pytest.mark.parametrize("source", SOURCES)
    def test_reparse_gives_identical_tree(self, source: str) -> None:
        parser = BracketParser()
        root = parser.parse_node(source)
        assert parser.parse_node(format_tree(root)) == root

    def test_compact_source_is_normalised(self) -> None:
        root = BracketParser().parse_node("a(b(),c( d( ) ))")
        assert format_tree(root) == "a(b(), c(d()))"
