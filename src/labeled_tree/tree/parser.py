"""BracketParser: builds a LabeledTree from ``label(child, child, ...)`` text.

Grammar::

    tree     := label '(' children ')'
    children := (tree (',' tree)*)? | empty

Every node, leaves included, is followed by a parenthesised (possibly empty)
child list.  Tokenization inserts whitespace around ``(``, ``)`` and ``,`` and
then splits on whitespace, so commas act purely as separators and can never be
part of a label.

The recursive descent returns ``None`` when it reads a ``)`` where a node could
start.  That sentinel is how an empty (or trailing-comma) child list ends; it
is not an error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from labeled_tree.config import ParserConfig
from labeled_tree.errors import (
    DepthLimitError,
    EmptyInputError,
    MalformedStructureError,
)
from labeled_tree.tree.nodes import Node

if TYPE_CHECKING:
    from labeled_tree.labeled import LabeledTree

__all__ = ["BracketParser", "tokenize"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

OPEN = "("
CLOSE = ")"
SEPARATOR = ","

_PUNCTUATION = re.compile(r"([(),])")


def tokenize(source: str) -> list[str]:
    """Split bracket notation into label and punctuation tokens.

    Args:
        source: Text such as ``"a(b(), c())"``.

    Returns:
        Tokens in source order, e.g. ``["a", "(", "b", "(", ")", ",", ...]``.
    """
    return _PUNCTUATION.sub(r" \1 ", source).split()


class _TokenStream:
    """Cursor over a token list that raises EmptyInputError on exhaustion."""

    def __init__(self, tokens: list[str]) -> None:
        self._tokens = tokens
        self.position = 0

    def next(self) -> str:
        if self.position >= len(self._tokens):
            msg = f"unexpected end of input after {len(self._tokens)} tokens"
            raise EmptyInputError(msg, position=self.position)
        token = self._tokens[self.position]
        self.position += 1
        return token

    @property
    def remaining(self) -> int:
        return len(self._tokens) - self.position


@dataclass
class BracketParser(Generic[T]):
    """Parses bracket notation into a LabeledTree using an injected label parser.

    The label parser turns each label token into a ``T``.  It is treated as an
    opaque dependency: whatever it raises propagates out of ``parse`` unchanged.

    Example::

        parser = BracketParser(int)
        tree = parser.parse("2(5(1(), 10()), 7())")
        tree.root.children[0].label   # 5
    """

    label_parser: Callable[[str], T] = str  # type: ignore[assignment]
    config: ParserConfig = field(default_factory=ParserConfig)

    def parse(self, source: str) -> LabeledTree[T]:
        """Parse ``source`` into a LabeledTree.

        Args:
            source: Bracket notation text.

        Returns:
            A LabeledTree wrapping the parsed root node.

        Raises:
            EmptyInputError: The input ended while a token was expected.
            MalformedStructureError: A token appeared where the grammar forbids
                it, or no root node could be parsed.
            DepthLimitError: Nesting exceeded ``config.max_depth``.
        """
        from labeled_tree.labeled import LabeledTree

        tokens = tokenize(source)
        logger.debug("Parsing %d tokens", len(tokens))
        stream = _TokenStream(tokens)

        root = self._build(stream, depth=1)
        if root is None:
            raise MalformedStructureError(
                "expected a root label, found ')'", position=stream.position - 1
            )

        if stream.remaining and not self.config.allow_trailing_tokens:
            msg = f"{stream.remaining} unexpected token(s) after the root node"
            raise MalformedStructureError(msg, position=stream.position)

        return LabeledTree(root)

    def parse_node(self, source: str) -> Node[T]:
        """Parse ``source`` and return the bare root Node."""
        return self.parse(source).root

    def _build(self, stream: _TokenStream, depth: int) -> Node[T] | None:
        """Build one node and its subtree, or return None on a ``)``."""
        token = stream.next()
        if token == CLOSE:
            return None
        if token in (OPEN, SEPARATOR):
            msg = f"expected a label, found {token!r}"
            raise MalformedStructureError(msg, position=stream.position - 1)

        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            msg = f"nesting depth exceeds max_depth={max_depth}"
            raise DepthLimitError(msg, position=stream.position - 1)

        node: Node[T] = Node(self.label_parser(token))

        token = stream.next()
        if token != OPEN:
            msg = f"expected '(' after label, found {token!r}"
            raise MalformedStructureError(msg, position=stream.position - 1)

        while True:
            child = self._build(stream, depth + 1)
            if child is None:
                break
            node.children.append(child)

            token = stream.next()
            if token == CLOSE:
                break
            if token != SEPARATOR:
                msg = f"expected ',' or ')' after child, found {token!r}"
                raise MalformedStructureError(msg, position=stream.position - 1)

        return node
