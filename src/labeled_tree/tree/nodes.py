"""Node dataclass: the recursive building block of a labeled tree.

A node owns its label and an ordered list of child nodes.  Children are never
shared between parents and hold no reference back to them, so the structure is
a plain tree by construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class Node(Generic[T]):
    """A node in a labeled n-ary tree.

    Attributes:
        label:    The value stored at this node.  Must be hashable for
                  ``join_equals`` and printable for the formatter.
        children: Owned child nodes in insertion order.  Must use
                  field(default_factory=list) so each instance gets its own list.
    """

    label: T
    children: list[Node[T]] = field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        """True when the node has no children (a leaf)."""
        return not self.children
