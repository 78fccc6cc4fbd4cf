"""labeled-tree - bracket-notation parsing and structural metrics for labeled trees."""

from __future__ import annotations

from labeled_tree.api import dumps, measure, parse
from labeled_tree.config import ParserConfig
from labeled_tree.errors import (
    DepthLimitError,
    EmptyInputError,
    MalformedStructureError,
    ParseError,
)
from labeled_tree.labeled import LabeledTree
from labeled_tree.result import TreeMetrics
from labeled_tree.tree import BracketParser, Node, format_tree

__version__: str = "0.1.0"
__all__: list[str] = [
    "BracketParser",
    "DepthLimitError",
    "EmptyInputError",
    "LabeledTree",
    "MalformedStructureError",
    "Node",
    "ParseError",
    "ParserConfig",
    "TreeMetrics",
    "dumps",
    "format_tree",
    "measure",
    "parse",
]
