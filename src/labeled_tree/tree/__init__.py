"""Tree subpackage: node type, bracket-notation parser and formatter.

Re-exports the public API for the tree module:
- Node: dataclass holding a label and its owned children
- BracketParser: builds a LabeledTree from ``label(child, ...)`` text
- tokenize: splits bracket notation into tokens
- format_tree: renders a node back into bracket notation
"""

from labeled_tree.tree.formatter import format_tree
from labeled_tree.tree.nodes import Node
from labeled_tree.tree.parser import BracketParser, tokenize

__all__ = ["BracketParser", "Node", "format_tree", "tokenize"]
