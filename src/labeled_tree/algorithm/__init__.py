"""Structural algorithms over labeled-tree nodes."""

from labeled_tree.algorithm.branches import longest_branch
from labeled_tree.algorithm.levels import max_term_level, min_term_level, term_levels
from labeled_tree.algorithm.merge import join_equals
from labeled_tree.algorithm.shape import label_counts, same_shape, shape_signature

__all__ = [
    "join_equals",
    "label_counts",
    "longest_branch",
    "max_term_level",
    "min_term_level",
    "same_shape",
    "shape_signature",
    "term_levels",
]
