"""TreeMetrics dataclass: the result type returned by measure()."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["TreeMetrics"]


@dataclass(frozen=True, slots=True)
class TreeMetrics:
    """Structural metrics of one tree.

    Attributes:
        longest_branch: Node count of the longest unbranched chain.
        min_term_level: Shallowest leaf level (root is level 0).
        max_term_level: Deepest leaf level.
        terminal_count: Number of leaves.
        computation_time_ms: Wall-clock duration of the measurement in
            milliseconds.
    """

    longest_branch: int
    min_term_level: int
    max_term_level: int
    terminal_count: int
    computation_time_ms: float
