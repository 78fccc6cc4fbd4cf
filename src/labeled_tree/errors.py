"""Exceptions raised while parsing bracket notation.

All of them derive from ``ParseError`` (itself a ``ValueError``) so callers can
catch a single type at the top-level call.  Failures raised by the injected
label parser are not wrapped and surface as-is.
"""

from __future__ import annotations

__all__ = [
    "DepthLimitError",
    "EmptyInputError",
    "MalformedStructureError",
    "ParseError",
]


class ParseError(ValueError):
    """Base class for bracket-notation parse failures.

    Attributes:
        position: Index of the offending token in the token stream, or None
            when the failure is not tied to a single token.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class EmptyInputError(ParseError):
    """The token stream ran out while another token was required."""


class MalformedStructureError(ParseError):
    """A token was found where the grammar expects something else."""


class DepthLimitError(MalformedStructureError):
    """Nesting exceeded ``ParserConfig.max_depth``."""
