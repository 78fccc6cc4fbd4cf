"""ParserConfig: immutable options for BracketParser.

The defaults reproduce the permissive reference behaviour: trailing tokens
after the root are ignored and nesting depth is unbounded.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for BracketParser.

    Attributes:
        allow_trailing_tokens: When True (default), tokens left over after the
            root node is complete are silently ignored.  When False they raise
            MalformedStructureError.
        max_depth: Maximum nesting depth accepted by the parser (the root is
            depth 1).  None disables the check.  Useful for untrusted input,
            since parsing and every algorithm recurse once per level.
    """

    allow_trailing_tokens: bool = True
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1 or None, got {self.max_depth}"
            raise ValueError(msg)
