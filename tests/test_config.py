"""Tests for the ParserConfig frozen dataclass.

Covers:
- Default values (allow_trailing_tokens=True, max_depth=None)
- Immutability (FrozenInstanceError on assignment)
- Validation: max_depth must be >= 1 when set
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from labeled_tree.config import ParserConfig


class TestParserConfigDefaults:
    def test_allows_trailing_tokens(self) -> None:
        assert ParserConfig().allow_trailing_tokens is True

    def test_no_depth_limit(self) -> None:
        assert ParserConfig().max_depth is None


class TestParserConfigCustom:
    def test_custom_values(self) -> None:
        config = ParserConfig(allow_trailing_tokens=False, max_depth=10)
        assert config.allow_trailing_tokens is False
        assert config.max_depth == 10

    def test_max_depth_one_is_valid(self) -> None:
        assert ParserConfig(max_depth=1).max_depth == 1


class TestParserConfigImmutability:
    def test_cannot_assign(self) -> None:
        config = ParserConfig()
        with pytest.raises(FrozenInstanceError):
            config.max_depth = 5  # type: ignore[misc]

    def test_equal_configs_compare_equal(self) -> None:
        assert ParserConfig(max_depth=3) == ParserConfig(max_depth=3)


class TestParserConfigValidation:
    @pytest.mark.parametrize("max_depth", [0, -1, -100])
    def test_rejects_non_positive_max_depth(self, max_depth: int) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            ParserConfig(max_depth=max_depth)
