"""Tests for FancyListsConfig."""

from __future__ import annotations

import dataclasses

import pytest

from fancylists.config import DEFAULT_CONFIG, FancyListsConfig


class TestFancyListsConfig:
    def test_defaults(self) -> None:
        config = FancyListsConfig()
        assert config.allow_ordinal is False
        assert config.allow_multi_letter is False
        assert config == DEFAULT_CONFIG

    def test_frozen(self) -> None:
        config = FancyListsConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.allow_ordinal = True  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({FancyListsConfig(), FancyListsConfig()}) == 1


class TestFancyListsConfigFromDict:
    """Test FancyListsConfig.from_dict() factory method."""

    def test_from_dict_basic(self) -> None:
        config = FancyListsConfig.from_dict({"allow_ordinal": True})
        assert config.allow_ordinal is True
        assert config.allow_multi_letter is False

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = FancyListsConfig.from_dict({
            "allow_multi_letter": True,
            "unknown_key": "ignored",
            "another_unknown": 42,
        })
        assert config.allow_multi_letter is True

    def test_from_dict_empty(self) -> None:
        assert FancyListsConfig.from_dict({}) == FancyListsConfig()

    def test_from_dict_all_fields(self) -> None:
        config = FancyListsConfig.from_dict({"allow_ordinal": True, "allow_multi_letter": True})
        assert config == FancyListsConfig(allow_ordinal=True, allow_multi_letter=True)
