"""Configuration for the fancy list rule.

Config is consumed once, when the rule is built for a MarkdownIt instance.
It is immutable afterwards, so one configured parser can be shared freely.

Usage:
    from fancylists.config import FancyListsConfig

    config = FancyListsConfig(allow_ordinal=True)
    md = MarkdownIt().use(fancy_lists_plugin, config=config)

    # Or from an external mapping (YAML, TOML, framework settings)
    config = FancyListsConfig.from_dict({"allow_multi_letter": True})

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FancyListsConfig:
    """Immutable fancy list configuration.

    Values are not validated; the host decides what it passes in.

    Attributes:
        allow_ordinal: Recognize markers with an ordinal indicator (1º.)
        allow_multi_letter: Recognize two and three letter alphabetic
            markers (aa., AB))

    """

    allow_ordinal: bool = False
    allow_multi_letter: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> FancyListsConfig:
        """Create FancyListsConfig from a mapping.

        Only includes keys that are valid FancyListsConfig fields; unknown
        keys are silently ignored.

        Args:
            config_dict: Mapping with config values. Keys should match
                FancyListsConfig attribute names.

        Returns:
            New FancyListsConfig instance with values from the mapping.

        Example:
            >>> config = FancyListsConfig.from_dict({
            ...     "allow_ordinal": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.allow_ordinal
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
DEFAULT_CONFIG: FancyListsConfig = FancyListsConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "FancyListsConfig",
]
