"""Configuration for the line length rule. Immutable value objects created by Infrastructure."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from line_length_linter.domain.constants import (
    DEFAULT_EXCLUDE_COMMENT_STATEMENTS,
    DEFAULT_EXCLUDE_IMPORT_STATEMENTS,
    DEFAULT_EXCLUDE_PACKAGE_STATEMENTS,
    DEFAULT_MAX_LINE_LENGTH,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineLengthConfig:
    """Settings for a single scan. Shared read-only between scans."""

    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    exclude_package_statements: bool = DEFAULT_EXCLUDE_PACKAGE_STATEMENTS
    exclude_import_statements: bool = DEFAULT_EXCLUDE_IMPORT_STATEMENTS
    exclude_comment_statements: bool = DEFAULT_EXCLUDE_COMMENT_STATEMENTS

    def with_overrides(self, **overrides: int | bool | None) -> LineLengthConfig:
        """Return a copy with every non-None override applied (CLI flags)."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from the [tool.line-length-linter] table. Domain does
    not read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        self._config = ConfigurationLoader.normalize_keys(config_dict)
        if self._config:
            self.validate_config(self._config)

    @staticmethod
    def normalize_keys(config: dict[str, object]) -> dict[str, object]:
        """Accept both max-line-length and max_line_length spellings."""
        return {str(key).replace("-", "_"): value for key, value in config.items()}

    def validate_config(self, config: dict[str, object]) -> None:
        """Validate configuration values; bad values are reported and ignored."""
        known = set(LineLengthConfig.__dataclass_fields__)
        for key in sorted(set(config) - known):
            logger.warning("Configuration Warning: unknown option '%s' is ignored.", key)

        if "max_line_length" in config and self._as_length(config["max_line_length"]) is None:
            logger.warning(
                "Configuration Warning: 'max_line_length' must be a positive integer, got %r. "
                "Using %d.",
                config["max_line_length"],
                DEFAULT_MAX_LINE_LENGTH,
            )

        for key in (
            "exclude_package_statements",
            "exclude_import_statements",
            "exclude_comment_statements",
        ):
            if key in config and not isinstance(config[key], bool):
                logger.warning(
                    "Configuration Warning: '%s' must be a boolean, got %r. Using the default.",
                    key,
                    config[key],
                )

    @staticmethod
    def _as_length(raw: object) -> int | None:
        # bool is an int subclass; "true" is not a length
        if isinstance(raw, bool) or not isinstance(raw, int):
            return None
        return raw if raw > 0 else None

    def _get_bool(self, key: str, default: bool) -> bool:
        raw = self._config.get(key, default)
        return raw if isinstance(raw, bool) else default

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def max_line_length(self) -> int:
        length = self._as_length(self._config.get("max_line_length"))
        return length if length is not None else DEFAULT_MAX_LINE_LENGTH

    @property
    def exclude_package_statements(self) -> bool:
        return self._get_bool("exclude_package_statements", DEFAULT_EXCLUDE_PACKAGE_STATEMENTS)

    @property
    def exclude_import_statements(self) -> bool:
        return self._get_bool("exclude_import_statements", DEFAULT_EXCLUDE_IMPORT_STATEMENTS)

    @property
    def exclude_comment_statements(self) -> bool:
        return self._get_bool("exclude_comment_statements", DEFAULT_EXCLUDE_COMMENT_STATEMENTS)

    def to_line_length_config(self) -> LineLengthConfig:
        """Build the immutable scan settings."""
        return LineLengthConfig(
            max_line_length=self.max_line_length,
            exclude_package_statements=self.exclude_package_statements,
            exclude_import_statements=self.exclude_import_statements,
            exclude_comment_statements=self.exclude_comment_statements,
        )
