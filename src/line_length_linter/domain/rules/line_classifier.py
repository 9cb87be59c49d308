"""Line exemptions for the max line length rule: package, import, comment and URL lines."""

from __future__ import annotations

from urllib.parse import urlsplit

from line_length_linter.domain.config import LineLengthConfig
from line_length_linter.domain.constants import (
    COMMENT_PREFIXES,
    IMPORT_PREFIX,
    PACKAGE_PREFIX,
    URL_TOKEN_STRIP_CHARS,
)


class LineClassifier:
    """
    Decides whether a single line is exempt from the length check.

    Each exemption is an independent predicate; is_exempt() is their union.
    The URL exemption ignores the configuration flags: a long address cannot be
    wrapped without breaking it.
    """

    def __init__(self, config: LineLengthConfig) -> None:
        self._config = config

    @property
    def max_line_length(self) -> int:
        return self._config.max_line_length

    def is_valid_line(self, line: str) -> bool:
        """True when the line is short enough or exempt."""
        return len(line) <= self._config.max_line_length or self.is_exempt(line)

    def is_exempt(self, line: str) -> bool:
        return (
            self.is_ignored_package_statement(line)
            or self.is_ignored_import_statement(line)
            or self.is_ignored_comment_statement(line)
            or self.last_argument_matches_url(line)
        )

    def is_ignored_package_statement(self, line: str) -> bool:
        if not self._config.exclude_package_statements:
            return False
        return line.lstrip().startswith(PACKAGE_PREFIX)

    def is_ignored_import_statement(self, line: str) -> bool:
        if not self._config.exclude_import_statements:
            return False
        return line.lstrip().startswith(IMPORT_PREFIX)

    def is_ignored_comment_statement(self, line: str) -> bool:
        if not self._config.exclude_comment_statements:
            return False
        return line.lstrip().startswith(COMMENT_PREFIXES)

    @staticmethod
    def last_argument_matches_url(line: str) -> bool:
        """True if the last whitespace-delimited token is a URL with a scheme and a host."""
        tokens = line.split()
        if not tokens:
            return False
        candidate = tokens[-1].strip(URL_TOKEN_STRIP_CHARS)
        try:
            parts = urlsplit(candidate)
        except ValueError:
            # e.g. unbalanced brackets in an IPv6 host
            return False
        return bool(parts.scheme) and bool(parts.netloc)
