"""Domain entities: source files and check results."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from line_length_linter.domain.rules import Violation

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class SourceFile:
    """A file's text split into lines without terminators. Read-only for the rule."""

    path: str
    text: str
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, path: str, text: str) -> SourceFile:
        """Split on \\r\\n, \\r or \\n so offsets do not depend on the file's line endings."""
        return cls(path=path, text=text, lines=tuple(_LINE_BREAK.split(text)))


@dataclass(frozen=True)
class SkippedFile:
    """A file that could not be read; the run continues without it."""

    path: str
    reason: str


@dataclass
class CheckResult:
    """Outcome of checking a set of files."""

    files_checked: int = 0
    violations: list[Violation] = field(default_factory=list)
    skipped: list[SkippedFile] = field(default_factory=list)

    @property
    def has_violations(self) -> bool:
        return bool(self.violations)
