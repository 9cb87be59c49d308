"""Domain models for rules and violations."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Sequence

import astroid

if TYPE_CHECKING:
    from line_length_linter.domain.protocols import SyntaxTreeProtocol

__all__ = [
    "Checkable",
    "Violation",
]


@dataclass(frozen=True)
class Violation:
    """A rule violation with code, message, location, and the anchoring node (if any)."""

    code: str
    message: str
    location: str
    node: astroid.nodes.NodeNG | None
    line_index: int
    """Zero-based index of the flagged line."""
    offset: int
    """Character offset of the end of the flagged line, counting one terminator per line."""
    column: int = 0

    @property
    def lineno(self) -> int:
        """One-based line number, as editors and Pylint count."""
        return self.line_index + 1

    @property
    def file_path(self) -> str:
        return self.location.rsplit(":", 2)[0]

    @property
    def display_column(self) -> int:
        """Column of the anchoring node when it has one, else the configured limit."""
        node_column = getattr(self.node, "col_offset", None)
        return node_column if isinstance(node_column, int) else self.column

    @property
    def is_file_level(self) -> bool:
        """True when no meaningful node was found and the raw offset is the location."""
        return self.node is None

    @classmethod
    def at_line(
        cls,
        *,
        code: str,
        message: str,
        file_path: str,
        line_index: int,
        offset: int,
        column: int,
        node: astroid.nodes.NodeNG | None = None,
    ) -> "Violation":
        """Build a Violation with a path:lineno:col location string."""
        return cls(
            code=code,
            message=message,
            location=f"{file_path}:{line_index + 1}:{column}",
            node=node,
            line_index=line_index,
            offset=offset,
            column=column,
        )


class Checkable(Protocol):
    """One-and-done check over a whole file: given its lines and tree, return violations."""

    code: str
    description: str

    def check(
        self,
        lines: Sequence[str],
        tree: "SyntaxTreeProtocol | None",
        file_path: str = "",
    ) -> list[Violation]:
        """Interrogate a file for breaches."""
        ...
