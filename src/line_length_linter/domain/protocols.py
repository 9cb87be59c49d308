from typing import TYPE_CHECKING, Iterator, Optional, Protocol

if TYPE_CHECKING:
    import astroid

    from line_length_linter.domain.entities import CheckResult, SourceFile


class SyntaxTreeProtocol(Protocol):
    """Read-only, offset-addressable view of a parsed file."""

    def node_at(self, offset: int) -> Optional["astroid.nodes.NodeNG"]:
        """Return the deepest node covering the character offset, or None."""
        ...

    def ancestors(self, node: "astroid.nodes.NodeNG") -> Iterator["astroid.nodes.NodeNG"]:
        """Yield node itself, then its enclosing nodes. The file root is not yielded."""
        ...

    def text_of(self, node: "astroid.nodes.NodeNG") -> str:
        """Return the source text spanned by node."""
        ...


class AstroidProtocol(Protocol):
    def parse_source(self, source: str, file_path: str = "") -> Optional["astroid.nodes.Module"]:
        """Parse source text and return the astroid Module node, or None on syntax errors."""
        ...

    def build_syntax_tree(self, source_file: "SourceFile") -> Optional[SyntaxTreeProtocol]:
        """Parse source_file and wrap the module for offset queries."""
        ...


class FileSystemProtocol(Protocol):
    def resolve_path(self, path: str) -> str:
        ...

    def is_directory(self, path: str) -> bool:
        ...

    def glob_python_files(self, path: str) -> list[str]:
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        ...


class LineLengthReporterProtocol(Protocol):
    def report(self, result: "CheckResult") -> None:
        """Render the result of a check run."""
        ...
