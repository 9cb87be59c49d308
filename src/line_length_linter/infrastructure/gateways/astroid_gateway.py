"""astroid-backed syntax tree access: parsing and offset queries."""

from __future__ import annotations

import logging
from bisect import bisect_right
from itertools import accumulate
from typing import Iterator, Optional, Sequence

import astroid

from line_length_linter.domain.entities import SourceFile
from line_length_linter.domain.protocols import AstroidProtocol, SyntaxTreeProtocol

logger = logging.getLogger(__name__)

# (lineno, utf-8 byte column): astroid positions count bytes, not characters.
Position = tuple[int, int]


class AstroidSyntaxTree(SyntaxTreeProtocol):
    """
    Offset-addressable view over an astroid Module and the lines it was parsed from.

    Offsets are character offsets with one terminator counted per line, the same
    accounting the line scanner uses. The Module itself is never returned: it
    stands for the file-level location.
    """

    def __init__(self, module: astroid.nodes.Module, lines: Sequence[str]) -> None:
        self._module = module
        self._lines = lines
        self._line_starts = [0, *accumulate(len(line) + 1 for line in lines)][: len(lines)]

    @property
    def module(self) -> astroid.nodes.Module:
        return self._module

    def position_of(self, offset: int) -> Optional[Position]:
        """Translate a character offset to a (lineno, byte column) position."""
        if offset < 0 or not self._lines:
            return None
        index = bisect_right(self._line_starts, offset) - 1
        line = self._lines[index]
        column = offset - self._line_starts[index]
        if column > len(line):
            return None
        return (index + 1, len(line[:column].encode("utf-8")))

    def node_at(self, offset: int) -> Optional[astroid.nodes.NodeNG]:
        position = self.position_of(offset)
        if position is None:
            return None
        return self._deepest(self._module, position)

    def ancestors(self, node: astroid.nodes.NodeNG) -> Iterator[astroid.nodes.NodeNG]:
        current: Optional[astroid.nodes.NodeNG] = node
        while current is not None and not isinstance(current, astroid.nodes.Module):
            yield current
            current = current.parent

    def text_of(self, node: astroid.nodes.NodeNG) -> str:
        """Slice the node's source from the lines; as_string() when positions are missing."""
        if not self._has_span(node) or node.end_lineno > len(self._lines):
            return node.as_string()
        first = node.lineno - 1
        last = node.end_lineno - 1
        if first == last:
            line = self._lines[first]
            start = self._char_column(line, node.col_offset)
            return line[start : self._char_column(line, node.end_col_offset)]
        head = self._lines[first][self._char_column(self._lines[first], node.col_offset) :]
        body = list(self._lines[first + 1 : last])
        tail = self._lines[last][: self._char_column(self._lines[last], node.end_col_offset)]
        return "\n".join([head, *body, tail])

    @staticmethod
    def _char_column(line: str, byte_column: int) -> int:
        return len(line.encode("utf-8")[:byte_column].decode("utf-8", errors="ignore"))

    @staticmethod
    def _has_span(node: astroid.nodes.NodeNG) -> bool:
        return None not in (
            getattr(node, "lineno", None),
            getattr(node, "col_offset", None),
            getattr(node, "end_lineno", None),
            getattr(node, "end_col_offset", None),
        )

    def _covers(self, node: astroid.nodes.NodeNG, position: Position) -> bool:
        if not self._has_span(node):
            return False
        start = (node.lineno, node.col_offset)
        end = (node.end_lineno, node.end_col_offset)
        return start <= position < end

    def _deepest(
        self, node: astroid.nodes.NodeNG, position: Position
    ) -> Optional[astroid.nodes.NodeNG]:
        """Descend through children; unpositioned children are searched transparently."""
        for child in node.get_children():
            if self._has_span(child):
                if self._covers(child, position):
                    return self._deepest(child, position) or child
                # Decorators sit above the def line, outside the function's own span.
                decorators = getattr(child, "decorators", None)
                if decorators is not None and self._covers(decorators, position):
                    return self._deepest(decorators, position) or decorators
                continue
            inner = self._deepest(child, position)
            if inner is not None:
                return inner
        return None


class AstroidGateway(AstroidProtocol):
    """AST gateway: parses sources with astroid and wraps them for offset queries."""

    def parse_source(self, source: str, file_path: str = "") -> Optional[astroid.nodes.Module]:
        try:
            return astroid.parse(source, path=file_path or None)
        except (astroid.AstroidSyntaxError, ValueError) as exc:
            logger.warning("Could not parse %s: %s", file_path or "<source>", exc)
            return None

    def build_syntax_tree(self, source_file: SourceFile) -> Optional[AstroidSyntaxTree]:
        module = self.parse_source(source_file.text, source_file.path)
        if module is None:
            return None
        return AstroidSyntaxTree(module, source_file.lines)
