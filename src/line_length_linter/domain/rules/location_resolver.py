"""Maps a flagged line back to the syntax node that should carry the diagnostic."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

import astroid

from line_length_linter.domain.constants import BLANK_OR_QUOTES

if TYPE_CHECKING:
    from line_length_linter.domain.protocols import SyntaxTreeProtocol


class LocationResolver:
    """
    Finds the first meaningful node for a flagged line.

    Candidates are the node found inside the line (at its first non-blank
    character) and the node at the reported offset, each followed by its
    ancestors. Nodes whose text is only blanks and quote characters, such as
    an empty string literal, are passed over.
    """

    def resolve(
        self,
        tree: SyntaxTreeProtocol | None,
        offset: int,
        line: str,
    ) -> astroid.nodes.NodeNG | None:
        """Return the anchor node, or None to fall back to a file-level location."""
        if tree is None:
            return None
        for candidate in self._candidates(tree, offset, line):
            if not self.is_blank_or_quotes(tree.text_of(candidate)):
                return candidate
        return None

    @staticmethod
    def is_blank_or_quotes(text: str) -> bool:
        return BLANK_OR_QUOTES.fullmatch(text) is not None

    @staticmethod
    def probe_offsets(offset: int, line: str) -> list[int]:
        """Offsets worth querying: start of the line's code, then the line end."""
        stripped = line.lstrip()
        if not stripped:
            return [offset]
        first_code = offset - len(line) + (len(line) - len(stripped))
        return [first_code, offset]

    def _candidates(
        self,
        tree: SyntaxTreeProtocol,
        offset: int,
        line: str,
    ) -> Iterator[astroid.nodes.NodeNG]:
        for probe in self.probe_offsets(offset, line):
            node = tree.node_at(probe)
            if node is not None:
                yield from tree.ancestors(node)
