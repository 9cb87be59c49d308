"""Max line length rule (C9801)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from line_length_linter.domain.config import LineLengthConfig
from line_length_linter.domain.constants import (
    MAX_LINE_LENGTH_CODE,
    MAX_LINE_LENGTH_MESSAGE,
)
from line_length_linter.domain.rules import Checkable, Violation
from line_length_linter.domain.rules.line_classifier import LineClassifier
from line_length_linter.domain.rules.location_resolver import LocationResolver
from line_length_linter.domain.rules.raw_literal import (
    RawLiteralSkipper,
    ScanPhase,
    ScanState,
)

if TYPE_CHECKING:
    from line_length_linter.domain.protocols import SyntaxTreeProtocol


class MaxLineLengthRule(Checkable):
    """
    Rule for C9801: line longer than the configured maximum.

    Stateless between files; every call to scan() builds its own ScanState, so
    one instance may serve concurrent scans.
    """

    code: str = MAX_LINE_LENGTH_CODE
    description: str = MAX_LINE_LENGTH_MESSAGE

    def __init__(
        self,
        config: LineLengthConfig | None = None,
        classifier: LineClassifier | None = None,
        skipper: RawLiteralSkipper | None = None,
        resolver: LocationResolver | None = None,
    ) -> None:
        self._config = config or LineLengthConfig()
        self._classifier = classifier or LineClassifier(self._config)
        self._skipper = skipper or RawLiteralSkipper()
        self._resolver = resolver or LocationResolver()

    @property
    def config(self) -> LineLengthConfig:
        return self._config

    def scan(self, lines: Sequence[str], state: ScanState | None = None) -> list[tuple[int, int]]:
        """
        Return (line_index, offset) for every over-length, non-exempt line.

        offset is the end of the flagged line: the lengths of all lines up to
        and including it, plus one terminator for each line before it. Pass a
        fresh ScanState to inspect the cursor once the scan is DONE.
        """
        if state is None:
            state = ScanState()
        hits: list[tuple[int, int]] = []
        while state.index < len(lines):
            line = lines[state.index]
            state.offset += len(line)
            if not self._classifier.is_valid_line(line):
                # An over-length delimiter line is skipped, not flagged.
                if not self._skipper.contains_raw_delimiter(line):
                    hits.append((state.index, state.offset))
                elif self._skipper.opens_block(line):
                    self._skipper.skip_block(lines, state)
            state.offset += 1
            state.index += 1
        state.phase = ScanPhase.DONE
        return hits

    def check(
        self,
        lines: Sequence[str],
        tree: SyntaxTreeProtocol | None,
        file_path: str = "",
    ) -> list[Violation]:
        """Scan lines and anchor each hit on the most meaningful node of tree."""
        violations: list[Violation] = []
        for index, offset in self.scan(lines):
            node = self._resolver.resolve(tree, offset, lines[index])
            violations.append(
                Violation.at_line(
                    code=self.code,
                    message=MAX_LINE_LENGTH_MESSAGE,
                    file_path=file_path,
                    line_index=index,
                    offset=offset,
                    column=self._config.max_line_length,
                    node=node,
                )
            )
        return violations
