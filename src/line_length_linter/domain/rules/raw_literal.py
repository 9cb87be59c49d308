"""Triple-quoted literal handling for the line scanner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from line_length_linter.domain.constants import RAW_STRING_DELIMITER

logger = logging.getLogger(__name__)


class ScanPhase(Enum):
    SCANNING = "scanning"
    SKIPPING_RAW = "skipping_raw"
    DONE = "done"


@dataclass
class ScanState:
    """Cursor over an immutable line sequence. Lives for one scan only."""

    index: int = 0
    offset: int = 0
    phase: ScanPhase = ScanPhase.SCANNING

    @property
    def inside_raw(self) -> bool:
        return self.phase is ScanPhase.SKIPPING_RAW


class RawLiteralSkipper:
    """
    Keeps multi-line triple-quoted literals out of the length check.

    The scanner only consults it for lines that already fail the length check.
    Such a line is not flagged when it carries the delimiter, and when it holds
    an odd number of them it opens a block: skip_block() then consumes every
    following line up to and including the next delimiter line, or up to the
    last line when the block is never closed. Short delimiter lines open nothing.
    """

    @staticmethod
    def contains_raw_delimiter(line: str) -> bool:
        return RAW_STRING_DELIMITER in line

    @staticmethod
    def opens_block(line: str) -> bool:
        """A line like x = \"\"\"abc\"\"\" opens and closes on itself."""
        return line.count(RAW_STRING_DELIMITER) % 2 == 1

    def skip_block(self, lines: Sequence[str], state: ScanState) -> None:
        """
        Advance state past the literal that starts at state.index.

        On return state.index is the closing line (or the last line) and
        state.offset is the end of that line, terminators of the consumed lines
        included. The caller still adds the terminator of the final line.
        """
        state.phase = ScanPhase.SKIPPING_RAW
        opening = state.index
        while state.index + 1 < len(lines):
            state.index += 1
            state.offset += 1 + len(lines[state.index])
            if self.contains_raw_delimiter(lines[state.index]):
                state.phase = ScanPhase.SCANNING
                logger.debug("Skipped raw literal on lines %d-%d", opening + 1, state.index + 1)
                return
        logger.debug("Raw literal opened on line %d is not closed before end of file", opening + 1)
