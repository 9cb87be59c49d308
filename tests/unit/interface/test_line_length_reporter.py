"""Tests for TerminalLineLengthReporter output."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from line_length_linter.domain.entities import CheckResult, SkippedFile
from line_length_linter.domain.rule_msgs import BUILTIN_REGISTRY
from line_length_linter.domain.rules import Violation
from line_length_linter.interface.reporters import TerminalLineLengthReporter


def make_violation(path: str, line_index: int, node=None) -> Violation:
    return Violation.at_line(
        code="C9801",
        message="Line too long.",
        file_path=path,
        line_index=line_index,
        offset=0,
        column=120,
        node=node,
    )


def test_reports_sorted_violations_and_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    node = MagicMock()
    node.col_offset = 4
    result = CheckResult(
        files_checked=3,
        violations=[
            make_violation(str(tmp_path / "b.py"), 0),
            make_violation(str(tmp_path / "a.py"), 9, node=node),
            make_violation(str(tmp_path / "a.py"), 2),
        ],
    )

    TerminalLineLengthReporter(dict(BUILTIN_REGISTRY), root=tmp_path).report(result)

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "a.py:3:120: C9801 (max-line-length-exceeded) Line too long.",
        "a.py:10:4: C9801 (max-line-length-exceeded) Line too long.",
        "b.py:1:120: C9801 (max-line-length-exceeded) Line too long.",
        "Found 3 overlong line(s) in 2 of 3 file(s).",
    ]


def test_paths_outside_root_are_unchanged(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    result = CheckResult(files_checked=1, violations=[make_violation("/elsewhere/c.py", 0)])

    TerminalLineLengthReporter({}, root=tmp_path).report(result)

    first = capsys.readouterr().out.splitlines()[0]
    assert first == "/elsewhere/c.py:1:120: C9801 (C9801) Line too long."


def test_clean_run_and_skipped_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    result = CheckResult(
        files_checked=2,
        skipped=[SkippedFile(path=str(tmp_path / "bad.py"), reason="invalid start byte")],
    )

    TerminalLineLengthReporter(dict(BUILTIN_REGISTRY), root=tmp_path).report(result)

    captured = capsys.readouterr()
    assert captured.out.strip() == "All clear: 2 file(s) checked."
    assert "bad.py: skipped (invalid start byte)" in captured.err
