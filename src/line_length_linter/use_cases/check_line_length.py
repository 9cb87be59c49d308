"""Check line length across files without going through Pylint."""

import logging
from collections.abc import Iterable

from line_length_linter.domain.entities import CheckResult, SkippedFile, SourceFile
from line_length_linter.domain.protocols import AstroidProtocol, FileSystemProtocol
from line_length_linter.domain.rules import Violation
from line_length_linter.domain.rules.max_line_length import MaxLineLengthRule

logger = logging.getLogger(__name__)


class CheckLineLengthUseCase:
    """
    Read, parse and scan each Python file under the given paths.

    Files are independent: an unreadable file is recorded in CheckResult.skipped
    and an unparsable one is still scanned, with its violations reported at file
    level.
    """

    def __init__(
        self,
        rule: MaxLineLengthRule,
        filesystem: FileSystemProtocol,
        astroid_gateway: AstroidProtocol,
    ) -> None:
        self._rule = rule
        self._filesystem = filesystem
        self._astroid_gateway = astroid_gateway

    def execute(self, paths: Iterable[str]) -> CheckResult:
        result = CheckResult()
        for file_path in self._discover(paths):
            try:
                text = self._filesystem.read_text(file_path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping %s: %s", file_path, exc)
                result.skipped.append(SkippedFile(path=file_path, reason=str(exc)))
                continue
            result.violations.extend(self.check_source(SourceFile.from_text(file_path, text)))
            result.files_checked += 1
        return result

    def check_source(self, source_file: SourceFile) -> list[Violation]:
        tree = self._astroid_gateway.build_syntax_tree(source_file)
        violations = self._rule.check(source_file.lines, tree, source_file.path)
        logger.debug("%s: %d violation(s)", source_file.path, len(violations))
        return violations

    def _discover(self, paths: Iterable[str]) -> list[str]:
        discovered: list[str] = []
        seen: set[str] = set()
        for path in paths:
            files = self._filesystem.glob_python_files(path)
            if not files:
                logger.warning("No Python files found under %s", path)
            for file_path in files:
                if file_path not in seen:
                    seen.add(file_path)
                    discovered.append(file_path)
        return discovered
