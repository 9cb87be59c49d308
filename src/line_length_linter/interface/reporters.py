"""Terminal reporter for line length results."""

from collections import Counter
from pathlib import Path

import typer

from line_length_linter.domain.entities import CheckResult
from line_length_linter.domain.protocols import LineLengthReporterProtocol
from line_length_linter.domain.registry_types import RuleRegistryEntry
from line_length_linter.domain.rule_msgs import RuleMsgBuilder


class TerminalLineLengthReporter(LineLengthReporterProtocol):
    """Prints one path:line:col line per violation, then a summary."""

    def __init__(self, registry: dict[str, RuleRegistryEntry], root: Path | None = None) -> None:
        self._registry = registry
        self._root = root

    def _display_path(self, path: str) -> str:
        """Path relative to root (cwd by default); unchanged when outside it."""
        root = self._root or Path.cwd()
        try:
            return str(Path(path).relative_to(root))
        except ValueError:
            return path

    def _symbol(self, code: str) -> str:
        entry = RuleMsgBuilder.get_entry(self._registry, code)
        return str(entry.get("symbol", code)) if entry else code

    def report(self, result: CheckResult) -> None:
        for v in sorted(result.violations, key=lambda v: (v.file_path, v.lineno)):
            typer.echo(
                f"{self._display_path(v.file_path)}:{v.lineno}:{v.display_column}: "
                f"{v.code} ({self._symbol(v.code)}) {v.message}"
            )

        for skipped in result.skipped:
            typer.secho(
                f"{self._display_path(skipped.path)}: skipped ({skipped.reason})",
                fg=typer.colors.YELLOW,
                err=True,
            )

        if result.has_violations:
            per_file = Counter(v.file_path for v in result.violations)
            typer.secho(
                f"Found {len(result.violations)} overlong line(s) in {len(per_file)} of "
                f"{result.files_checked} file(s).",
                fg=typer.colors.RED,
            )
        else:
            typer.secho(
                f"All clear: {result.files_checked} file(s) checked.",
                fg=typer.colors.GREEN,
            )
