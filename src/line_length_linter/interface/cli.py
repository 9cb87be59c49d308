"""CLI entry points for line-length-linter - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer

from line_length_linter.domain.config import ConfigurationLoader
from line_length_linter.domain.constants import LINE_LENGTH_BANNER, MAX_LINE_LENGTH_CODE
from line_length_linter.domain.protocols import (
    AstroidProtocol,
    FileSystemProtocol,
    LineLengthReporterProtocol,
)
from line_length_linter.domain.rules.max_line_length import MaxLineLengthRule
from line_length_linter.infrastructure.services.guidance_service import GuidanceService
from line_length_linter.use_cases.check_line_length import CheckLineLengthUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    astroid_gateway: AstroidProtocol
    filesystem: FileSystemProtocol
    reporter: LineLengthReporterProtocol
    guidance_service: GuidanceService


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_paths(paths: Optional[List[Path]]) -> list[str]:
        """Explicit paths as given, else src/ if it exists, else '.'."""
        if paths:
            return [str(p) for p in paths]
        src_dir = Path.cwd() / "src"
        if src_dir.is_dir():
            return ["src"]
        return ["."]

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="line-length-linter",
            help="Flag lines longer than the configured maximum. Run 'line-length-linter check' to scan.",
            add_completion=False,
        )

        @app.command()
        def check(
            paths: Optional[List[Path]] = typer.Argument(None, help="Files or directories (default: src/ or .)"),  # noqa: B008
            max_line_length: Optional[int] = typer.Option(
                None, "--max-line-length", min=1, help="Override the configured maximum line length"),
            exclude_package: Optional[bool] = typer.Option(
                None, "--exclude-package/--no-exclude-package", help="Ignore package statements"),
            exclude_imports: Optional[bool] = typer.Option(
                None, "--exclude-imports/--no-exclude-imports", help="Ignore import statements"),
            exclude_comments: Optional[bool] = typer.Option(
                None, "--exclude-comments/--no-exclude-comments", help="Ignore comment lines"),
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
        ) -> None:
            """Scan Python files and report overlong lines. Exits 1 when any are found."""
            CLIAppFactory.configure_logging(verbose)
            if verbose:
                typer.echo(LINE_LENGTH_BANNER)
            config = deps.config_loader.to_line_length_config().with_overrides(
                max_line_length=max_line_length,
                exclude_package_statements=exclude_package,
                exclude_import_statements=exclude_imports,
                exclude_comment_statements=exclude_comments,
            )
            use_case = CheckLineLengthUseCase(
                rule=MaxLineLengthRule(config),
                filesystem=deps.filesystem,
                astroid_gateway=deps.astroid_gateway,
            )
            result = use_case.execute(CLIAppFactory.resolve_target_paths(paths))
            deps.reporter.report(result)
            if result.has_violations:
                raise typer.Exit(code=1)

        @app.command()
        def rules() -> None:
            """Describe the rule, its settings and how to fix a violation."""
            entry = deps.guidance_service.get_entry(MAX_LINE_LENGTH_CODE) or {}
            config = deps.config_loader.to_line_length_config()
            typer.echo(f"{MAX_LINE_LENGTH_CODE} ({entry.get('symbol', MAX_LINE_LENGTH_CODE)})")
            typer.echo(f"  {entry.get('message_template', '')}")
            typer.echo(f"  severity: {entry.get('severity', 'style')}, "
                       f"remediation: ~{entry.get('debt_minutes', 5)} min")
            typer.echo(f"  max_line_length = {config.max_line_length}")
            typer.echo(f"  exclude_package_statements = {config.exclude_package_statements}")
            typer.echo(f"  exclude_import_statements = {config.exclude_import_statements}")
            typer.echo(f"  exclude_comment_statements = {config.exclude_comment_statements}")
            instructions = deps.guidance_service.get_manual_instructions(MAX_LINE_LENGTH_CODE)
            if instructions:
                typer.echo(f"\n{instructions}")

        return app
