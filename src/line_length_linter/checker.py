"""
Pylint plugin entry point: load with --load-plugins=line_length_linter.checker.
"""

from pylint.lint import PyLinter

from line_length_linter.infrastructure.di.container import LineLengthContainer
from line_length_linter.use_cases.checks.line_length import MaxLineLengthChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = LineLengthContainer.get_instance()
    config_loader = container.get_config_loader()
    registry = container.get_guidance_service().get_registry()

    linter.register_checker(MaxLineLengthChecker(
        linter, config_loader=config_loader, registry=registry))
