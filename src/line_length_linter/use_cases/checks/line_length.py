"""Max line length check (C9801)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid
from pylint.checkers import BaseRawFileChecker
from pylint.constants import WarningScope

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from line_length_linter.domain.config import ConfigurationLoader
from line_length_linter.domain.entities import SourceFile
from line_length_linter.domain.registry_types import RuleRegistryEntry
from line_length_linter.domain.rule_msgs import RuleMsgBuilder
from line_length_linter.domain.rules.max_line_length import MaxLineLengthRule
from line_length_linter.infrastructure.gateways.astroid_gateway import AstroidSyntaxTree


class MaxLineLengthChecker(BaseRawFileChecker):
    """C9801: line longer than the configured maximum. Thin: delegates to MaxLineLengthRule."""

    name: str = "line-length"
    CODES = ["C9801"]

    def __init__(
        self,
        linter: "PyLinter",
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        # Raw checkers default to line scope; C9801 is anchored on nodes.
        self.msgs = {  # type: ignore[assignment]
            code: (*msg, {"scope": WarningScope.NODE})
            for code, msg in RuleMsgBuilder.build_msgs_for_codes(registry, self.CODES).items()
        }
        super().__init__(linter)
        self.config_loader = config_loader
        self._rule = MaxLineLengthRule(config_loader.to_line_length_config())

    @property
    def rule(self) -> MaxLineLengthRule:
        return self._rule

    def process_module(self, node: astroid.nodes.Module) -> None:
        """Scan the module's raw lines; report each violation via add_message."""
        source_file = self._read_source(node)
        tree = AstroidSyntaxTree(node, source_file.lines)
        for v in self._rule.check(source_file.lines, tree, source_file.path):
            if v.node is not None:
                self.add_message(v.code, line=v.lineno, node=v.node)
            else:
                # File-level: pylint needs a node for node-scoped messages.
                self.add_message(
                    v.code,
                    line=v.lineno,
                    node=node,
                    col_offset=v.column,
                )

    @staticmethod
    def _read_source(node: astroid.nodes.Module) -> SourceFile:
        with node.stream() as stream:
            raw = stream.read()
        text = raw.decode(node.file_encoding or "utf-8", errors="replace")
        return SourceFile.from_text(getattr(node, "file", "") or "", text)
