"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Mapping
from typing import cast

from line_length_linter.domain.constants import (
    LINTER_PREFIX,
    MAX_LINE_LENGTH_CODE,
    MAX_LINE_LENGTH_DEBT_MINUTES,
    MAX_LINE_LENGTH_DISPLAY_NAME,
    MAX_LINE_LENGTH_MESSAGE,
    MAX_LINE_LENGTH_SEVERITY,
    MAX_LINE_LENGTH_SYMBOL,
)
from line_length_linter.domain.registry_types import RuleRegistryEntry

# Used when the packaged registry is missing or lacks an entry.
BUILTIN_REGISTRY: dict[str, RuleRegistryEntry] = {
    f"{LINTER_PREFIX}{MAX_LINE_LENGTH_CODE}": {
        "rule_id": MAX_LINE_LENGTH_CODE,
        "symbol": MAX_LINE_LENGTH_SYMBOL,
        "message_template": MAX_LINE_LENGTH_MESSAGE,
        "display_name": MAX_LINE_LENGTH_DISPLAY_NAME,
        "short_description": "Reports lines longer than the configured maximum line length.",
        "severity": MAX_LINE_LENGTH_SEVERITY,
        "debt_minutes": MAX_LINE_LENGTH_DEBT_MINUTES,
    },
}


class RuleMsgBuilder:
    """Builds Pylint msgs dict from a registry mapping."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> RuleRegistryEntry | None:
        """Return registry entry for a rule by code or symbol (public API)."""
        rule_id = f"{LINTER_PREFIX}{rule_code}"
        entry = registry.get(rule_id)
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in registry.items():
            if not rid.startswith(LINTER_PREFIX):
                continue
            if isinstance(e, dict) and e.get("symbol") == rule_code:
                return cast(RuleRegistryEntry, dict(e))
        return None

    @staticmethod
    def build_msgs_for_codes(
        registry: Mapping[str, RuleRegistryEntry], codes: list[str]
    ) -> dict[str, tuple[str, str, str]]:
        """Build Pylint msgs dict from a registry mapping for given rule codes.

        Registry keys are e.g. 'line-length.C9801'; values are RuleRegistryEntry dicts.
        Codes missing from registry fall back to BUILTIN_REGISTRY.
        Returns { code: (message_template, symbol, description) } for checker.msgs.
        """
        result: dict[str, tuple[str, str, str]] = {}
        for code in codes:
            entry = RuleMsgBuilder.get_entry(registry, code) or RuleMsgBuilder.get_entry(
                BUILTIN_REGISTRY, code
            )
            if entry and entry.get("message_template"):
                msg = entry["message_template"]
                symbol = entry.get("symbol") or code
                desc = (
                    entry.get("short_description")
                    or entry.get("display_name")
                    or code
                )
                result[code] = (str(msg), str(symbol), str(desc))
        return result
