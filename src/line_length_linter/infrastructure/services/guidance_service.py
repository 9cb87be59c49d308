"""GuidanceService: loads the rule registry and provides rule metadata and manual instructions."""

import logging
from pathlib import Path
from typing import cast

import yaml

from line_length_linter.domain.constants import LINTER_PREFIX
from line_length_linter.domain.registry_types import RuleRegistryEntry
from line_length_linter.domain.rule_msgs import RuleMsgBuilder

logger = logging.getLogger(__name__)


class GuidanceService:
    """Loads rule_registry.yaml and provides get_entry / get_manual_instructions."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            logger.debug("No rule registry at %s; using built-in rule metadata", self._path)
            return
        try:
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Could not load rule registry %s: %s", self._path, exc)
            return
        self._registry = (
            cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}
        )

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry for use by domain/use_cases."""
        return dict(self._registry)

    def get_entry(self, rule_code: str) -> RuleRegistryEntry | None:
        """Return the registry entry for a rule by code or symbol."""
        return RuleMsgBuilder.get_entry(self._registry, rule_code)

    def get_manual_instructions(self, rule_code: str) -> str:
        entry = self.get_entry(rule_code)
        if entry is None:
            return ""
        return str(entry.get("manual_instructions", ""))

    def get_codes(self) -> list[str]:
        """Return the codes of every rule in the registry."""
        return sorted(
            rule_id[len(LINTER_PREFIX):]
            for rule_id in self._registry
            if rule_id.startswith(LINTER_PREFIX)
        )
