"""Load [tool.line-length-linter] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

logger = logging.getLogger(__name__)

CONFIG_SECTION = "line-length-linter"


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml, walking up from a start directory."""

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Return the [tool.line-length-linter] table; empty when nothing is found."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError) as exc:
                logger.warning("Could not read %s: %s", config_file, exc)
                continue
            config_dict = (data.get("tool", {}) or {}).get(CONFIG_SECTION, {}) or {}
            if config_dict:
                logger.debug("Loaded [tool.%s] from %s", CONFIG_SECTION, config_file)
            return config_dict
        return {}
