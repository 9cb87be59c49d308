from typing import TYPE_CHECKING, Any, Optional, cast

from line_length_linter.domain.config import ConfigurationLoader
from line_length_linter.infrastructure.config_file_loader import ConfigFileLoader
from line_length_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from line_length_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from line_length_linter.infrastructure.services.guidance_service import GuidanceService
from line_length_linter.interface.reporters import TerminalLineLengthReporter

if TYPE_CHECKING:
    from line_length_linter.domain.protocols import (
        AstroidProtocol,
        FileSystemProtocol,
        LineLengthReporterProtocol,
    )


class LineLengthContainer:
    """Dependency Injection Container for the line length linter."""

    _instance: Optional["LineLengthContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    @classmethod
    def get_instance(cls) -> "LineLengthContainer":
        """Shared container for the Pylint plugin, which has no composition root of its own."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))
        self.register_singleton("AstroidGateway", AstroidGateway())
        self.register_singleton("FileSystemGateway", FileSystemGateway())

        guidance_service = GuidanceService()
        self.register_singleton("GuidanceService", guidance_service)
        self.register_singleton(
            "LineLengthReporter",
            TerminalLineLengthReporter(guidance_service.get_registry()),
        )

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_astroid_gateway(self) -> "AstroidProtocol":
        """Return the Astroid gateway."""
        return cast("AstroidProtocol", self.get("AstroidGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_guidance_service(self) -> GuidanceService:
        """Return the guidance service (rule registry)."""
        return cast(GuidanceService, self.get("GuidanceService"))

    def get_reporter(self) -> "LineLengthReporterProtocol":
        """Return the terminal reporter."""
        return cast("LineLengthReporterProtocol", self.get("LineLengthReporter"))
