"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from line_length_linter.infrastructure.di.container import LineLengthContainer
from line_length_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = LineLengthContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        astroid_gateway=container.get_astroid_gateway(),
        filesystem=container.get_filesystem_gateway(),
        reporter=container.get_reporter(),
        guidance_service=container.get_guidance_service(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
