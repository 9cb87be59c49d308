"""Pytest configuration shared by the line-length-linter suite.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
on sys.path so tests import the package without installing it.
"""

from collections.abc import Iterator

import pytest

from line_length_linter.infrastructure.di.container import LineLengthContainer


@pytest.fixture(autouse=True)
def reset_container() -> Iterator[None]:
    """Drop the shared plugin container so no test sees another's configuration."""
    LineLengthContainer._instance = None
    yield
    LineLengthContainer._instance = None
