"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path
from typing import List

from line_length_linter.domain.protocols import FileSystemProtocol

# Never descend into these when globbing a directory.
_SKIPPED_DIRS = frozenset({".git", ".hg", ".tox", ".venv", "venv", "__pycache__", "node_modules"})


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        return str(Path(path).resolve())

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def glob_python_files(self, path: str) -> List[str]:
        """Get all Python files in path (recursive if directory), sorted."""
        path_obj = Path(path).resolve()
        if path_obj.is_dir():
            return sorted(
                str(p)
                for p in path_obj.glob("**/*.py")
                if not _SKIPPED_DIRS.intersection(p.relative_to(path_obj).parts)
            )
        return [str(path_obj)] if path_obj.suffix == ".py" else []

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read a file's text. Newlines are left untranslated."""
        with open(path, encoding=encoding, newline="") as f:
            return f.read()
