"""Shared constants for the line length rule."""

import re

# Registry keys look like "line-length.C9801"
LINTER_PREFIX: str = "line-length."

MAX_LINE_LENGTH_CODE: str = "C9801"
MAX_LINE_LENGTH_SYMBOL: str = "max-line-length-exceeded"
MAX_LINE_LENGTH_MESSAGE: str = (
    "Line detected, which is longer than the defined maximum line length in the code style."
)
MAX_LINE_LENGTH_DISPLAY_NAME: str = "Max Line Length"
MAX_LINE_LENGTH_SEVERITY: str = "style"
MAX_LINE_LENGTH_DEBT_MINUTES: int = 5

DEFAULT_MAX_LINE_LENGTH: int = 120
DEFAULT_EXCLUDE_PACKAGE_STATEMENTS: bool = True
DEFAULT_EXCLUDE_IMPORT_STATEMENTS: bool = True
DEFAULT_EXCLUDE_COMMENT_STATEMENTS: bool = False

PACKAGE_PREFIX: str = "package "
IMPORT_PREFIX: str = "import "
COMMENT_PREFIXES: tuple[str, ...] = ("//", "#", "/*", "*")

RAW_STRING_DELIMITER: str = '"""'

# Stripped around the last token before URL matching, e.g. "https://x", or (https://x)
URL_TOKEN_STRIP_CHARS: str = "\"'`,;()[]{}<>"

# Node text made only of blanks and quote characters is not a useful anchor.
BLANK_OR_QUOTES = re.compile(r"[\s\"']*")

LINE_LENGTH_BANNER: str = "line-length-linter :: max line length governance"
