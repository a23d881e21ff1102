"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
translatable exception.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (file, syntax, enumerated values)
        2000-2999: Source errors (raw source shape, merge conflicts)
        3000-3999: Template errors (format string syntax)
        4000-4999: Resolution errors (path, language, placeholder lookups)
    """

    # Configuration errors (1000-1999)
    CONFIG_IO = 1001
    CONFIG_PARSE = 1002
    CONFIG_INVALID_VALUE = 1003

    # Source errors (2000-2999)
    SOURCE_ROOT_NOT_FOUND = 2001
    SOURCE_IO = 2002
    SOURCE_PARSE = 2003
    SOURCE_INVALID_SHAPE = 2004
    SOURCE_UNKNOWN_LANGUAGE = 2005
    MERGE_NODE_CONFLICT = 2101

    # Template errors (3000-3999)
    TEMPLATE_UNCLOSED_PLACEHOLDER = 3001
    TEMPLATE_UNMATCHED_BRACE = 3002
    TEMPLATE_INVALID_PLACEHOLDER = 3003

    # Resolution errors (4000-4999)
    PATH_NOT_FOUND = 4001
    LANGUAGE_NOT_AVAILABLE = 4002
    FALLBACK_NOT_AVAILABLE = 4003
    MISSING_PLACEHOLDER = 4004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        translation_path: Translation path involved, in "::" notation
        language: Language code involved
        source: Source file (or config file) the error points at
        location: Free-form location inside the source ("line 3, column 7")
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    translation_path: str | None = None
    language: str | None = None
    source: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PATH_NOT_FOUND]: The path 'greetings::unknown' could not be found
              --> translations/greetings.toml
              = path: greetings::unknown
              = help: Check that the path is defined in one of the translation files

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
