"""Shared constants for translatable.

This module provides centralized configuration constants used across
the translations, loading and runtime packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Configuration: File name, environment prefix and defaults
- Paths: Translation path rendering
- Loading: Recognized source file suffixes
- Identifier limits: DoS prevention via size constraints
- Fallback strings: Readable output when deferred resolution fails

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Configuration
    "CONFIG_FILE_NAME",
    "ENV_PREFIX",
    "DEFAULT_TRANSLATIONS_PATH",
    # Paths
    "PATH_SEPARATOR",
    "DOTTED_PATH_SEPARATOR",
    "CALL_SITE_ORIGIN",
    # Loading
    "SOURCE_SUFFIXES",
    # Identifier limits
    "MAX_IDENTIFIER_LENGTH",
    # Fallback strings
    "FALLBACK_MISSING_PATH",
]

# ============================================================================
# CONFIGURATION
# ============================================================================

# Configuration file looked up in the current working directory.
CONFIG_FILE_NAME: str = "translatable.toml"

# Environment variables override file values: TRANSLATABLE_<KEY>.
ENV_PREFIX: str = "TRANSLATABLE_"

# Translation root used when neither environment nor file name one.
DEFAULT_TRANSLATIONS_PATH: str = "./translations"

# ============================================================================
# PATHS
# ============================================================================

# Canonical segment separator; a leading separator marks an absolute path.
PATH_SEPARATOR: str = "::"

# Alternate separator accepted when parsing textual paths.
DOTTED_PATH_SEPARATOR: str = "."

# Origin label of the span used when two spans cannot be joined.
CALL_SITE_ORIGIN: str = "<call-site>"

# ============================================================================
# LOADING
# ============================================================================

# Source file suffixes discovered under the translation root.
SOURCE_SUFFIXES: tuple[str, ...] = (".toml", ".json")

# ============================================================================
# IDENTIFIER LIMITS
# ============================================================================

# Maximum length of a path segment or placeholder name.
MAX_IDENTIFIER_LENGTH: int = 256

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Returned by non-raising resolution when no rendering is possible.
# Format string - use .format(path=...)
FALLBACK_MISSING_PATH: str = "{{{path}}}"  # e.g., {greetings::formal}
