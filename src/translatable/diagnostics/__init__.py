"""Diagnostic system for translatable errors.

Provides structured error diagnostics with codes, hints and locations.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigError,
    FallbackNotAvailableError,
    LanguageNotAvailableError,
    MergeError,
    MissingPlaceholderError,
    PathNotFoundError,
    ResolutionError,
    TemplateSyntaxError,
    TranslatableError,
    TranslationSourceError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FallbackNotAvailableError",
    "LanguageNotAvailableError",
    "MergeError",
    "MissingPlaceholderError",
    "OutputFormat",
    "PathNotFoundError",
    "ResolutionError",
    "TemplateSyntaxError",
    "TranslatableError",
    "TranslationSourceError",
]
