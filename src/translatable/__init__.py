"""translatable - Hierarchical translation lookup with deterministic merging.

Loads translation files (TOML, JSON) from a directory tree, merges them in
a configurable order into one immutable tree of namespaces and messages,
and resolves (path, language) requests with placeholder substitution and a
configurable fallback language.

Public API:
    translation - Resolve a translation whose path and language are known
    prepare_translation - Validate now, resolve per call
    translation_context - Dataclass decorator for groups of translations
    TranslationResolver - Resolution against an explicit collection
    Language - ISO 639-1 language registry
    TranslationPath - Hierarchical message key

Exceptions:
    TranslatableError - Base exception class
    ConfigError - Configuration could not be loaded
    TranslationSourceError - A translation file could not be loaded
    MergeError - Sources disagree on a path's node kind
    TemplateSyntaxError - Malformed template
    ResolutionError - Base of the per-request resolution errors

Submodules:
    translatable.config - TranslatableConfig and configuration loading
    translatable.loading - Source discovery and merging
    translatable.translations - Paths, nodes and the merged collection
    translatable.templating - FormatString templates
    translatable.diagnostics - Error types, codes and formatting
"""

from .diagnostics import (
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
from .enums import SeekMode, TranslationOverlap
from .language import Language
from .runtime import (
    PreparedTranslation,
    TranslationResolver,
    get_resolver,
    get_translations,
    prepare_translation,
    translation,
    translation_context,
)
from .translations import TranslationPath

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("translatable")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigError",
    "FallbackNotAvailableError",
    "Language",
    "LanguageNotAvailableError",
    "MergeError",
    "MissingPlaceholderError",
    "PathNotFoundError",
    "PreparedTranslation",
    "ResolutionError",
    "SeekMode",
    "TemplateSyntaxError",
    "TranslatableError",
    "TranslationOverlap",
    "TranslationPath",
    "TranslationResolver",
    "TranslationSourceError",
    "__version__",
    "get_resolver",
    "get_translations",
    "prepare_translation",
    "translation",
    "translation_context",
]
