"""Translatable exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Build-time failures (configuration, sources, merge, templates) abort
loading; resolution failures are raised by TranslationResolver.resolve()
or collected by TranslationResolver.format().

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConfigError",
    "FallbackNotAvailableError",
    "LanguageNotAvailableError",
    "MergeError",
    "MissingPlaceholderError",
    "PathNotFoundError",
    "ResolutionError",
    "TemplateSyntaxError",
    "TranslatableError",
    "TranslationSourceError",
]


class TranslatableError(Exception):
    """Base exception for all translatable errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TranslatableError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigError(TranslatableError):
    """Configuration could not be read, parsed or interpreted.

    Covers I/O failures on translatable.toml, TOML syntax errors, and
    enumerated values (seek_mode, overlap, fallback_language) that do not
    name a known member.
    """


class TranslationSourceError(TranslatableError):
    """A translation source file could not be turned into a node tree.

    Attributes:
        source_path: Relative path of the offending file ("" if unknown)
    """

    def __init__(self, message: str | Diagnostic, *, source_path: str = "") -> None:
        super().__init__(message)
        self.source_path = source_path


class MergeError(TranslatableError):
    """Two sources disagree on whether a path is a message or a namespace.

    Attributes:
        translation_path: Path where the conflict was detected
        existing_source: Source that first defined the node
        incoming_source: Source whose node could not be merged
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        translation_path: str,
        existing_source: str,
        incoming_source: str,
    ) -> None:
        super().__init__(message)
        self.translation_path = translation_path
        self.existing_source = existing_source
        self.incoming_source = incoming_source


class TemplateSyntaxError(TranslatableError):
    """Malformed format string template.

    Attributes:
        template: The template being parsed
        position: Character offset of the error (0-indexed)
    """

    def __init__(self, message: str | Diagnostic, *, template: str, position: int) -> None:
        super().__init__(message)
        self.template = template
        self.position = position


class ResolutionError(TranslatableError):
    """Base for errors raised while resolving a (path, language) request.

    Attributes:
        translation_path: Requested path in "::" notation
    """

    def __init__(self, message: str | Diagnostic, *, translation_path: str) -> None:
        super().__init__(message)
        self.translation_path = translation_path


class PathNotFoundError(ResolutionError):
    """No message exists at the requested path."""


class LanguageNotAvailableError(ResolutionError):
    """Neither the requested language nor the fallback is available.

    Attributes:
        language: The requested language
    """

    def __init__(
        self, message: str | Diagnostic, *, translation_path: str, language: str
    ) -> None:
        super().__init__(message, translation_path=translation_path)
        self.language = language


class FallbackNotAvailableError(ResolutionError):
    """The configured fallback language is missing at the requested path.

    Attributes:
        fallback_language: The configured fallback language
    """

    def __init__(
        self, message: str | Diagnostic, *, translation_path: str, fallback_language: str
    ) -> None:
        super().__init__(message, translation_path=translation_path)
        self.fallback_language = fallback_language


class MissingPlaceholderError(ResolutionError):
    """A template placeholder has no value in the replacement mapping.

    Attributes:
        placeholder: Name of the placeholder without braces
    """

    def __init__(
        self, message: str | Diagnostic, *, placeholder: str, translation_path: str = ""
    ) -> None:
        super().__init__(message, translation_path=translation_path)
        self.placeholder = placeholder
