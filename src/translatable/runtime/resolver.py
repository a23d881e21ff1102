"""Translation resolution.

Resolves a (path, language, replacements) request against an immutable
TranslationNodeCollection:

    1. Look up the message at the path       -> PathNotFoundError
    2. Select a language (see below)         -> FallbackNotAvailableError,
                                                LanguageNotAvailableError
    3. Render the template with replacements -> MissingPlaceholderError

Language selection with a configured fallback language is eager: a message
that lacks the fallback language is an error even when the requested
language is present, so a missing fallback is reported the first time the
path is touched rather than only when some other language is requested.

Without a configured fallback the requested language must be present.

The resolver holds no mutable state. Both evaluation modes (immediate and
prepared) call the same resolve().

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from translatable.constants import FALLBACK_MISSING_PATH
from translatable.diagnostics import (
    ErrorTemplate,
    FallbackNotAvailableError,
    LanguageNotAvailableError,
    MissingPlaceholderError,
    PathNotFoundError,
    ResolutionError,
)
from translatable.language import Language
from translatable.templating import FormatString
from translatable.translations import (
    PathLike,
    TranslationNodeCollection,
    TranslationObject,
    TranslationPath,
)

__all__ = ["TranslationResolver"]

logger = logging.getLogger(__name__)


class TranslationResolver:
    """Resolves paths and languages to rendered strings.

    Thread Safety:
        Stateless apart from the immutable collection; safe to share.

    Example:
        >>> resolver = TranslationResolver(collection)
        >>> resolver.resolve(["greetings", "informal"], Language.AA, {"user": "John"})
        "What's good John?"
        >>> result, errors = resolver.format("greetings::unknown", Language.AA)
        >>> result
        '{greetings::unknown}'
        >>> type(errors[0]).__name__
        'PathNotFoundError'
    """

    __slots__ = ("_collection", "_fallback_language")

    def __init__(
        self,
        collection: TranslationNodeCollection,
        fallback_language: Language | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            collection: Merged translations
            fallback_language: Language used when the requested one is
                missing at a path (optional)
        """
        self._collection = collection
        self._fallback_language = fallback_language

    @property
    def collection(self) -> TranslationNodeCollection:
        """The collection resolved against."""
        return self._collection

    @property
    def fallback_language(self) -> Language | None:
        """Configured fallback language, if any."""
        return self._fallback_language

    def lookup(self, path: PathLike) -> TranslationObject:
        """Message at exactly this path.

        Raises:
            PathNotFoundError: If there is no message at the path
            ValueError: If a textual path is malformed
        """
        translation_path = TranslationPath.coerce(path)
        translation = self._collection.find_path(translation_path)
        if translation is None:
            display = translation_path.static_display()
            raise PathNotFoundError(
                ErrorTemplate.path_not_found(display), translation_path=display
            )
        return translation

    def check_fallback(self, path: PathLike) -> TranslationObject:
        """Look up a message and verify the fallback language is present.

        This is everything that can be validated knowing only the path.

        Returns:
            The message at the path

        Raises:
            PathNotFoundError: If there is no message at the path
            FallbackNotAvailableError: If a fallback language is configured
                and the message does not define it
        """
        translation_path = TranslationPath.coerce(path)
        translation = self.lookup(translation_path)
        fallback = self._fallback_language
        if fallback is not None and fallback not in translation:
            display = translation_path.static_display()
            raise FallbackNotAvailableError(
                ErrorTemplate.fallback_not_available(fallback.code, display),
                translation_path=display,
                fallback_language=fallback.code,
            )
        return translation

    def select(self, path: PathLike, language: Language | str) -> FormatString:
        """Template for the language, applying the fallback rule.

        Args:
            path: Message path
            language: Requested language (Language or ISO 639-1 code)

        Returns:
            The requested language's template, else the fallback's

        Raises:
            PathNotFoundError: If there is no message at the path
            FallbackNotAvailableError: If the configured fallback is missing
                at the path (checked before the requested language)
            LanguageNotAvailableError: If the requested language is missing
                and no fallback is configured
            ValueError: If language is not an ISO 639-1 code
        """
        translation_path = TranslationPath.coerce(path)
        requested = Language(language)
        translation = self.check_fallback(translation_path)

        template = translation.get(requested)
        if template is not None:
            return template

        fallback = self._fallback_language
        if fallback is not None:
            logger.debug(
                "Language '%s' missing for '%s', using fallback '%s'",
                requested,
                translation_path,
                fallback,
            )
            # Presence guaranteed by check_fallback
            return translation.translations[fallback]

        display = translation_path.static_display()
        raise LanguageNotAvailableError(
            ErrorTemplate.language_not_available(requested.code, requested.display_name, display),
            translation_path=display,
            language=requested.code,
        )

    def resolve(
        self,
        path: PathLike,
        language: Language | str,
        replacements: Mapping[str, object] | None = None,
    ) -> str:
        """Render the message at path in language.

        Args:
            path: Message path
            language: Requested language
            replacements: Placeholder values

        Returns:
            Rendered string

        Raises:
            PathNotFoundError: If there is no message at the path
            FallbackNotAvailableError: If the configured fallback is missing
            LanguageNotAvailableError: If no usable language is available
            MissingPlaceholderError: If a placeholder has no value
        """
        translation_path = TranslationPath.coerce(path)
        template = self.select(translation_path, language)
        try:
            return template.replace_with(replacements)
        except MissingPlaceholderError as e:
            display = translation_path.static_display()
            raise MissingPlaceholderError(
                ErrorTemplate.missing_placeholder(e.placeholder, display),
                placeholder=e.placeholder,
                translation_path=display,
            ) from e

    def format(
        self,
        path: PathLike,
        language: Language | str,
        replacements: Mapping[str, object] | None = None,
    ) -> tuple[str, tuple[ResolutionError, ...]]:
        """Render with error reporting instead of raising.

        Returns:
            Tuple of (rendered_string, errors)
            - rendered_string: The rendering, or "{path}" if resolution failed
            - errors: Resolution errors encountered (empty on success)

        Raises:
            ValueError: If path text is malformed or language is not an
                ISO 639-1 code; only ResolutionErrors are collected

        Example:
            >>> result, errors = resolver.format("greetings::formal", Language.ES)
            >>> assert result == "Bueno conocerte."
            >>> assert errors == ()
        """
        translation_path = TranslationPath.coerce(path)
        try:
            result = self.resolve(translation_path, language, replacements)
        except ResolutionError as e:
            logger.warning("Translation '%s' could not be resolved: %s", translation_path, e)
            fallback = FALLBACK_MISSING_PATH.format(path=translation_path.static_display())
            return (fallback, (e,))
        return (result, ())
