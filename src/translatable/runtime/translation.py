"""Immediate and prepared translation lookups.

Two ways to ask for a translation, both reducing to
TranslationResolver.resolve():

    translation(language, path, replacements)
        Path and language known now. Resolves immediately; errors raise.

    prepare_translation(path=..., language=...)
        Path, language, or both may be unknown until the point of use.
        Whatever is known is validated immediately (errors raise), and the
        returned PreparedTranslation re-runs resolve() on every call,
        returning (result, errors) instead of raising. When both are known
        and the template has no placeholders, the result is resolved once
        and reused.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from translatable.diagnostics import ResolutionError
from translatable.language import Language
from translatable.runtime.resolver import TranslationResolver
from translatable.runtime.shared import get_resolver
from translatable.translations import PathLike, TranslationPath

__all__ = [
    "PreparedTranslation",
    "prepare_translation",
    "translation",
]


def translation(
    language: Language | str,
    path: PathLike,
    replacements: Mapping[str, object] | None = None,
    *,
    resolver: TranslationResolver | None = None,
) -> str:
    """Resolve a translation whose path and language are both known.

    Args:
        language: Requested language
        path: Message path ("greetings::formal", "greetings.formal" or
            a sequence of segments)
        replacements: Placeholder values
        resolver: Resolver to use (defaults to the shared resolver)

    Returns:
        Rendered string

    Raises:
        ResolutionError: PathNotFoundError, LanguageNotAvailableError,
            FallbackNotAvailableError or MissingPlaceholderError

    Example:
        >>> translation(Language.ES, "greetings::formal")
        'Bueno conocerte.'
        >>> translation("aa", ["greetings", "informal"], {"user": "John"})
        "What's good John?"
    """
    active = resolver if resolver is not None else get_resolver()
    return active.resolve(path, language, replacements)


@dataclass(frozen=True, slots=True)
class PreparedTranslation:
    """A translation lookup validated ahead of time, resolved per call.

    Attributes:
        resolver: Resolver the lookup runs against
        path: Path fixed at preparation time (None if given per call)
        language: Language fixed at preparation time (None if given per call)
        literal: The rendered string, when path and language are fixed and
            the template has no placeholders; None otherwise

    Example:
        >>> greet = prepare_translation(path="greetings::informal")
        >>> greet(language=Language.AA, replacements={"user": "John"})
        ("What's good John?", ())
    """

    resolver: TranslationResolver
    path: TranslationPath | None = None
    language: Language | None = None
    literal: str | None = None

    def __call__(
        self,
        *,
        path: PathLike | None = None,
        language: Language | str | None = None,
        replacements: Mapping[str, object] | None = None,
    ) -> tuple[str, tuple[ResolutionError, ...]]:
        """Resolve with the remaining inputs.

        Args:
            path: Message path; required exactly when not fixed
            language: Language; required exactly when not fixed
            replacements: Placeholder values

        Returns:
            Tuple of (rendered_string, errors), see TranslationResolver.format.
            A precomputed literal is returned without resolving again.

        Raises:
            TypeError: If a fixed input is passed again or a missing one is
                not passed
            ValueError: If a per-call path is malformed or a per-call
                language is not an ISO 639-1 code
        """
        actual_path = _pick("path", self.path, path)
        actual_language = _pick("language", self.language, language)
        if self.literal is not None:
            return (self.literal, ())
        return self.resolver.format(actual_path, actual_language, replacements)

    @property
    def is_fully_known(self) -> bool:
        """True if neither path nor language is needed at call time."""
        return self.path is not None and self.language is not None


def _pick[T](name: str, fixed: T | None, given: T | None) -> T:
    if fixed is not None and given is not None:
        msg = f"'{name}' was fixed when the translation was prepared"
        raise TypeError(msg)
    value = fixed if fixed is not None else given
    if value is None:
        msg = f"missing required argument '{name}'"
        raise TypeError(msg)
    return value


def prepare_translation(
    path: PathLike | None = None,
    language: Language | str | None = None,
    *,
    resolver: TranslationResolver | None = None,
) -> PreparedTranslation:
    """Validate what is known now and defer the rest.

    Checks performed immediately:
        - path given: the message exists and defines the fallback language
        - path and language given: a template can be selected

    Args:
        path: Message path, if known now
        language: Language, if known now
        resolver: Resolver to use (defaults to the shared resolver)

    Returns:
        PreparedTranslation taking the missing inputs per call

    Raises:
        ResolutionError: If the known inputs already fail to resolve
        ValueError: If path text is malformed or language is not ISO 639-1
    """
    active = resolver if resolver is not None else get_resolver()
    fixed_language = Language(language) if language is not None else None
    if path is None:
        return PreparedTranslation(active, None, fixed_language)

    fixed_path = TranslationPath.coerce(path)
    if fixed_language is None:
        active.check_fallback(fixed_path)
        return PreparedTranslation(active, fixed_path, None)

    template = active.select(fixed_path, fixed_language)
    literal = template.replace_with() if template.is_static else None
    return PreparedTranslation(active, fixed_path, fixed_language, literal)
