"""Tests for TranslationResolver.

Validates lookup, the two-level language/fallback rule with its eager
fallback check, placeholder rendering, and the non-raising format() API.
"""

from __future__ import annotations

import logging

import pytest

from translatable.diagnostics import (
    DiagnosticCode,
    FallbackNotAvailableError,
    LanguageNotAvailableError,
    MissingPlaceholderError,
    PathNotFoundError,
    ResolutionError,
)
from translatable.language import Language
from translatable.loading import parse_raw_tree
from translatable.runtime import TranslationResolver
from translatable.translations import TranslationNodeCollection, TranslationPath, merge_sources


@pytest.fixture
def collection() -> TranslationNodeCollection:
    """The greetings corpus plus a message lacking Spanish."""
    greetings = parse_raw_tree(
        "greetings.toml",
        {
            "greetings": {
                "formal": {"aa": "Nice to meet you.", "es": "Bueno conocerte."},
                "informal": {"aa": "What's good {user}?"},
            }
        },
    )
    menu = parse_raw_tree("menu.toml", {"menu": {"open": {"en": "Open", "es": "Abrir"}}})
    return merge_sources([greetings, menu])


# ============================================================================
# LOOKUP
# ============================================================================


class TestLookup:
    """Test path lookup."""

    def test_found(self, collection: TranslationNodeCollection) -> None:
        """lookup returns the message object."""
        resolver = TranslationResolver(collection)

        assert Language.ES in resolver.lookup(["greetings", "formal"])

    def test_path_not_found(self, collection: TranslationNodeCollection) -> None:
        """Missing paths raise PathNotFoundError with the displayed path."""
        resolver = TranslationResolver(collection)

        with pytest.raises(PathNotFoundError) as exc_info:
            resolver.lookup(["greetings", "unknown"])

        assert exc_info.value.translation_path == "greetings::unknown"
        assert str(exc_info.value) == "The path 'greetings::unknown' could not be found"

    def test_absolute_path_displayed_with_prefix(
        self, collection: TranslationNodeCollection
    ) -> None:
        """Absolute paths keep their '::' prefix in errors."""
        resolver = TranslationResolver(collection)

        with pytest.raises(PathNotFoundError) as exc_info:
            resolver.lookup("::greetings::unknown")

        assert exc_info.value.translation_path == "::greetings::unknown"

    def test_namespace_is_not_found(self, collection: TranslationNodeCollection) -> None:
        """A namespace path has no message."""
        with pytest.raises(PathNotFoundError):
            TranslationResolver(collection).lookup("greetings")


# ============================================================================
# LANGUAGE SELECTION
# ============================================================================


class TestLanguageSelection:
    """Test the two-level fallback rule."""

    def test_requested_language(self, collection: TranslationNodeCollection) -> None:
        """The requested language is used when present."""
        resolver = TranslationResolver(collection)

        assert resolver.resolve(["greetings", "formal"], Language.ES) == "Bueno conocerte."

    def test_language_code_accepted(self, collection: TranslationNodeCollection) -> None:
        """Languages may be given as codes."""
        resolver = TranslationResolver(collection)

        assert resolver.resolve("greetings::formal", "ES") == "Bueno conocerte."

    def test_language_not_available(self, collection: TranslationNodeCollection) -> None:
        """Without fallback a missing language is an error naming it."""
        resolver = TranslationResolver(collection)

        with pytest.raises(LanguageNotAvailableError) as exc_info:
            resolver.resolve(["greetings", "informal"], Language.ES, {"user": "Ana"})

        error = exc_info.value
        assert error.language == "es"
        assert error.translation_path == "greetings::informal"
        assert str(error) == (
            "The language 'ES' ('Spanish') is not available for the path 'greetings::informal'"
        )

    def test_fallback_used(self, collection: TranslationNodeCollection) -> None:
        """When the requested language misses, the fallback renders."""
        resolver = TranslationResolver(collection, fallback_language=Language.ES)

        assert resolver.resolve(["menu", "open"], Language.FR) == "Abrir"

    def test_fallback_logged(
        self, collection: TranslationNodeCollection, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Fallback use is logged at debug level."""
        resolver = TranslationResolver(collection, fallback_language=Language.ES)

        with caplog.at_level(logging.DEBUG, logger="translatable.runtime.resolver"):
            resolver.resolve(["menu", "open"], Language.FR)

        assert "fallback" in caplog.text

    def test_requested_preferred_over_fallback(
        self, collection: TranslationNodeCollection
    ) -> None:
        """The fallback is only used on a miss."""
        resolver = TranslationResolver(collection, fallback_language=Language.ES)

        assert resolver.resolve(["menu", "open"], Language.EN) == "Open"

    def test_fallback_checked_eagerly(self, collection: TranslationNodeCollection) -> None:
        """A missing fallback fails even though the requested language exists."""
        resolver = TranslationResolver(collection, fallback_language=Language.ES)

        with pytest.raises(FallbackNotAvailableError) as exc_info:
            resolver.resolve(["greetings", "informal"], Language.AA, {"user": "John"})

        error = exc_info.value
        assert error.fallback_language == "es"
        assert error.translation_path == "greetings::informal"
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.FALLBACK_NOT_AVAILABLE

    def test_fallback_checked_before_language(
        self, collection: TranslationNodeCollection
    ) -> None:
        """With both languages missing, the fallback error is reported."""
        resolver = TranslationResolver(collection, fallback_language=Language.ES)

        with pytest.raises(FallbackNotAvailableError):
            resolver.resolve(["greetings", "informal"], Language.FR)

    def test_check_fallback_without_language(
        self, collection: TranslationNodeCollection
    ) -> None:
        """check_fallback validates a path on its own."""
        resolver = TranslationResolver(collection, fallback_language=Language.AA)

        assert resolver.check_fallback("greetings::formal") is collection.find_path(
            "greetings::formal"
        )
        with pytest.raises(FallbackNotAvailableError):
            resolver.check_fallback("menu::open")

    def test_unknown_language_code(self, collection: TranslationNodeCollection) -> None:
        """Codes outside the registry raise ValueError."""
        with pytest.raises(ValueError, match="xx"):
            TranslationResolver(collection).select("greetings::formal", "xx")


# ============================================================================
# RENDERING
# ============================================================================


class TestResolve:
    """Test full resolution."""

    def test_placeholder_substituted(self, collection: TranslationNodeCollection) -> None:
        """Replacements fill placeholders."""
        resolver = TranslationResolver(collection)

        result = resolver.resolve(["greetings", "informal"], Language.AA, {"user": "John"})

        assert result == "What's good John?"

    def test_missing_placeholder_names_path(self, collection: TranslationNodeCollection) -> None:
        """MissingPlaceholderError carries the placeholder and the path."""
        resolver = TranslationResolver(collection)

        with pytest.raises(MissingPlaceholderError) as exc_info:
            resolver.resolve(["greetings", "informal"], Language.AA, {})

        assert exc_info.value.placeholder == "user"
        assert exc_info.value.translation_path == "greetings::informal"
        assert "greetings::informal" in str(exc_info.value)

    def test_all_resolution_errors_share_base(self) -> None:
        """Every per-request error is a ResolutionError."""
        for error_type in (
            PathNotFoundError,
            LanguageNotAvailableError,
            FallbackNotAvailableError,
            MissingPlaceholderError,
        ):
            assert issubclass(error_type, ResolutionError)

    def test_path_object_accepted(self, collection: TranslationNodeCollection) -> None:
        """TranslationPath instances resolve like text."""
        resolver = TranslationResolver(collection)

        assert resolver.resolve(TranslationPath.parse("::menu::open"), Language.EN) == "Open"

    def test_properties(self, collection: TranslationNodeCollection) -> None:
        """The resolver exposes its collection and fallback."""
        resolver = TranslationResolver(collection, Language.EN)

        assert resolver.collection is collection
        assert resolver.fallback_language is Language.EN


class TestFormat:
    """Test the non-raising API."""

    def test_success(self, collection: TranslationNodeCollection) -> None:
        """Success returns the rendering and no errors."""
        resolver = TranslationResolver(collection)

        assert resolver.format("greetings::formal", Language.ES) == ("Bueno conocerte.", ())

    def test_path_not_found_fallback(self, collection: TranslationNodeCollection) -> None:
        """Failures return '{path}' and the error."""
        resolver = TranslationResolver(collection)

        result, errors = resolver.format("greetings::unknown", Language.AA)

        assert result == "{greetings::unknown}"
        assert len(errors) == 1
        assert isinstance(errors[0], PathNotFoundError)

    def test_missing_placeholder_fallback(self, collection: TranslationNodeCollection) -> None:
        """Missing placeholders are reported, not raised."""
        resolver = TranslationResolver(collection)

        result, errors = resolver.format(["greetings", "informal"], Language.AA)

        assert result == "{greetings::informal}"
        assert isinstance(errors[0], MissingPlaceholderError)

    def test_failure_logged(
        self, collection: TranslationNodeCollection, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Failures are logged as warnings."""
        resolver = TranslationResolver(collection)

        with caplog.at_level(logging.WARNING, logger="translatable.runtime.resolver"):
            resolver.format("greetings::unknown", Language.AA)

        assert "greetings::unknown" in caplog.text
