"""Tests for identifier validation shared by paths and placeholders."""

from __future__ import annotations

import pytest
from hypothesis import given

from tests.strategies import identifiers
from translatable.constants import MAX_IDENTIFIER_LENGTH
from translatable.core import is_identifier_char, is_identifier_start, is_valid_identifier


class TestIdentifierCharacters:
    """Test single-character predicates."""

    @pytest.mark.parametrize("ch", ["a", "Z", "_"])
    def test_valid_start(self, ch: str) -> None:
        """Letters and underscore may start an identifier."""
        assert is_identifier_start(ch)

    @pytest.mark.parametrize("ch", ["1", "-", "é", "", "ab"])
    def test_invalid_start(self, ch: str) -> None:
        """Digits, punctuation, non-ASCII and non-single chars may not."""
        assert not is_identifier_start(ch)

    @pytest.mark.parametrize("ch", ["a", "9", "_"])
    def test_valid_continuation(self, ch: str) -> None:
        """Letters, digits and underscore may continue an identifier."""
        assert is_identifier_char(ch)

    def test_hyphen_not_allowed(self) -> None:
        """Hyphen is not an identifier character."""
        assert not is_identifier_char("-")


class TestIsValidIdentifier:
    """Test complete identifier validation."""

    @pytest.mark.parametrize("name", ["user", "user_2", "_private", "A"])
    def test_valid(self, name: str) -> None:
        """Well-formed identifiers are accepted."""
        assert is_valid_identifier(name)

    @pytest.mark.parametrize("name", ["", "2user", "user-name", "user name", "user\n", "ñu"])
    def test_invalid(self, name: str) -> None:
        """Malformed identifiers are rejected, including a trailing newline."""
        assert not is_valid_identifier(name)

    def test_length_limit(self) -> None:
        """Identifiers longer than the limit are rejected."""
        assert is_valid_identifier("a" * MAX_IDENTIFIER_LENGTH)
        assert not is_valid_identifier("a" * (MAX_IDENTIFIER_LENGTH + 1))

    @given(name=identifiers())
    def test_generated_identifiers_valid(self, name: str) -> None:
        """PROPERTY: every generated identifier validates."""
        assert is_valid_identifier(name)
