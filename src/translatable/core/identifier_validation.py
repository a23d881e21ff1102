"""Unified identifier validation for paths and placeholders.

This module provides the single source of truth for identifier grammar
rules, shared by the translation path parser and the format string parser.

Identifier Grammar:
    [a-zA-Z_][a-zA-Z0-9_]*

    - Start: ASCII letter (a-z, A-Z) or underscore
    - Continue: ASCII letter, ASCII digit, or underscore
    - Length: Maximum 256 characters (DoS prevention)

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import re

from translatable.constants import MAX_IDENTIFIER_LENGTH

__all__ = [
    "is_identifier_char",
    "is_identifier_start",
    "is_valid_identifier",
]

# Compiled once at module load; C-level matching outperforms Python iteration.
_IDENTIFIER_CONTINUATION_PATTERN: re.Pattern[str] = re.compile(r"[a-zA-Z0-9_]*")


def is_identifier_start(ch: str) -> bool:
    """Check if character can start an identifier.

    Python's str.isalpha() accepts Unicode letters (e.g., 'é'); identifiers
    are restricted to ASCII so that paths written in any source file address
    the same keys.

    Args:
        ch: Single character to check

    Returns:
        True if character is an ASCII letter or underscore

    Example:
        >>> is_identifier_start('a')
        True
        >>> is_identifier_start('_')
        True
        >>> is_identifier_start('1')
        False
    """
    return len(ch) == 1 and ch.isascii() and (ch.isalpha() or ch == "_")


def is_identifier_char(ch: str) -> bool:
    """Check if character can continue an identifier.

    Args:
        ch: Single character to check

    Returns:
        True if character is ASCII letter, ASCII digit, or underscore

    Example:
        >>> is_identifier_char('5')
        True
        >>> is_identifier_char('-')
        False
    """
    return len(ch) == 1 and ch.isascii() and (ch.isalnum() or ch == "_")


def is_valid_identifier(name: str) -> bool:
    """Validate complete identifier.

    Args:
        name: Identifier string to validate

    Returns:
        True if identifier is valid, False otherwise

    Example:
        >>> is_valid_identifier("informal")
        True
        >>> is_valid_identifier("user_2")
        True
        >>> is_valid_identifier("2user")
        False
        >>> is_valid_identifier("")
        False
    """
    if not name or len(name) > MAX_IDENTIFIER_LENGTH:
        return False

    if not is_identifier_start(name[0]):
        return False

    return _IDENTIFIER_CONTINUATION_PATTERN.fullmatch(name[1:]) is not None
