"""Locale utilities backed by Babel CLDR data.

Centralizes locale tag normalization and Babel lookups used by the
language registry.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_language_name",
    "normalize_locale",
]

# Locale whose CLDR data provides language display names.
_DISPLAY_LOCALE = "en"


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    An encoding suffix such as ".UTF-8" is stripped.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "pt_BR.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("pt_BR.UTF-8")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.split(".", 1)[0].strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("es-MX")
        >>> locale.language
        'es'
        >>> locale.territory
        'MX'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_language_name(language_code: str) -> str | None:
    """Return the English display name of a language code.

    Args:
        language_code: ISO 639 language code (e.g., "es", "aa")

    Returns:
        Display name (e.g., "Spanish"), or None if CLDR has no name for it

    Example:
        >>> get_language_name("es")
        'Spanish'
    """
    names = get_babel_locale(_DISPLAY_LOCALE).languages
    return names.get(language_code.lower())
