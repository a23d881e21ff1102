"""Enumerations for translatable type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Configuration values are matched case-insensitively, so "overwrite",
"Overwrite" and "OVERWRITE" all select TranslationOverlap.OVERWRITE.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "CaseInsensitiveStrEnum",
    "SeekMode",
    "TranslationOverlap",
]


class CaseInsensitiveStrEnum(StrEnum):
    """StrEnum accepting any letter case when constructed from a value."""

    @classmethod
    def _missing_(cls, value: object) -> "CaseInsensitiveStrEnum | None":
        if isinstance(value, str):
            folded = value.casefold()
            for member in cls:
                if member.value.casefold() == folded:
                    return member
        return None


class SeekMode(CaseInsensitiveStrEnum):
    """Order in which discovered translation files are merged.

    StrEnum provides automatic string conversion: str(SeekMode.ALPHABETICAL) == "Alphabetical"
    """

    ALPHABETICAL = "Alphabetical"
    """Ascending lexical order of relative file paths (default)."""

    UNALPHABETICAL = "Unalphabetical"
    """Descending lexical order of relative file paths."""


class TranslationOverlap(CaseInsensitiveStrEnum):
    """Policy for languages defined by more than one source at the same path.

    StrEnum provides automatic string conversion: str(TranslationOverlap.IGNORE) == "Ignore"
    """

    OVERWRITE = "Overwrite"
    """Later-merged source replaces same-language entries."""

    IGNORE = "Ignore"
    """First-merged source is kept; later sources only add new languages."""

