"""Translation path: the hierarchical key of one message.

A TranslationPath is an ordered tuple of identifier segments plus an
absolute flag (written as a leading "::"). It carries a diagnostic span
pointing at where the path was written; spans never take part in equality
or hashing.

Textual forms accepted by TranslationPath.parse():
    greetings::formal      relative
    ::greetings::formal    absolute
    greetings.formal       dotted (relative)

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from translatable.constants import CALL_SITE_ORIGIN, DOTTED_PATH_SEPARATOR, PATH_SEPARATOR
from translatable.core.identifier_validation import is_valid_identifier

__all__ = [
    "CALL_SITE_SPAN",
    "PathLike",
    "PathSpan",
    "TranslationPath",
]


@dataclass(frozen=True, slots=True)
class PathSpan:
    """Where a path was written, for diagnostics only.

    Attributes:
        origin: Label of the text the path came from (file, class, "<string>")
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)
    """

    origin: str
    start: int = 0
    end: int = 0

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"PathSpan start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"PathSpan end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def join(self, other: PathSpan) -> PathSpan | None:
        """Covering span of both, or None if they come from different origins."""
        if self.origin != other.origin or self.origin == CALL_SITE_ORIGIN:
            return None
        return PathSpan(self.origin, min(self.start, other.start), max(self.end, other.end))


# Used whenever two spans cannot be joined, and for paths built in code.
CALL_SITE_SPAN = PathSpan(CALL_SITE_ORIGIN)


@dataclass(frozen=True, slots=True)
class TranslationPath:
    """Ordered key segments locating one translation.

    Example:
        >>> path = TranslationPath.parse("::greetings::formal")
        >>> path.segments
        ('greetings', 'formal')
        >>> path.static_display()
        '::greetings::formal'
        >>> TranslationPath.parse("greetings.formal").static_display()
        'greetings::formal'
    """

    segments: tuple[str, ...]
    is_absolute: bool = False
    span: PathSpan = field(default=CALL_SITE_SPAN, compare=False)

    @classmethod
    def parse(cls, text: str, origin: str | None = None) -> TranslationPath:
        """Parse a textual path.

        Args:
            text: Path in "::" or dotted notation, optionally "::"-prefixed
            origin: Label recorded in the span (defaults to the call site)

        Returns:
            Parsed TranslationPath

        Raises:
            ValueError: If the text is empty or a segment is not an identifier
        """
        stripped = text.strip()
        is_absolute = stripped.startswith(PATH_SEPARATOR)
        body = stripped.removeprefix(PATH_SEPARATOR)
        separator = PATH_SEPARATOR if PATH_SEPARATOR in body else DOTTED_PATH_SEPARATOR
        segments = tuple(body.split(separator))
        for segment in segments:
            if not is_valid_identifier(segment):
                msg = f"Invalid translation path '{text}': segment '{segment}' is not an identifier"
                raise ValueError(msg)
        span = PathSpan(origin, 0, len(text)) if origin is not None else CALL_SITE_SPAN
        return cls(segments, is_absolute, span)

    @classmethod
    def of(cls, segments: Iterable[str], *, is_absolute: bool = False) -> TranslationPath:
        """Build a path from segments without parsing."""
        return cls(tuple(segments), is_absolute)

    @classmethod
    def root(cls) -> TranslationPath:
        """The empty path addressing the collection root."""
        return cls(())

    @classmethod
    def coerce(cls, value: TranslationPath | str | Iterable[str]) -> TranslationPath:
        """Accept a path, its text, or a segment sequence."""
        if isinstance(value, TranslationPath):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return cls.of(value)

    def merge(self, other: TranslationPath) -> TranslationPath:
        """Concatenate segments, keeping this path's absolute flag.

        Spans from the same origin are joined; otherwise the merged path
        gets CALL_SITE_SPAN.
        """
        span = self.span.join(other.span) or CALL_SITE_SPAN
        return TranslationPath(self.segments + other.segments, self.is_absolute, span)

    def child(self, segment: str) -> TranslationPath:
        """Path extended by one segment (span and absolute flag kept)."""
        return TranslationPath((*self.segments, segment), self.is_absolute, self.span)

    def static_display(self) -> str:
        """Render as text: "::" prefix if absolute, segments joined by "::"."""
        prefix = PATH_SEPARATOR if self.is_absolute else ""
        return prefix + PATH_SEPARATOR.join(self.segments)

    def __str__(self) -> str:
        return self.static_display()

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)


# Anything TranslationPath.coerce() accepts.
type PathLike = TranslationPath | str | Iterable[str]
