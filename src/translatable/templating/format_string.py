"""Parsed message templates.

A FormatString is parsed once from the raw template text into literal
segments interleaved with named placeholders, then rendered any number of
times against a replacement mapping.

Template grammar:
    template    := (text | escape | placeholder)*
    escape      := "{{" | "}}"
    placeholder := "{" identifier "}"

Rendering policy:
    Every placeholder must have a value in the replacement mapping;
    a missing name raises MissingPlaceholderError. Values are rendered with
    str(). Mapping entries the template does not reference are ignored.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeIs

from translatable.core.identifier_validation import is_valid_identifier
from translatable.diagnostics import ErrorTemplate, MissingPlaceholderError, TemplateSyntaxError
from translatable.templating.cursor import Cursor

__all__ = [
    "FormatString",
    "FormatToken",
    "Placeholder",
    "TextSegment",
]


@dataclass(frozen=True, slots=True)
class TextSegment:
    """Literal run of template text (escapes already decoded)."""

    text: str

    @staticmethod
    def guard(token: object) -> TypeIs[TextSegment]:
        """Type guard for TextSegment."""
        return isinstance(token, TextSegment)


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Named placeholder: {name}"""

    name: str

    @staticmethod
    def guard(token: object) -> TypeIs[Placeholder]:
        """Type guard for Placeholder."""
        return isinstance(token, Placeholder)


type FormatToken = TextSegment | Placeholder


def _escape(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


def _parse_tokens(template: str) -> tuple[FormatToken, ...]:
    tokens: list[FormatToken] = []
    buffer: list[str] = []
    cursor = Cursor(template, 0)

    def flush() -> None:
        if buffer:
            tokens.append(TextSegment("".join(buffer)))
            buffer.clear()

    while not cursor.is_eof:
        ch = cursor.current
        if ch == "{":
            if cursor.peek(1) == "{":
                buffer.append("{")
                cursor = cursor.advance(2)
                continue
            start = cursor.pos
            end = cursor.advance().find("}")
            if end is None:
                raise TemplateSyntaxError(
                    ErrorTemplate.template_unclosed_placeholder(start),
                    template=template,
                    position=start,
                )
            name = cursor.advance().slice_to(end)
            if not is_valid_identifier(name):
                raise TemplateSyntaxError(
                    ErrorTemplate.template_invalid_placeholder(name, start),
                    template=template,
                    position=start,
                )
            flush()
            tokens.append(Placeholder(name))
            cursor = Cursor(template, end + 1)
        elif ch == "}":
            if cursor.peek(1) != "}":
                raise TemplateSyntaxError(
                    ErrorTemplate.template_unmatched_brace(cursor.pos),
                    template=template,
                    position=cursor.pos,
                )
            buffer.append("}")
            cursor = cursor.advance(2)
        else:
            buffer.append(ch)
            cursor = cursor.advance()

    flush()
    return tuple(tokens)


@dataclass(frozen=True, slots=True)
class FormatString:
    """One language's message template.

    Adjacent literal text is always merged into a single TextSegment, so two
    FormatStrings are equal exactly when they render identically for every
    mapping.

    Example:
        >>> fs = FormatString.parse("What's good {user}?")
        >>> fs.placeholders
        ('user',)
        >>> fs.replace_with({"user": "John"})
        "What's good John?"
        >>> str(FormatString.parse("{{literal}}"))
        '{{literal}}'
    """

    tokens: tuple[FormatToken, ...]

    @classmethod
    def parse(cls, template: str) -> FormatString:
        """Parse template text.

        Args:
            template: Raw template text

        Returns:
            Parsed FormatString

        Raises:
            TemplateSyntaxError: On unclosed '{', stray '}', or a placeholder
                name that is not an identifier
        """
        return cls(_parse_tokens(template))

    @classmethod
    def literal(cls, text: str) -> FormatString:
        """Build a FormatString that renders text verbatim (no placeholders)."""
        return cls((TextSegment(text),) if text else ())

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Referenced placeholder names in first-use order, without duplicates."""
        names = (token.name for token in self.tokens if Placeholder.guard(token))
        return tuple(dict.fromkeys(names))

    @property
    def is_static(self) -> bool:
        """True if the template has no placeholders."""
        return not any(Placeholder.guard(token) for token in self.tokens)

    def replace_with(self, replacements: Mapping[str, object] | None = None) -> str:
        """Render the template.

        Args:
            replacements: Placeholder name to value mapping

        Returns:
            Literals and str(value) of each placeholder, in source order

        Raises:
            MissingPlaceholderError: If a referenced placeholder has no value
        """
        values = replacements or {}
        parts: list[str] = []
        for token in self.tokens:
            match token:
                case TextSegment(text=text):
                    parts.append(text)
                case Placeholder(name=name):
                    if name not in values:
                        raise MissingPlaceholderError(
                            ErrorTemplate.missing_placeholder(name), placeholder=name
                        )
                    parts.append(str(values[name]))
        return "".join(parts)

    def __str__(self) -> str:
        """Return canonical template text (escapes re-applied)."""
        parts: list[str] = []
        for token in self.tokens:
            match token:
                case TextSegment(text=text):
                    parts.append(_escape(text))
                case Placeholder(name=name):
                    parts.append(f"{{{name}}}")
        return "".join(parts)
