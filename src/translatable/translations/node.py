"""Translation tree nodes.

A translation tree is a tagged union of two node kinds:

    TranslationObject - leaf: every known rendering of one message,
                        keyed by Language
    TranslationBranch - namespace: child nodes keyed by path segment

Nodes are immutable once built. Children are owned by exactly one parent
and there are no back-references, so a tree can be shared between threads
without locking.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeIs

from translatable.enums import TranslationOverlap
from translatable.language import Language
from translatable.templating import FormatString

__all__ = [
    "TranslationBranch",
    "TranslationNode",
    "TranslationObject",
]


@dataclass(frozen=True, slots=True)
class TranslationObject:
    """All language variants of one message (leaf node).

    Attributes:
        translations: Read-only mapping of Language to FormatString

    Example:
        >>> obj = TranslationObject.from_strings({"en": "Hi {user}", "es": "Hola {user}"})
        >>> obj.get(Language.ES).replace_with({"user": "Ana"})
        'Hola Ana'
        >>> obj.get(Language.FR) is None
        True
    """

    translations: Mapping[Language, FormatString]

    def __post_init__(self) -> None:
        """Freeze the mapping so the object cannot be mutated through it."""
        object.__setattr__(self, "translations", MappingProxyType(dict(self.translations)))

    @classmethod
    def from_strings(cls, templates: Mapping[str, str]) -> TranslationObject:
        """Parse raw language-code to template entries.

        Args:
            templates: Mapping of language code ("en", "ES") to template text

        Returns:
            TranslationObject with parsed templates

        Raises:
            ValueError: If a key is not an ISO 639-1 code
            TemplateSyntaxError: If a template is malformed
        """
        return cls({Language(code): FormatString.parse(text) for code, text in templates.items()})

    @staticmethod
    def guard(node: object) -> TypeIs[TranslationObject]:
        """Type guard for leaf nodes."""
        return isinstance(node, TranslationObject)

    def get(self, language: Language) -> FormatString | None:
        """FormatString for exactly this language, or None."""
        return self.translations.get(language)

    @property
    def languages(self) -> tuple[Language, ...]:
        """Available languages in code order."""
        return tuple(sorted(self.translations))

    def merged_with(
        self, incoming: TranslationObject, overlap: TranslationOverlap
    ) -> TranslationObject:
        """Combine with a later-merged object at the same path.

        Args:
            incoming: Object from the source merged after this one
            overlap: OVERWRITE lets incoming replace shared languages;
                IGNORE keeps this object's entries for shared languages.
                Languages present on only one side are always kept.

        Returns:
            New merged TranslationObject
        """
        merged = dict(self.translations)
        match overlap:
            case TranslationOverlap.OVERWRITE:
                merged.update(incoming.translations)
            case TranslationOverlap.IGNORE:
                for language, template in incoming.translations.items():
                    merged.setdefault(language, template)
        return TranslationObject(merged)

    def __contains__(self, language: object) -> bool:
        return language in self.translations

    def __len__(self) -> int:
        return len(self.translations)


@dataclass(frozen=True, slots=True)
class TranslationBranch:
    """Namespace node mapping path segments to child nodes.

    Attributes:
        children: Read-only mapping of segment to child node
    """

    children: Mapping[str, TranslationNode]

    def __post_init__(self) -> None:
        """Freeze the mapping so the tree cannot be mutated through it."""
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    @classmethod
    def empty(cls) -> TranslationBranch:
        """Branch without children."""
        return cls({})

    @staticmethod
    def guard(node: object) -> TypeIs[TranslationBranch]:
        """Type guard for branch nodes."""
        return isinstance(node, TranslationBranch)

    def get(self, segment: str) -> TranslationNode | None:
        """Child at segment, or None."""
        return self.children.get(segment)

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)


type TranslationNode = TranslationObject | TranslationBranch
