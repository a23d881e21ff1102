"""Translation contexts: dataclasses whose fields are translations.

A translation context groups related messages under one namespace. Each
field names a translation (the field name, or the "path" entry of the
field's metadata), optionally prefixed by the decorator's base_path:

    @translation_context(base_path="greetings")
    @dataclass(frozen=True)
    class Greetings:
        formal: str
        informal: str = field(metadata={"path": "informal"})

    greetings = Greetings.load_translations(Language.AA, {"user": "John"})
    greetings.informal  # "What's good John?"

Every field must be annotated as str, and every field path is checked at
decoration time (message exists, fallback language present). A context
referring to a missing translation fails on import rather than on first
use.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, get_type_hints

from translatable.language import Language
from translatable.runtime.resolver import TranslationResolver
from translatable.runtime.shared import get_resolver
from translatable.translations import TranslationPath

__all__ = [
    "PATH_METADATA_KEY",
    "translation_context",
]

# dataclasses.field(metadata={PATH_METADATA_KEY: "..."}) overrides the field name.
PATH_METADATA_KEY = "path"

_PATHS_ATTRIBUTE = "__translation_paths__"


def _field_hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls)
    except NameError as e:
        msg = f"Cannot resolve field annotations of {cls.__qualname__}: {e}"
        raise TypeError(msg) from e


def _field_paths(cls: type, base_path: TranslationPath | None) -> dict[str, TranslationPath]:
    origin = f"{cls.__module__}.{cls.__qualname__}"
    hints = _field_hints(cls)
    paths: dict[str, TranslationPath] = {}
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        annotation = hints.get(f.name, f.type)
        if annotation is not str:
            shown = getattr(annotation, "__name__", repr(annotation))
            msg = (
                f"Only str fields are allowed in translation contexts, "
                f"but '{cls.__qualname__}.{f.name}' is annotated as {shown}"
            )
            raise TypeError(msg)
        raw = f.metadata.get(PATH_METADATA_KEY, f.name)
        field_path = TranslationPath.parse(raw, origin=origin)
        paths[f.name] = base_path.merge(field_path) if base_path is not None else field_path
    return paths


def translation_context[C: type](
    cls: C | None = None,
    /,
    *,
    base_path: str | TranslationPath | None = None,
    resolver: TranslationResolver | None = None,
) -> C | Callable[[C], C]:
    """Turn a dataclass into a translation context.

    Usable bare (@translation_context) or with arguments
    (@translation_context(base_path="greetings")).

    Args:
        cls: The decorated dataclass (when used bare)
        base_path: Namespace prepended to every field path
        resolver: Resolver to validate and load against (defaults to the
            shared resolver)

    Returns:
        The same class, with a load_translations(language, replacements=None)
        classmethod and a __translation_paths__ mapping of field name to path

    Raises:
        TypeError: If the decorated class is not a dataclass, or a field
            is not annotated as str
        ValueError: If base_path or a field path is malformed
        ResolutionError: If a field path has no message, or the message
            lacks the configured fallback language
    """

    def decorate(target: C) -> C:
        if not dataclasses.is_dataclass(target):
            msg = f"translation_context requires a dataclass, got {target.__qualname__}"
            raise TypeError(msg)

        base = None
        if base_path is not None:
            origin = f"{target.__module__}.{target.__qualname__}"
            base = (
                base_path
                if isinstance(base_path, TranslationPath)
                else TranslationPath.parse(base_path, origin=origin)
            )
        paths = _field_paths(target, base)

        checker = resolver if resolver is not None else get_resolver()
        for path in paths.values():
            checker.check_fallback(path)

        def load_translations(
            klass: type[Any],
            language: Language | str,
            replacements: Mapping[str, object] | None = None,
        ) -> Any:
            """Resolve every field in language and build an instance.

            Raises:
                ResolutionError: If any field fails to resolve
            """
            active = resolver if resolver is not None else get_resolver()
            values = {
                name: active.resolve(path, language, replacements)
                for name, path in paths.items()
            }
            return klass(**values)

        setattr(target, _PATHS_ATTRIBUTE, MappingProxyType(paths))
        target.load_translations = classmethod(load_translations)  # type: ignore[attr-defined]
        return target

    if cls is None:
        return decorate
    return decorate(cls)
