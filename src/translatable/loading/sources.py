"""Translation source discovery and parsing.

Provides the protocol for RawSource producers and a filesystem
implementation that discovers TOML and JSON files under a translation root,
orders them by seek mode, and turns each into a per-file node tree.

Raw table shape:
    [greetings.formal]          a table of only strings is a message:
    en = "Nice to meet you."    keys are ISO 639-1 codes, values templates
    es = "Bueno conocerte."

    [greetings]                 a table of only tables is a namespace;
                                an empty table is an empty namespace

Anything else (mixed tables, numbers, arrays, unknown language codes,
malformed templates) is a TranslationSourceError naming the file and key.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from translatable.constants import SOURCE_SUFFIXES
from translatable.core import is_valid_identifier
from translatable.diagnostics import (
    ErrorTemplate,
    TemplateSyntaxError,
    TranslationSourceError,
)
from translatable.enums import SeekMode, TranslationOverlap
from translatable.language import Language
from translatable.templating import FormatString
from translatable.translations import (
    RawSource,
    TranslationBranch,
    TranslationNode,
    TranslationNodeCollection,
    TranslationObject,
    TranslationPath,
    merge_sources,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "RawSourceProducer",
    # Concrete loader
    "PathSourceLoader",
    # Merging
    "load_collection",
    # Parsing helpers
    "parse_raw_tree",
    "order_source_paths",
]

logger = logging.getLogger(__name__)


class RawSourceProducer(Protocol):
    """Protocol for anything that yields per-file trees in seek order.

    This is a Protocol (structural typing) rather than ABC to allow
    in-memory producers in tests and embedding applications.

    Example:
        >>> class InlineProducer:
        ...     def sources(self) -> list[RawSource]:
        ...         return [parse_raw_tree("inline.toml", {"app": {"title": {"en": "App"}}})]
        >>> load_collection(InlineProducer(), TranslationOverlap.IGNORE)
    """

    def sources(self) -> Iterable[RawSource]:
        """Yield RawSources, already ordered by seek mode.

        Raises:
            TranslationSourceError: If a source cannot be read or parsed
        """
        ...


def order_source_paths(relative_paths: Iterable[str], seek_mode: SeekMode) -> list[str]:
    """Sort relative POSIX paths for merging.

    Args:
        relative_paths: Paths relative to the translation root
        seek_mode: ALPHABETICAL for ascending, UNALPHABETICAL for descending

    Returns:
        Sorted list

    Example:
        >>> order_source_paths(["b.toml", "a/z.toml", "a.toml"], SeekMode.ALPHABETICAL)
        ['a.toml', 'a/z.toml', 'b.toml']
    """
    return sorted(relative_paths, reverse=seek_mode is SeekMode.UNALPHABETICAL)


def _invalid_shape(source_path: str, path: tuple[str, ...], reason: str) -> TranslationSourceError:
    display = TranslationPath.of(path).static_display() or "<root>"
    return TranslationSourceError(
        ErrorTemplate.source_invalid_shape(source_path, display, reason),
        source_path=source_path,
    )


def _build_node(
    source_path: str, path: tuple[str, ...], table: Mapping[str, object]
) -> TranslationNode:
    values = list(table.values())
    if values and all(isinstance(value, str) for value in values):
        if not path:
            raise _invalid_shape(source_path, path, "top-level entries must be tables")
        return _build_leaf(source_path, path, table)

    children: dict[str, TranslationNode] = {}
    for key, value in table.items():
        child_path = (*path, key)
        if not is_valid_identifier(key):
            raise _invalid_shape(source_path, child_path, f"'{key}' is not a valid path segment")
        match value:
            case Mapping():
                children[key] = _build_node(source_path, child_path, value)
            case str():
                raise _invalid_shape(
                    source_path, child_path, "message entries cannot sit next to namespaces"
                )
            case _:
                raise _invalid_shape(
                    source_path,
                    child_path,
                    f"expected a table or string, found {type(value).__name__}",
                )
    return TranslationBranch(children)


def _build_leaf(
    source_path: str, path: tuple[str, ...], table: Mapping[str, object]
) -> TranslationObject:
    display = TranslationPath.of(path).static_display()
    translations: dict[Language, FormatString] = {}
    for code, text in table.items():
        try:
            language = Language(code)
        except ValueError as e:
            raise TranslationSourceError(
                ErrorTemplate.source_unknown_language(source_path, display, code),
                source_path=source_path,
            ) from e
        if language in translations:
            raise _invalid_shape(
                source_path, path, f"language '{language.code}' is defined more than once"
            )
        try:
            translations[language] = FormatString.parse(str(text))
        except TemplateSyntaxError as e:
            raise TranslationSourceError(
                ErrorTemplate.source_parse(source_path, f"{display} ({language.code}): {e}"),
                source_path=source_path,
            ) from e
    return TranslationObject(translations)


def parse_raw_tree(source_path: str, data: Mapping[str, object]) -> RawSource:
    """Turn one decoded file into a RawSource.

    Args:
        source_path: Relative path of the file (diagnostics and ordering)
        data: Decoded top-level table

    Returns:
        RawSource whose root is a branch

    Raises:
        TranslationSourceError: If the table shape is invalid
    """
    root = _build_node(source_path, (), data)
    if not TranslationBranch.guard(root):
        raise _invalid_shape(source_path, (), "top-level entries must be tables")
    return RawSource(source_path, root)


@dataclass(frozen=True, slots=True)
class PathSourceLoader:
    """File system RawSource producer.

    Discovers every *.toml and *.json file below root_dir (recursively),
    orders them by relative POSIX path according to seek_mode, and parses
    them with tomllib / json.

    Example:
        >>> loader = PathSourceLoader("translations", SeekMode.ALPHABETICAL)
        >>> [source.relative_path for source in loader.sources()]
        ['errors.toml', 'greetings.toml', 'nested/menu.json']

    Attributes:
        root_dir: Translation root directory
        seek_mode: Merge order of discovered files
    """

    root_dir: str | Path
    seek_mode: SeekMode = SeekMode.ALPHABETICAL
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    def discover(self) -> list[str]:
        """Relative POSIX paths of all source files, in seek order.

        Raises:
            TranslationSourceError: If root_dir is not a directory
        """
        root = self._resolved_root
        if not root.is_dir():
            raise TranslationSourceError(
                ErrorTemplate.source_root_not_found(str(self.root_dir)),
                source_path=str(self.root_dir),
            )
        found = (
            path.relative_to(root).as_posix()
            for path in root.rglob("*")
            if path.is_file() and path.suffix.lower() in SOURCE_SUFFIXES
        )
        return order_source_paths(found, self.seek_mode)

    def sources(self) -> Iterator[RawSource]:
        """Yield one RawSource per discovered file, in seek order.

        Raises:
            TranslationSourceError: On missing root, I/O, decode or shape errors
        """
        for relative_path in self.discover():
            logger.debug("Loading translation source: %s", relative_path)
            yield parse_raw_tree(relative_path, self._read(relative_path))

    def _read(self, relative_path: str) -> Mapping[str, object]:
        full_path = self._resolved_root / relative_path
        try:
            if full_path.suffix.lower() == ".json":
                data = json.loads(full_path.read_text(encoding="utf-8"))
            else:
                with full_path.open("rb") as f:
                    data = tomllib.load(f)
        except OSError as e:
            raise TranslationSourceError(
                ErrorTemplate.source_io(relative_path, str(e)), source_path=relative_path
            ) from e
        except (tomllib.TOMLDecodeError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TranslationSourceError(
                ErrorTemplate.source_parse(relative_path, str(e)), source_path=relative_path
            ) from e

        if not isinstance(data, Mapping):
            raise _invalid_shape(relative_path, (), "the document must be a table/object")
        return data


def load_collection(
    producer: RawSourceProducer, overlap: TranslationOverlap = TranslationOverlap.IGNORE
) -> TranslationNodeCollection:
    """Merge everything a producer yields into one collection.

    Sources are consumed one at a time in the order the producer yields
    them; no two merge steps interleave.

    Args:
        producer: Source of RawSources in seek order
        overlap: Policy for languages defined by more than one source

    Returns:
        The merged, immutable collection

    Raises:
        TranslationSourceError: If the producer fails to read or parse a file
        MergeError: On a leaf/branch conflict between sources
    """
    collection = merge_sources(producer.sources(), overlap)
    logger.info(
        "Loaded %d translation(s) from %d source file(s) (overlap=%s)",
        len(collection),
        len(collection.sources),
        overlap,
    )
    return collection
