"""Source merge builder.

Folds an ordered sequence of per-file trees (RawSource) into one
TranslationNodeCollection.

Merge rules, applied at every level of the incoming tree:
    - key absent in the target: the whole incoming subtree is inserted
    - branch meets branch: recurse into the children
    - leaf meets leaf: language entries combined per TranslationOverlap
    - leaf meets branch: MergeError naming the path and both source files

Sources are consumed strictly one after another in the order given (the
loader orders them by seek mode). Order only decides overlap ties; the
branch structure of the result does not depend on it.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from translatable.diagnostics import ErrorTemplate, MergeError
from translatable.enums import TranslationOverlap
from translatable.translations.collection import TranslationNodeCollection
from translatable.translations.node import TranslationBranch, TranslationNode, TranslationObject
from translatable.translations.path import TranslationPath

__all__ = [
    "RawSource",
    "SourceMergeBuilder",
    "merge_sources",
]

logger = logging.getLogger(__name__)

# Reported when the source of an existing node was not recorded.
_UNKNOWN_SOURCE = "<unknown>"


@dataclass(frozen=True, slots=True)
class RawSource:
    """One unmerged translation file.

    Attributes:
        relative_path: POSIX path of the file relative to the translation
            root; used for seek ordering and diagnostics
        root: The file's tree (always a branch at the top level)
    """

    relative_path: str
    root: TranslationBranch


class SourceMergeBuilder:
    """Accumulates RawSources into a single translation tree.

    Not thread-safe; a builder is used by exactly one loader, then discarded.

    Example:
        >>> builder = SourceMergeBuilder(TranslationOverlap.OVERWRITE)
        >>> builder.add(first)
        >>> builder.add(second)
        >>> collection = builder.build()
    """

    __slots__ = ("_origins", "_overlap", "_root", "_sources")

    def __init__(self, overlap: TranslationOverlap = TranslationOverlap.IGNORE) -> None:
        self._overlap = overlap
        self._root = TranslationBranch.empty()
        self._sources: list[str] = []
        # Node path -> source that first introduced the node
        self._origins: dict[tuple[str, ...], str] = {}

    @property
    def overlap(self) -> TranslationOverlap:
        """Overlap policy applied on leaf/leaf collisions."""
        return self._overlap

    def add(self, source: RawSource) -> None:
        """Merge one source into the accumulated tree.

        Args:
            source: Next source in seek order

        Raises:
            MergeError: If the source defines a message where an earlier
                source defines a namespace, or the other way round
        """
        self._root = self._merge_branches(self._root, source.root, (), source.relative_path)
        self._sources.append(source.relative_path)
        logger.debug("Merged translation source: %s", source.relative_path)

    def build(self) -> TranslationNodeCollection:
        """Return the immutable collection of everything added so far."""
        return TranslationNodeCollection(self._root, tuple(self._sources))

    def _merge(
        self,
        existing: TranslationNode,
        incoming: TranslationNode,
        path: tuple[str, ...],
        source: str,
    ) -> TranslationNode:
        match existing, incoming:
            case TranslationObject(), TranslationObject():
                return existing.merged_with(incoming, self._overlap)
            case TranslationBranch(), TranslationBranch():
                return self._merge_branches(existing, incoming, path, source)
            case _:
                display = TranslationPath.of(path).static_display()
                existing_source = self._origins.get(path, _UNKNOWN_SOURCE)
                raise MergeError(
                    ErrorTemplate.merge_node_conflict(display, existing_source, source),
                    translation_path=display,
                    existing_source=existing_source,
                    incoming_source=source,
                )

    def _merge_branches(
        self,
        existing: TranslationBranch,
        incoming: TranslationBranch,
        path: tuple[str, ...],
        source: str,
    ) -> TranslationBranch:
        children = dict(existing.children)
        for key, child in incoming.children.items():
            child_path = (*path, key)
            current = children.get(key)
            if current is None:
                children[key] = child
                self._record(child_path, child, source)
            else:
                children[key] = self._merge(current, child, child_path, source)
        return TranslationBranch(children)

    def _record(self, path: tuple[str, ...], node: TranslationNode, source: str) -> None:
        self._origins[path] = source
        if TranslationBranch.guard(node):
            for key, child in node.children.items():
                self._record((*path, key), child, source)


def merge_sources(
    sources: Iterable[RawSource], overlap: TranslationOverlap = TranslationOverlap.IGNORE
) -> TranslationNodeCollection:
    """Merge sources in the given order into a collection.

    Args:
        sources: Sources already in seek order
        overlap: Policy for languages defined by more than one source

    Returns:
        The merged, immutable collection

    Raises:
        MergeError: On a leaf/branch conflict
    """
    builder = SourceMergeBuilder(overlap)
    for source in sources:
        builder.add(source)
    return builder.build()
