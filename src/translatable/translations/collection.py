"""Merged translation corpus with path lookup.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from translatable.translations.node import TranslationBranch, TranslationNode, TranslationObject
from translatable.translations.path import PathLike, TranslationPath

__all__ = ["TranslationNodeCollection"]


@dataclass(frozen=True, slots=True)
class TranslationNodeCollection:
    """The finished, immutable translation tree.

    Lookups walk one branch level per segment from the root. There are no
    partial matches and no wildcards; absolute and relative paths address
    the same node.

    Thread Safety:
        Immutable after construction. Any number of threads may read
        concurrently without synchronization.

    Attributes:
        root: Root namespace
        sources: Relative paths of the merged source files, in merge order

    Example:
        >>> obj = collection.find_path(["greetings", "formal"])
        >>> obj.get(Language.ES).replace_with({})
        'Bueno conocerte.'
        >>> collection.find_path("greetings") is None  # a namespace, not a message
        True
    """

    root: TranslationBranch
    sources: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> TranslationNodeCollection:
        """Collection without any translations."""
        return cls(TranslationBranch.empty())

    def get_node(self, path: PathLike) -> TranslationNode | None:
        """Node (leaf or branch) at exactly this path, or None.

        The root path returns the root branch.
        """
        node: TranslationNode = self.root
        for segment in TranslationPath.coerce(path):
            if not TranslationBranch.guard(node):
                # Leaf reached before the segments ran out
                return None
            child = node.get(segment)
            if child is None:
                return None
            node = child
        return node

    def find_path(self, path: PathLike) -> TranslationObject | None:
        """TranslationObject at exactly this path, or None.

        Args:
            path: TranslationPath, its text ("greetings::formal"), or a
                sequence of segments

        Returns:
            The leaf at the path; None if a segment is missing, a leaf is
            reached early, or the walk ends on a namespace
        """
        node = self.get_node(path)
        if node is not None and TranslationObject.guard(node):
            return node
        return None

    def iter_translations(self) -> Iterator[tuple[TranslationPath, TranslationObject]]:
        """Yield every (path, translation) pair in sorted segment order."""
        stack: list[tuple[tuple[str, ...], TranslationNode]] = [((), self.root)]
        while stack:
            segments, node = stack.pop()
            if TranslationObject.guard(node):
                yield TranslationPath.of(segments), node
                continue
            for key in sorted(node.children, reverse=True):
                stack.append(((*segments, key), node.children[key]))

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (TranslationPath, str, list, tuple)):
            return False
        return self.find_path(path) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_translations())
