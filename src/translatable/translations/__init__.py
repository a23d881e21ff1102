"""Translation tree package.

Provides the in-memory model of merged translation sources:

Submodules:
    path       - TranslationPath, PathSpan
    node       - TranslationObject (leaf), TranslationBranch (namespace)
    collection - TranslationNodeCollection with find_path lookup
    merge      - RawSource and SourceMergeBuilder

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .collection import TranslationNodeCollection
from .merge import RawSource, SourceMergeBuilder, merge_sources
from .node import TranslationBranch, TranslationNode, TranslationObject
from .path import CALL_SITE_SPAN, PathLike, PathSpan, TranslationPath

__all__ = [
    # Paths
    "TranslationPath",
    "PathLike",
    "PathSpan",
    "CALL_SITE_SPAN",
    # Nodes
    "TranslationNode",
    "TranslationObject",
    "TranslationBranch",
    # Collection
    "TranslationNodeCollection",
    # Merging
    "RawSource",
    "SourceMergeBuilder",
    "merge_sources",
]
