"""Translation source loading.

Discovers translation files under a root directory, parses them into
per-file trees, and merges them in seek order.

Submodules:
    sources - RawSourceProducer protocol, PathSourceLoader, load_collection

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .sources import (
    PathSourceLoader,
    RawSourceProducer,
    load_collection,
    order_source_paths,
    parse_raw_tree,
)

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
