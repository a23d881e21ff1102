"""Process-wide translations and resolver.

The merged collection is built from the shared configuration on first use
and reused for the rest of the process. Failed builds are not cached, so
a later call (for example after fixing a source file in a test) retries.

Python 3.13+.
"""

from __future__ import annotations

from translatable.config import TranslatableConfig, load_config, reset_config
from translatable.core import OnceCell
from translatable.loading import PathSourceLoader, load_collection
from translatable.runtime.resolver import TranslationResolver
from translatable.translations import TranslationNodeCollection

__all__ = [
    "build_translations",
    "get_resolver",
    "get_translations",
    "reset_shared_state",
]

_shared_translations: OnceCell[TranslationNodeCollection] = OnceCell()
_shared_resolver: OnceCell[TranslationResolver] = OnceCell()


def build_translations(config: TranslatableConfig) -> TranslationNodeCollection:
    """Load and merge every source under the configured root.

    Args:
        config: Source root, seek mode and overlap policy

    Returns:
        A freshly built collection (not cached)

    Raises:
        TranslationSourceError: If a source cannot be read or parsed
        MergeError: On a leaf/branch conflict between sources
    """
    loader = PathSourceLoader(config.path, config.seek_mode)
    return load_collection(loader, config.overlap)


def get_translations() -> TranslationNodeCollection:
    """The shared collection, built on first use.

    Thread-safe: concurrent first callers block until one build finishes
    and then share its result.

    Raises:
        ConfigError: If the configuration cannot be loaded
        TranslationSourceError: If a source cannot be read or parsed
        MergeError: On a leaf/branch conflict between sources
    """
    return _shared_translations.get_or_init(lambda: build_translations(load_config()))


def get_resolver() -> TranslationResolver:
    """The shared resolver over get_translations() and the configured fallback."""
    return _shared_resolver.get_or_init(
        lambda: TranslationResolver(get_translations(), load_config().fallback_language)
    )


def reset_shared_state() -> None:
    """Forget the shared configuration, collection and resolver.

    Intended for test isolation only; production code never rebuilds.
    """
    _shared_resolver.reset()
    _shared_translations.reset()
    reset_config()
