"""Translation runtime package.

Provides resolution against the merged collection, the process-wide
shared state, and the immediate, prepared and context-based lookup APIs.
Depends on the translations and loading packages.

Python 3.13+.
"""

from .context import PATH_METADATA_KEY, translation_context
from .resolver import TranslationResolver
from .shared import build_translations, get_resolver, get_translations, reset_shared_state
from .translation import PreparedTranslation, prepare_translation, translation

__all__ = [
    "PATH_METADATA_KEY",
    "PreparedTranslation",
    "TranslationResolver",
    "build_translations",
    "get_resolver",
    "get_translations",
    "prepare_translation",
    "reset_shared_state",
    "translation",
    "translation_context",
]
