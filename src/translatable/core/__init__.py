"""Core utilities shared across translations, templating and runtime layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- templating <- translations <- loading <- runtime

Exports:
    OnceCell: Write-once, read-many lazily initialized cell
    is_valid_identifier: Identifier grammar check for segments and placeholders

Python 3.13+.
"""

from .identifier_validation import is_identifier_char, is_identifier_start, is_valid_identifier
from .once import OnceCell

__all__ = ["OnceCell", "is_identifier_char", "is_identifier_start", "is_valid_identifier"]
