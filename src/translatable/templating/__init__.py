"""Message template package.

Provides the FormatString template type and its immutable-cursor parser.

Python 3.13+.
"""

from .cursor import Cursor
from .format_string import FormatString, FormatToken, Placeholder, TextSegment

__all__ = [
    "Cursor",
    "FormatString",
    "FormatToken",
    "Placeholder",
    "TextSegment",
]
