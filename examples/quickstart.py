"""Quickstart example for translatable.

This example builds a throwaway translations directory and walks through
the three ways of asking for a translation: immediate lookups, prepared
lookups, and translation contexts.

Note: The shared resolver reads ./translatable.toml and ./translations from
the working directory, so the example switches into a temporary directory.
"""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from translatable import (
    Language,
    LanguageNotAvailableError,
    PathNotFoundError,
    prepare_translation,
    translation,
    translation_context,
)
from translatable.diagnostics import DiagnosticFormatter, OutputFormat

GREETINGS = """\
[greetings.formal]
aa = "Nice to meet you."
es = "Bueno conocerte."

[greetings.informal]
aa = "What's good {user}?"
"""

MENU = '{"menu": {"open": {"en": "Open", "es": "Abrir"}, "close": {"en": "Close"}}}'

workdir = Path(tempfile.mkdtemp())
(workdir / "translations").mkdir()
(workdir / "translations" / "greetings.toml").write_text(GREETINGS, encoding="utf-8")
(workdir / "translations" / "menu.json").write_text(MENU, encoding="utf-8")
os.chdir(workdir)

# Example 1: Immediate lookups
print("=" * 50)
print("Example 1: Immediate Lookups")
print("=" * 50)

print(translation(Language.AA, "greetings::informal", {"user": "John"}))
# Output: What's good John?

print(translation("es", "greetings.formal"))
# Output: Bueno conocerte.

# Example 2: Errors carry diagnostics
print("\n" + "=" * 50)
print("Example 2: Errors")
print("=" * 50)

try:
    translation(Language.AA, "greetings::unknown")
except PathNotFoundError as e:
    print(e)
    # Output: The path 'greetings::unknown' could not be found

try:
    translation(Language.ES, "menu::close")
except LanguageNotAvailableError as e:
    assert e.diagnostic is not None
    print(e.diagnostic.format_error())
    print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))

# Example 3: Prepared lookups
print("\n" + "=" * 50)
print("Example 3: Prepared Lookups")
print("=" * 50)

# Path validated now, language supplied per call.
open_label = prepare_translation("menu::open")
for language in ("en", "es"):
    result, errors = open_label(language=language)
    print(f"{language}: {result}")

# Errors at call time are returned, never raised.
result, errors = open_label(language="fr")
print(result, [type(error).__name__ for error in errors])
# Output: {menu::open} ['LanguageNotAvailableError']


# Example 4: Translation contexts
print("\n" + "=" * 50)
print("Example 4: Translation Contexts")
print("=" * 50)


@translation_context(base_path="greetings")
@dataclass(frozen=True)
class Greetings:
    """Every field is checked against the translations when the class is defined."""

    formal: str
    casual: str = field(metadata={"path": "informal"})


greetings = Greetings.load_translations(  # type: ignore[attr-defined]
    Language.AA, {"user": "John"}
)
print(greetings.formal)
# Output: Nice to meet you.
print(greetings.casual)
# Output: What's good John?
