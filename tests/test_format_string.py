"""Tests for FormatString templates.

Validates parsing (placeholders, escapes, syntax errors), rendering with
replacements, the missing-placeholder policy, and canonical output.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tests.strategies import render_expected, render_template_source, template_parts
from translatable.diagnostics import DiagnosticCode, MissingPlaceholderError, TemplateSyntaxError
from translatable.templating import Cursor, FormatString, Placeholder, TextSegment

# ============================================================================
# PARSING
# ============================================================================


class TestFormatStringParse:
    """Test template parsing."""

    def test_plain_text(self) -> None:
        """Text without braces is one literal segment."""
        fs = FormatString.parse("Nice to meet you.")

        assert fs.tokens == (TextSegment("Nice to meet you."),)
        assert fs.is_static

    def test_empty_template(self) -> None:
        """Empty template has no tokens."""
        fs = FormatString.parse("")

        assert fs.tokens == ()
        assert fs.replace_with() == ""

    def test_placeholder_between_text(self) -> None:
        """Placeholders split literal text."""
        fs = FormatString.parse("What's good {user}?")

        assert fs.tokens == (TextSegment("What's good "), Placeholder("user"), TextSegment("?"))
        assert not fs.is_static

    def test_escaped_braces(self) -> None:
        """Doubled braces are literal braces merged into the surrounding text."""
        fs = FormatString.parse("a {{b}} c")

        assert fs.tokens == (TextSegment("a {b} c"),)

    def test_placeholders_first_use_order_without_duplicates(self) -> None:
        """placeholders lists each name once, in order of first use."""
        fs = FormatString.parse("{b} {a} {b}")

        assert fs.placeholders == ("b", "a")

    def test_literal_constructor(self) -> None:
        """literal() never interprets braces."""
        fs = FormatString.literal("{user}")

        assert fs.replace_with() == "{user}"
        assert str(fs) == "{{user}}"


class TestFormatStringSyntaxErrors:
    """Test malformed templates."""

    def test_unclosed_placeholder(self) -> None:
        """An opening brace without a closing one fails at its offset."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            FormatString.parse("Hello {user")

        assert exc_info.value.position == 6
        assert exc_info.value.template == "Hello {user"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.TEMPLATE_UNCLOSED_PLACEHOLDER

    def test_unmatched_closing_brace(self) -> None:
        """A lone closing brace is an error."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            FormatString.parse("Hello }")

        assert exc_info.value.position == 6
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.TEMPLATE_UNMATCHED_BRACE

    @pytest.mark.parametrize("template", ["{}", "{1user}", "{user name}", "{user-name}"])
    def test_invalid_placeholder_name(self, template: str) -> None:
        """Placeholder content must be an identifier."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            FormatString.parse(template)

        assert exc_info.value.position == 0
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.TEMPLATE_INVALID_PLACEHOLDER


# ============================================================================
# RENDERING
# ============================================================================


class TestFormatStringRender:
    """Test replace_with."""

    def test_substitutes_values(self) -> None:
        """Placeholders are replaced in source order."""
        fs = FormatString.parse("What's good {user}?")

        assert fs.replace_with({"user": "John"}) == "What's good John?"

    def test_repeated_placeholder(self) -> None:
        """A placeholder may appear several times."""
        fs = FormatString.parse("{x}-{x}")

        assert fs.replace_with({"x": "y"}) == "y-y"

    def test_non_string_values_use_str(self) -> None:
        """Values are rendered with str()."""
        fs = FormatString.parse("{count} items")

        assert fs.replace_with({"count": 3}) == "3 items"

    def test_extra_values_ignored(self) -> None:
        """Unreferenced names in the mapping are ignored."""
        fs = FormatString.parse("Hello")

        assert fs.replace_with({"user": "John"}) == "Hello"

    def test_missing_placeholder_raises(self) -> None:
        """A referenced name absent from the mapping is a hard error."""
        fs = FormatString.parse("What's good {user}?")

        with pytest.raises(MissingPlaceholderError) as exc_info:
            fs.replace_with({})

        assert exc_info.value.placeholder == "user"
        assert "{user}" in str(exc_info.value)

    def test_none_mapping_means_empty(self) -> None:
        """replace_with() without a mapping renders static templates."""
        assert FormatString.parse("Bueno conocerte.").replace_with(None) == "Bueno conocerte."

    @given(parts=template_parts(), data=st.data())
    @settings(deadline=None)
    def test_render_reproduces_template(
        self, parts: list[tuple[str, str]], data: st.DataObject
    ) -> None:
        """PROPERTY: rendering replaces every {name} and leaves literal text intact."""
        names = {value for kind, value in parts if kind == "name"}
        values = {name: data.draw(st.text(max_size=10), label=name) for name in names}

        fs = FormatString.parse(render_template_source(parts))

        assert fs.replace_with(values) == render_expected(parts, values)


# ============================================================================
# CANONICAL TEXT
# ============================================================================


class TestFormatStringCanonical:
    """Test str() output."""

    def test_escapes_reapplied(self) -> None:
        """Literal braces are escaped again."""
        assert str(FormatString.parse("{{a}} {b}")) == "{{a}} {b}"

    @given(parts=template_parts())
    def test_parse_of_str_is_identity(self, parts: list[tuple[str, str]]) -> None:
        """PROPERTY: parse(str(fs)) == fs."""
        fs = FormatString.parse(render_template_source(parts))

        assert FormatString.parse(str(fs)) == fs


# ============================================================================
# CURSOR
# ============================================================================


class TestCursor:
    """Test the immutable cursor used by the template parser."""

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original cursor unchanged."""
        cursor = Cursor("hello", 0)
        moved = cursor.advance(2)

        assert cursor.pos == 0
        assert moved.current == "l"

    def test_advance_clamped_at_eof(self) -> None:
        """Advancing past the end stops at EOF."""
        assert Cursor("hi", 1).advance(10).is_eof

    def test_current_at_eof_raises(self) -> None:
        """Reading at EOF raises EOFError."""
        with pytest.raises(EOFError):
            _ = Cursor("", 0).current

    def test_peek_and_find(self) -> None:
        """peek looks ahead; find returns absolute offsets."""
        cursor = Cursor("{name} x", 1)

        assert cursor.peek() == "n"
        assert cursor.peek(10) is None
        assert cursor.find("}") == 5
        assert cursor.slice_to(5) == "name"
        assert cursor.find("!") is None


# ============================================================================
# ROBUSTNESS
# ============================================================================


@pytest.mark.fuzz
class TestFormatStringRobustness:
    """Arbitrary input never escapes the documented error types."""

    @given(source=st.text(alphabet=st.sampled_from("ab_{}1 \n"), max_size=40))
    @settings(max_examples=500)
    def test_parse_arbitrary_text(self, source: str) -> None:
        """PROPERTY: parse() succeeds or raises TemplateSyntaxError."""
        try:
            template = FormatString.parse(source)
        except TemplateSyntaxError as e:
            assert 0 <= e.position <= len(source)
        else:
            assert FormatString.parse(str(template)) == template

    @given(source=st.text(max_size=60))
    @settings(max_examples=500)
    def test_parse_unicode(self, source: str) -> None:
        """PROPERTY: any Unicode text either parses or reports a syntax error."""
        try:
            FormatString.parse(source)
        except TemplateSyntaxError:
            pass
