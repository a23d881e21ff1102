"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @staticmethod
    def config_io(config_file: str, reason: str) -> Diagnostic:
        """Configuration file exists but could not be read.

        Args:
            config_file: Path of the configuration file
            reason: Underlying OS error text

        Returns:
            Diagnostic for CONFIG_IO
        """
        msg = f"IO error reading configuration: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_IO,
            message=msg,
            source=config_file,
            hint="Check that the file is readable by the current user",
        )

    @staticmethod
    def config_parse(
        config_file: str, reason: str, line: int | None, column: int | None
    ) -> Diagnostic:
        """Configuration file is not valid TOML.

        Args:
            config_file: Path of the configuration file
            reason: Parser error text
            line: 1-indexed line of the error, if known
            column: 1-indexed column of the error, if known

        Returns:
            Diagnostic for CONFIG_PARSE
        """
        location = None
        if line is not None and column is not None:
            location = f"line {line}, column {column}"
        msg = f"TOML parse error '{reason}' in {config_file}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_PARSE,
            message=msg,
            source=config_file,
            location=location,
        )

    @staticmethod
    def config_invalid_value(key: str, value: str, expected: list[str]) -> Diagnostic:
        """Configuration entry does not name a known member.

        Args:
            key: Configuration key (e.g., 'overlap')
            value: Raw value that failed to parse
            expected: Accepted values, for the hint

        Returns:
            Diagnostic for CONFIG_INVALID_VALUE
        """
        msg = f"Couldn't parse configuration entry '{value}' for '{key}'"
        shown = ", ".join(expected[:8])
        if len(expected) > 8:
            shown += ", ..."
        return Diagnostic(
            code=DiagnosticCode.CONFIG_INVALID_VALUE,
            message=msg,
            hint=f"Expected one of: {shown}",
        )

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    @staticmethod
    def source_root_not_found(root: str) -> Diagnostic:
        """Translation root directory does not exist.

        Args:
            root: Configured translation root

        Returns:
            Diagnostic for SOURCE_ROOT_NOT_FOUND
        """
        msg = f"Translation directory '{root}' does not exist"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_ROOT_NOT_FOUND,
            message=msg,
            source=root,
            hint="Set 'locales_path' in translatable.toml or TRANSLATABLE_LOCALES_PATH",
        )

    @staticmethod
    def source_io(source_path: str, reason: str) -> Diagnostic:
        """Translation file could not be read.

        Args:
            source_path: Relative path of the file
            reason: Underlying OS error text

        Returns:
            Diagnostic for SOURCE_IO
        """
        msg = f"IO error reading translation file '{source_path}': {reason}"
        return Diagnostic(code=DiagnosticCode.SOURCE_IO, message=msg, source=source_path)

    @staticmethod
    def source_parse(source_path: str, reason: str) -> Diagnostic:
        """Translation file is not valid TOML/JSON.

        Args:
            source_path: Relative path of the file
            reason: Parser error text

        Returns:
            Diagnostic for SOURCE_PARSE
        """
        msg = f"Translation file '{source_path}' could not be parsed: {reason}"
        return Diagnostic(code=DiagnosticCode.SOURCE_PARSE, message=msg, source=source_path)

    @staticmethod
    def source_invalid_shape(source_path: str, translation_path: str, reason: str) -> Diagnostic:
        """Table is neither a message nor a namespace.

        Args:
            source_path: Relative path of the file
            translation_path: Key path of the offending table
            reason: What is wrong with the table

        Returns:
            Diagnostic for SOURCE_INVALID_SHAPE
        """
        msg = f"Invalid translation table '{translation_path}' in '{source_path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_INVALID_SHAPE,
            message=msg,
            translation_path=translation_path,
            source=source_path,
            hint=(
                "A table must contain either only language = \"text\" entries "
                "or only nested tables"
            ),
        )

    @staticmethod
    def source_unknown_language(
        source_path: str, translation_path: str, language: str
    ) -> Diagnostic:
        """Message table uses a key that is not an ISO 639-1 code.

        Args:
            source_path: Relative path of the file
            translation_path: Key path of the message
            language: Offending key

        Returns:
            Diagnostic for SOURCE_UNKNOWN_LANGUAGE
        """
        msg = f"Unknown language '{language}' for '{translation_path}' in '{source_path}'"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_UNKNOWN_LANGUAGE,
            message=msg,
            translation_path=translation_path,
            language=language,
            source=source_path,
            hint="Language keys must be ISO 639-1 codes such as 'en' or 'es'",
        )

    @staticmethod
    def merge_node_conflict(
        translation_path: str, existing_source: str, incoming_source: str
    ) -> Diagnostic:
        """One source defines a message where another defines a namespace.

        Args:
            translation_path: Conflicting path
            existing_source: Source that first defined the node
            incoming_source: Source being merged

        Returns:
            Diagnostic for MERGE_NODE_CONFLICT
        """
        msg = (
            f"Conflicting definitions for '{translation_path}': "
            f"'{existing_source}' and '{incoming_source}' disagree on "
            f"whether it is a translation or a namespace"
        )
        return Diagnostic(
            code=DiagnosticCode.MERGE_NODE_CONFLICT,
            message=msg,
            translation_path=translation_path,
            source=incoming_source,
            hint="Rename the message or the namespace in one of the files",
        )

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    @staticmethod
    def template_unclosed_placeholder(position: int) -> Diagnostic:
        """Opening brace without closing brace.

        Args:
            position: Offset of the opening brace

        Returns:
            Diagnostic for TEMPLATE_UNCLOSED_PLACEHOLDER
        """
        msg = f"Unclosed placeholder starting at position {position}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_UNCLOSED_PLACEHOLDER,
            message=msg,
            location=f"position {position}",
            hint="Close the placeholder with '}' or escape the brace as '{{'",
        )

    @staticmethod
    def template_unmatched_brace(position: int) -> Diagnostic:
        """Closing brace outside a placeholder.

        Args:
            position: Offset of the closing brace

        Returns:
            Diagnostic for TEMPLATE_UNMATCHED_BRACE
        """
        msg = f"Unmatched '}}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_UNMATCHED_BRACE,
            message=msg,
            location=f"position {position}",
            hint="Escape literal braces as '}}'",
        )

    @staticmethod
    def template_invalid_placeholder(name: str, position: int) -> Diagnostic:
        """Placeholder content is not an identifier.

        Args:
            name: Content between the braces
            position: Offset of the opening brace

        Returns:
            Diagnostic for TEMPLATE_INVALID_PLACEHOLDER
        """
        msg = f"Invalid placeholder name '{name}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_INVALID_PLACEHOLDER,
            message=msg,
            location=f"position {position}",
            hint="Placeholder names must match [A-Za-z_][A-Za-z0-9_]*",
        )

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    @staticmethod
    def path_not_found(translation_path: str) -> Diagnostic:
        """No message at the requested path.

        Args:
            translation_path: Requested path in "::" notation

        Returns:
            Diagnostic for PATH_NOT_FOUND
        """
        msg = f"The path '{translation_path}' could not be found"
        return Diagnostic(
            code=DiagnosticCode.PATH_NOT_FOUND,
            message=msg,
            translation_path=translation_path,
            hint="Check that the path is defined in one of the translation files",
        )

    @staticmethod
    def language_not_available(
        language: str, display_name: str, translation_path: str
    ) -> Diagnostic:
        """Requested language missing and no usable fallback.

        Args:
            language: Requested language code
            display_name: Human-readable language name
            translation_path: Path where the language was expected

        Returns:
            Diagnostic for LANGUAGE_NOT_AVAILABLE
        """
        msg = (
            f"The language '{language.upper()}' ('{display_name}') "
            f"is not available for the path '{translation_path}'"
        )
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_NOT_AVAILABLE,
            message=msg,
            translation_path=translation_path,
            language=language,
            hint="Add the language to the translation or configure a fallback_language",
        )

    @staticmethod
    def fallback_not_available(fallback_language: str, translation_path: str) -> Diagnostic:
        """Configured fallback missing at the requested path.

        Args:
            fallback_language: Configured fallback language code
            translation_path: Path where the fallback was expected

        Returns:
            Diagnostic for FALLBACK_NOT_AVAILABLE
        """
        msg = f"The configured fallback language is not available for '{translation_path}'"
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_NOT_AVAILABLE,
            message=msg,
            translation_path=translation_path,
            language=fallback_language,
            hint=f"Every translation must define the fallback language '{fallback_language}'",
        )

    @staticmethod
    def missing_placeholder(placeholder: str, translation_path: str | None = None) -> Diagnostic:
        """Placeholder has no replacement value.

        Args:
            placeholder: Placeholder name without braces
            translation_path: Path of the rendered translation, if known

        Returns:
            Diagnostic for MISSING_PLACEHOLDER
        """
        msg = f"No value provided for placeholder '{{{placeholder}}}'"
        if translation_path:
            msg += f" in '{translation_path}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_PLACEHOLDER,
            message=msg,
            translation_path=translation_path,
            hint=f"Pass '{placeholder}' in the replacements mapping",
        )
