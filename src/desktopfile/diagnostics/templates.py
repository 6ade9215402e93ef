"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceLocation

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def malformed_line(location: SourceLocation) -> Diagnostic:
        """Line that is not blank, a comment, a group header or a key.

        Args:
            location: Where the line was found

        Returns:
            Diagnostic for MALFORMED_LINE
        """
        msg = (
            f"Line {location.line} is not a key, comment, group header, or whitespace"
        )
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_LINE,
            message=msg,
            location=location,
            hint="Keys must have the form Key=Value or Key[locale]=Value",
        )

    @staticmethod
    def key_before_group(location: SourceLocation) -> Diagnostic:
        """Key assignment before any group header.

        Args:
            location: Where the key was found

        Returns:
            Diagnostic for KEY_BEFORE_GROUP
        """
        msg = f"Line {location.line} has a key before a group heading"
        return Diagnostic(
            code=DiagnosticCode.KEY_BEFORE_GROUP,
            message=msg,
            location=location,
            hint="Add a [Desktop Entry] header before the first key",
        )

    @staticmethod
    def duplicate_group(name: str, location: SourceLocation) -> Diagnostic:
        """Repeated group header.

        Args:
            name: Group name
            location: Where the repeated header was found

        Returns:
            Diagnostic for DUPLICATE_GROUP
        """
        msg = f"Duplicate group '{name}' on line {location.line}"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_GROUP,
            message=msg,
            location=location,
            hint="Merge the groups or enable allow_duplicate_groups",
        )

    @staticmethod
    def duplicate_key(
        key: str, group: str, location: SourceLocation, locale: str = ""
    ) -> Diagnostic:
        """Repeated key or key+locale within one group.

        Args:
            key: Key name (without locale suffix)
            group: Name of the group holding the key
            location: Where the repeated key was found
            locale: Rendered locale of the variant, empty for the default value

        Returns:
            Diagnostic for DUPLICATE_KEY
        """
        shown = f"{key}[{locale}]" if locale else key
        msg = f"Duplicate key '{shown}' in group '{group}' on line {location.line}"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_KEY,
            message=msg,
            location=location,
            hint=(
                "Remove the repeated line or enable allow_duplicate_keys_join / "
                "allow_duplicate_keys_ignore"
            ),
        )

    @staticmethod
    def stream_read_failed(reason: str, source_name: str | None = None) -> Diagnostic:
        """Underlying reader raised before end of input.

        Args:
            reason: Text of the original error
            source_name: File name or label of the stream, if known

        Returns:
            Diagnostic for STREAM_READ_FAILED
        """
        where = f" '{source_name}'" if source_name else ""
        msg = f"Failed to read desktop file{where}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.STREAM_READ_FAILED,
            message=msg,
            hint="Check that the file exists, is readable and is UTF-8 encoded",
        )
