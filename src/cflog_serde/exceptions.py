"""
Custom exceptions for CloudFront log deserialization.

Every per-line failure raised by the parser is one of EncodingError,
MalformedLineError, InvalidTimestampError or InvalidNumericFieldError.
"""

from typing import Optional

# Raw content longer than this is truncated in messages (attributes keep it all)
MAX_CONTENT_LENGTH = 100


def _truncate(content: str) -> str:
    """Shorten long raw content for readability in error messages."""
    if len(content) > MAX_CONTENT_LENGTH:
        return content[:MAX_CONTENT_LENGTH] + "..."
    return content


class CfLogError(Exception):
    """
    Base exception for all CloudFront log errors.

    All other exceptions in this module inherit from this class,
    allowing hosts to catch every parse failure in one place.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class EncodingError(CfLogError):
    """
    Raised when input bytes cannot be decoded to text.

    Surfaced before any parsing is attempted.

    Attributes:
        raw: The undecodable input bytes
        encoding: The encoding that was attempted
        reason: Decoder error detail (optional)
    """

    def __init__(
        self,
        message: str,
        raw: bytes = b"",
        encoding: str = "utf-8",
        reason: Optional[str] = None,
    ):
        self.raw = raw
        self.encoding = encoding
        self.reason = reason
        super().__init__(message)

    def _format_message(self) -> str:
        """Format the error message with encoding and byte context."""
        parts = [f"{self.message} (encoding='{self.encoding}')"]
        if self.reason:
            parts.append(f"reason: {self.reason}")
        if self.raw:
            parts.append(f"raw: {self.raw[:MAX_CONTENT_LENGTH]!r}")
        return " - ".join(parts)


class MalformedLineError(CfLogError):
    """
    Raised when a line does not match the CloudFront log grammar.

    Attributes:
        line: The offending raw line
    """

    def __init__(self, message: str, line: str = ""):
        self.line = line
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.message}: {_truncate(self.line)!r}"


class InvalidTimestampError(CfLogError):
    """
    Raised when the date and time tokens cannot be parsed.

    Attributes:
        value: The combined "date time" string
    """

    def __init__(self, message: str, value: str = ""):
        self.value = value
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.message} (value={_truncate(self.value)!r})"


class InvalidNumericFieldError(CfLogError):
    """
    Raised when a numeric token is neither "-" nor a valid integer.

    Attributes:
        field: The record field being decoded
        value: The raw token
    """

    def __init__(self, message: str, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.message} (field='{self.field}', value={_truncate(self.value)!r})"


class LogFileError(CfLogError):
    """
    Raised when reading a log file in strict mode hits a bad line.

    Wraps the per-line error, which is kept as ``__cause__``.

    Attributes:
        line_number: The 1-based line number where parsing failed (optional)
        line_content: The content of the problematic line (optional)
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line_content: Optional[str] = None,
    ):
        self.line_number = line_number
        self.line_content = line_content
        super().__init__(message)

    def _format_message(self) -> str:
        """Format the error message with line context."""
        if self.line_number is not None and self.line_content:
            return f"{self.message} (line {self.line_number}: {_truncate(self.line_content)!r})"
        elif self.line_number is not None:
            return f"{self.message} (line {self.line_number})"
        return self.message


class ConfigurationError(CfLogError):
    """
    Raised when parser settings are invalid or cannot be loaded.

    Attributes:
        errors: Individual validation error messages
    """

    def __init__(self, message: str, errors: Optional[list[str]] = None):
        self.errors = errors or []
        super().__init__(message)

    def _format_message(self) -> str:
        if self.errors:
            return f"{self.message}: {'; '.join(self.errors)}"
        return self.message
