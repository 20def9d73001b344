"""Error types and message formatting for hson.

Error Style Guide:
- User-facing errors use 'Error: ' prefix
- Parser errors carry the 1-based line and column of the source position
  reached when the problem was detected
- Include actionable hints where helpful
"""


class HsonError(Exception):
    """Base class for all errors raised by hson."""
    pass


class ParseError(HsonError):
    """Raised by the stripper when the HSON input is malformed.

    The column is the position just past the character that triggered the
    error (or just past the last character read, at end of stream).
    """

    def __init__(self, line: int, column: int, message: str):
        self.line = line
        self.column = column
        self.message = message
        super().__init__(f"HSON parser error at line {line}({column}): {message}")


class LoadError(HsonError):
    """Raised when HSON input cannot be read or does not yield valid JSON."""
    pass


def format_error(message: str) -> str:
    """Format an error message with consistent prefix.

    Examples:
        >>> format_error("file not found")
        'Error: file not found'
    """
    return f"Error: {message}"


def format_suggestion(message: str, suggestion: str) -> str:
    """Format an error message with a helpful suggestion.

    Examples:
        >>> format_suggestion("cannot write stdin", "pass a FILE argument")
        'Error: cannot write stdin. Hint: pass a FILE argument'
    """
    return f"{format_error(message)}. Hint: {suggestion}"


def format_parse_error(original_text: str, error: ParseError) -> str:
    """Format a ParseError with the offending source line and a caret.

    Args:
        original_text: The HSON text that was being stripped
        error: The ParseError raised by the stripper

    Returns:
        A multi-line message string
    """
    lines = original_text.split("\n")
    msg_parts = [str(error)]

    if 1 <= error.line <= len(lines):
        offending_line = lines[error.line - 1].rstrip("\r")
        msg_parts.append(offending_line)

        # The column points one past the character that was consumed last
        caret_pos = max(error.column - 2, 0)
        msg_parts.append(" " * caret_pos + "^")

    return "\n".join(msg_parts)


__all__ = [
    "HsonError",
    "ParseError",
    "LoadError",
    "format_error",
    "format_suggestion",
    "format_parse_error",
]
