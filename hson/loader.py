"""Loading HSON into Python objects through the json module."""

import json
import logging
from pathlib import Path
from typing import Any

from .errors import LoadError
from .reader import HsonReader
from .stripper import strip_hson
from .whitespace import WhitespaceHandling

_logging = logging.getLogger(__name__)


def strip(
    text: str, whitespace: WhitespaceHandling = WhitespaceHandling.NO_WHITESPACE
) -> str:
    """Strip HSON extensions from text and return JSON text.

    Raises:
        ParseError: If the HSON is malformed
    """
    return strip_hson(text, whitespace)


def _format_json_error(json_text: str, error: json.JSONDecodeError) -> str:
    """Format a JSON decode error against the stripped output.

    Args:
        json_text: The stripped JSON that failed to decode
        error: The JSONDecodeError raised by json.loads()

    Returns:
        A formatted error message string
    """
    start = max(error.pos - 20, 0)
    context = json_text[start:error.pos + 20]
    caret = " " * (error.pos - start) + "^"
    return "\n".join(
        [f"Invalid JSON after stripping HSON at char {error.pos}: {error.msg}", context, caret]
    )


def loads(text: str, **json_kwargs: Any) -> Any:
    """Strip HSON text and decode it with json.loads().

    Args:
        text: HSON (or plain JSON) text
        **json_kwargs: Passed through to json.loads()

    Returns:
        The decoded Python value

    Raises:
        ParseError: If the HSON is malformed
        LoadError: If the stripped output is not valid JSON

    Examples:
        >>> loads('{"a": 1, // one\\n "b": @"x""y"}')
        {'a': 1, 'b': 'x"y'}
    """
    json_text = strip(text)
    try:
        return json.loads(json_text, **json_kwargs)
    except json.JSONDecodeError as e:
        raise LoadError(_format_json_error(json_text, e)) from e


def load(source: Path | str | Any, encoding: str = "utf-8", **json_kwargs: Any) -> Any:
    """Load HSON from a file path or an open stream.

    Args:
        source: A Path or path string, or a readable text/binary stream
        encoding: Encoding for byte input when no BOM is present
        **json_kwargs: Passed through to json.loads()

    Raises:
        ParseError: If the HSON is malformed
        LoadError: If the file cannot be read or the output is not valid JSON
    """
    _logging.debug(f"Loading HSON from {source!r}")
    try:
        with HsonReader(source, encoding=encoding) as reader:
            json_text = reader.read_to_end()
    except FileNotFoundError:
        raise LoadError(f"File not found: {source}")
    except PermissionError:
        raise LoadError(f"Permission denied reading file: {source}")
    except IsADirectoryError:
        raise LoadError(f"Is a directory: {source}")
    except UnicodeDecodeError:
        raise LoadError(f"File is not valid {encoding}: {source}")
    except OSError as e:
        raise LoadError(f"Error reading {source}: {e}")

    try:
        return json.loads(json_text, **json_kwargs)
    except json.JSONDecodeError as e:
        raise LoadError(_format_json_error(json_text, e)) from e


__all__ = ["strip", "loads", "load"]
