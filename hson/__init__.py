"""hson: strip HSON (JSON with comments and multi-line strings) down to JSON.

HSON is intended *solely* as a human-readable extension to JSON, never as a
serialization format. Strip it to raw JSON before handing it to anything
that stores or transmits the data.
"""

import logging

from .errors import (
    HsonError,
    LoadError,
    ParseError,
    format_error,
    format_parse_error,
    format_suggestion,
)
from .loader import load, loads, strip
from .reader import HsonReader
from .source import (
    CharacterSource,
    DecodingCharacterSource,
    TextCharacterSource,
    as_character_source,
)
from .stripper import HsonStripper, Position, strip_hson
from .whitespace import WhitespaceHandling

__version__ = "0.1.0"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Configure root logging for command-line use."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


__all__ = [
    "HsonError",
    "LoadError",
    "ParseError",
    "format_error",
    "format_parse_error",
    "format_suggestion",
    "load",
    "loads",
    "strip",
    "HsonReader",
    "CharacterSource",
    "DecodingCharacterSource",
    "TextCharacterSource",
    "as_character_source",
    "HsonStripper",
    "Position",
    "strip_hson",
    "WhitespaceHandling",
    "setup_logging",
]
