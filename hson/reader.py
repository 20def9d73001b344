"""Stream-style reader over the stripper.

HsonReader can sit in a chain of readers as a filter: it opens HSON from a
path or stream and exposes the stripped JSON through read methods. The
methods only accumulate pulls from the stripper. Reading past the end gives
an empty result, and a ParseError propagates from whichever call hit it.
"""

import os
from pathlib import Path
from typing import BinaryIO, TextIO

from .source import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_ENCODING,
    CharacterSource,
    DecodingCharacterSource,
    as_character_source,
)
from .stripper import HsonStripper
from .whitespace import WhitespaceHandling


class HsonReader:
    """Reads HSON and returns JSON from every read call.

    Args:
        source: A path, a binary or text stream, str/bytes content, or a
            CharacterSource
        whitespace: Whitespace emission policy
        encoding: Encoding used for byte input when no BOM says otherwise
        detect_encoding_from_bom: Let a byte-order mark pick the encoding
        buffer_size: Bytes (or characters) read from the stream at a time
        close_stream: Close a caller-supplied stream when the reader closes

    Example:
        >>> with HsonReader(b'{"a": [1, 2]} // done') as reader:
        ...     reader.read_to_end()
        '{"a":[1,2]}'
    """

    def __init__(
        self,
        source: str | os.PathLike | BinaryIO | TextIO | bytes | CharacterSource,
        whitespace: WhitespaceHandling = WhitespaceHandling.NO_WHITESPACE,
        encoding: str = DEFAULT_ENCODING,
        detect_encoding_from_bom: bool = True,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        close_stream: bool = True,
    ):
        if isinstance(source, (str, os.PathLike)):
            # Strings are paths here; use from_string() for HSON text
            stream = open(Path(source), "rb")
            char_source = DecodingCharacterSource(
                stream, encoding, detect_encoding_from_bom, buffer_size
            )
            close_stream = True
        else:
            char_source = as_character_source(
                source, encoding, detect_encoding_from_bom, buffer_size
            )

        self._char_source = char_source
        self._close_stream = close_stream
        self._stripper = HsonStripper(char_source, whitespace)
        self.closed = False

    @classmethod
    def from_string(
        cls,
        text: str,
        whitespace: WhitespaceHandling = WhitespaceHandling.NO_WHITESPACE,
    ) -> "HsonReader":
        """Create a reader over HSON text held in memory."""
        return cls(as_character_source(text), whitespace)

    @property
    def whitespace(self) -> WhitespaceHandling:
        return self._stripper.whitespace

    @property
    def encoding(self) -> str | None:
        """Encoding of byte input (BOM-detected once reading starts), None for text."""
        if isinstance(self._char_source, DecodingCharacterSource):
            return self._char_source.encoding
        return None

    def __enter__(self) -> "HsonReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self):
        """Iterate over output characters."""
        self._check_open()
        return self._stripper

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed HsonReader")

    def read_char(self) -> str | None:
        """Return the next output character, or None at the end."""
        self._check_open()
        return self._stripper.pull()

    def read(self, size: int = -1) -> str:
        """Read up to size characters; a negative size reads to the end."""
        self._check_open()
        if size is None or size < 0:
            return self.read_to_end()

        chars: list[str] = []
        while len(chars) < size:
            char = self._stripper.pull()
            if char is None:
                break
            chars.append(char)
        return "".join(chars)

    def read_line(self) -> str:
        """Read up to, but excluding, the next '\\n' (which is consumed)."""
        self._check_open()
        chars: list[str] = []
        while True:
            char = self._stripper.pull()
            if char is None or char == "\n":
                break
            chars.append(char)
        return "".join(chars)

    def read_to_end(self) -> str:
        """Read all remaining output."""
        self._check_open()
        return "".join(self._stripper)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self._close_stream:
            self._stripper.close()


__all__ = ["HsonReader"]
