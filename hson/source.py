"""Character sources feeding the stripper.

A character source hands out decoded characters one at a time through
``next_char()``, returning ``None`` once the underlying stream is
exhausted (and on every call after that). There is no pushback and no
peeking; the stripper keeps its own one-character lookahead.
"""

import codecs
import io
from typing import BinaryIO, TextIO

DEFAULT_ENCODING = "utf-8"
DEFAULT_BUFFER_SIZE = 1024

# Longest BOMs first so UTF-32 LE is not mistaken for UTF-16 LE
_BOMS: list[tuple[bytes, str]] = [
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
]


def detect_bom(data: bytes) -> tuple[str | None, int]:
    """Detect a byte-order mark at the start of data.

    Returns:
        (encoding, bom_length), or (None, 0) when there is no BOM
    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding, len(bom)
    return None, 0


class CharacterSource:
    """Base class: buffers decoded chunks and hands out single characters."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._buffer_size = buffer_size
        self._chunk = ""
        self._index = 0
        self._eof = False

    def _read_chunk(self) -> str:
        """Return the next run of decoded text, or '' at end of input."""
        raise NotImplementedError

    def next_char(self) -> str | None:
        """Return the next character, or None once the input is exhausted."""
        while self._index >= len(self._chunk):
            if self._eof:
                return None
            self._chunk = self._read_chunk()
            self._index = 0
            if not self._chunk:
                self._eof = True
                return None

        char = self._chunk[self._index]
        self._index += 1
        return char

    def close(self) -> None:
        pass


class TextCharacterSource(CharacterSource):
    """Reads characters from an already-decoded text stream."""

    def __init__(self, stream: TextIO, buffer_size: int = DEFAULT_BUFFER_SIZE):
        super().__init__(buffer_size)
        self._stream = stream

    def _read_chunk(self) -> str:
        return self._stream.read(self._buffer_size)

    def close(self) -> None:
        self._stream.close()


class DecodingCharacterSource(CharacterSource):
    """Decodes a byte stream incrementally.

    When detect_encoding_from_bom is set, a leading UTF-8/16/32 byte-order
    mark overrides the configured encoding and is dropped from the output.
    """

    def __init__(
        self,
        stream: BinaryIO,
        encoding: str = DEFAULT_ENCODING,
        detect_encoding_from_bom: bool = True,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        super().__init__(buffer_size)
        self._stream = stream
        self._encoding = encoding
        self._detect_bom = detect_encoding_from_bom
        self._decoder: codecs.IncrementalDecoder | None = None

    @property
    def encoding(self) -> str:
        """The encoding in use (known after the first chunk is read)."""
        return self._encoding

    def _start(self) -> bytes:
        data = self._stream.read(self._buffer_size)
        if self._detect_bom:
            # Make sure there are enough bytes to see a 4-byte BOM
            while 0 < len(data) < 4:
                more = self._stream.read(self._buffer_size)
                if not more:
                    break
                data += more
            detected, bom_length = detect_bom(data)
            if detected is not None:
                self._encoding = detected
                data = data[bom_length:]
        self._decoder = codecs.getincrementaldecoder(self._encoding)(errors="strict")
        return data

    def _read_chunk(self) -> str:
        if self._decoder is None:
            data = self._start()
            if not data:
                # The first read held nothing but the BOM
                data = self._stream.read(self._buffer_size)
        else:
            data = self._stream.read(self._buffer_size)

        # A chunk may end mid-sequence and decode to nothing; keep reading
        while data:
            text = self._decoder.decode(data)
            if text:
                return text
            data = self._stream.read(self._buffer_size)
        return self._decoder.decode(b"", final=True)

    def close(self) -> None:
        self._stream.close()


def as_character_source(
    source,
    encoding: str = DEFAULT_ENCODING,
    detect_encoding_from_bom: bool = True,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> CharacterSource:
    """Wrap str, bytes, text streams or binary streams as a CharacterSource.

    Raises:
        TypeError: If source is none of the supported kinds
    """
    if isinstance(source, CharacterSource):
        return source
    if isinstance(source, str):
        return TextCharacterSource(io.StringIO(source), buffer_size)
    if isinstance(source, (bytes, bytearray)):
        return DecodingCharacterSource(
            io.BytesIO(bytes(source)), encoding, detect_encoding_from_bom, buffer_size
        )
    if hasattr(source, "read"):
        # A zero-length read tells text and binary streams apart without consuming
        probe = source.read(0)
        if isinstance(probe, str):
            return TextCharacterSource(source, buffer_size)
        if isinstance(probe, (bytes, bytearray)):
            return DecodingCharacterSource(
                source, encoding, detect_encoding_from_bom, buffer_size
            )
    raise TypeError(
        f"source must be str, bytes or a readable stream, got {type(source).__name__}"
    )


__all__ = [
    "CharacterSource",
    "TextCharacterSource",
    "DecodingCharacterSource",
    "as_character_source",
    "detect_bom",
    "DEFAULT_ENCODING",
    "DEFAULT_BUFFER_SIZE",
]
