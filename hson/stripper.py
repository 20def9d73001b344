"""HSON to JSON stripping state machine.

HSON is JSON extended with human-friendly additions:
- // line comments and /* block comments */
- @"..." multi-line string literals, where "" stands for a literal quote

The stripper removes the extensions and emits plain JSON, one character
per pull. It does not parse the JSON underneath: structural characters
pass through uninspected, so the output is only as well-formed as the
input's JSON subset.

The state machine approach ensures that:
- Nothing is read from the source until output is requested
- At most one source character is buffered ahead
- Errors carry the line/column reached in the source
"""

import logging
from collections import deque
from dataclasses import dataclass, replace
from typing import Final

from .errors import ParseError
from .source import CharacterSource, as_character_source
from .whitespace import WhitespaceHandling

_logging = logging.getLogger(__name__)


# State constants for the state machine
_TOP: Final[int] = 0
_SLASH: Final[int] = 1
_LINE_COMMENT: Final[int] = 2
_BLOCK_COMMENT: Final[int] = 3
_BLOCK_COMMENT_STAR: Final[int] = 4
_STRING: Final[int] = 5
_ESCAPE: Final[int] = 6
_AT: Final[int] = 7
_MULTILINE: Final[int] = 8
_MULTILINE_QUOTE: Final[int] = 9
_DONE: Final[int] = 10

# Never equal to ':' or ','
_NOTHING_EMITTED: Final[str] = "\0"

_EMPTY = object()

_OPENERS: Final[str] = "{[,"
_CLOSERS: Final[str] = ":]}"

# str.isspace() accepts the ASCII information separators; they are not whitespace here
_NOT_WHITESPACE: Final[str] = "\x1c\x1d\x1e\x1f"


@dataclass
class Position:
    """1-based line and column reached in the source."""
    line: int = 1
    column: int = 1


class HsonStripper:
    """Pull iterator turning HSON characters into JSON characters.

    Each call to pull() (or next()) runs the state machine forward until one
    output character is ready, reading as many source characters as that
    takes. After the output is exhausted, or after a ParseError has been
    raised, every further pull reports end of output.

    An instance is meant for a single consumer. Pulling from several threads
    at once is unsupported and is not guarded against.

    Example:
        >>> "".join(HsonStripper('{"a": 1} // note'))
        '{"a":1}'
        >>> "".join(HsonStripper('@"a""b"'))
        '"a\\\\"b"'
    """

    def __init__(
        self,
        source: CharacterSource | str,
        whitespace: WhitespaceHandling = WhitespaceHandling.NO_WHITESPACE,
    ) -> None:
        """Initialize the stripper.

        Args:
            source: A CharacterSource, or anything as_character_source accepts
            whitespace: Whitespace emission policy for this instance
        """
        self._source = as_character_source(source)
        self._whitespace = whitespace
        self._position = Position()
        self._lookahead = _EMPTY
        self._pending: deque[str] = deque()
        self.state: int = _TOP
        self.last_emitted: str = _NOTHING_EMITTED
        self.chars_read: int = 0
        self.chars_emitted: int = 0

    @property
    def whitespace(self) -> WhitespaceHandling:
        return self._whitespace

    @property
    def position(self) -> Position:
        """Snapshot of the current source position."""
        return replace(self._position)

    @property
    def finished(self) -> bool:
        return self.state == _DONE and not self._pending

    def __iter__(self) -> "HsonStripper":
        return self

    def __next__(self) -> str:
        char = self.pull()
        if char is None:
            raise StopIteration
        return char

    def pull(self) -> str | None:
        """Return the next JSON output character, or None at end of output.

        Raises:
            ParseError: If the HSON input is malformed
        """
        while not self._pending:
            if self.state == _DONE:
                return None
            try:
                self._step()
            except ParseError as e:
                self.state = _DONE
                self._pending.clear()
                _logging.debug(f"Stopped after {self.chars_emitted} output chars: {e}")
                raise

        self.chars_emitted += 1
        return self._pending.popleft()

    def close(self) -> None:
        """Stop producing output and close the underlying source."""
        self.state = _DONE
        self._pending.clear()
        self._source.close()

    # -- source access -----------------------------------------------------

    def _read(self) -> str | None:
        """Read the next source character, updating the position.

        '\\n' starts a new line, '\\r' is not counted, anything else advances
        the column.
        """
        if self._lookahead is not _EMPTY:
            char = self._lookahead
            self._lookahead = _EMPTY
            return char

        char = self._source.next_char()
        if char is None:
            return None

        self.chars_read += 1
        if char == "\n":
            self._position.line += 1
            self._position.column = 1
        elif char != "\r":
            self._position.column += 1
        return char

    def _unread(self, char: str | None) -> None:
        self._lookahead = char

    def _error(self, message: str) -> ParseError:
        return ParseError(self._position.line, self._position.column, message)

    # -- emission ----------------------------------------------------------

    def _emit(self, char: str) -> None:
        self._pending.append(char)
        self.last_emitted = char

    def _begin_token(self) -> None:
        """Called right before emitting a character that starts a value."""
        if self._whitespace.leading_space(self.last_emitted):
            self._pending.append(" ")

    # -- state handlers ----------------------------------------------------

    def _step(self) -> None:
        """Consume one source character and dispatch on the current state."""
        char = self._read()

        if self.state == _TOP:
            self._process_top_state(char)
        elif self.state == _SLASH:
            self._process_slash_state(char)
        elif self.state == _LINE_COMMENT:
            self._process_line_comment_state(char)
        elif self.state == _BLOCK_COMMENT:
            self._process_block_comment_state(char)
        elif self.state == _BLOCK_COMMENT_STAR:
            self._process_block_comment_star_state(char)
        elif self.state == _STRING:
            self._process_string_state(char)
        elif self.state == _ESCAPE:
            self._process_escape_state(char)
        elif self.state == _AT:
            self._process_at_state(char)
        elif self.state == _MULTILINE:
            self._process_multiline_state(char)
        elif self.state == _MULTILINE_QUOTE:
            self._process_multiline_quote_state(char)

    def _process_top_state(self, char: str | None) -> None:
        """Handle character outside any string or comment.

        Recognizes only the basic JSON tokens; values are not validated.
        End of input here is the normal way the output ends.
        """
        if char is None:
            self.state = _DONE
            _logging.debug(
                f"Stripped {self.chars_read} source chars to {self.chars_emitted} output chars"
            )
        elif char == "/":
            self.state = _SLASH
        elif char == "@":
            self.state = _AT
        elif char == '"':
            self._begin_token()
            self._emit(char)
            self.state = _STRING
        elif char in _OPENERS:
            self._begin_token()
            self._emit(char)
        elif char in _CLOSERS:
            self._emit(char)
        elif char.isalnum() or char == "_" or char == ".":
            self._begin_token()
            self._emit(char)
        elif char.isspace() and char not in _NOT_WHITESPACE:
            if self._whitespace.emits_source_whitespace():
                self._emit(char)
        else:
            raise self._error(f"Unexpected character '{char}'")

    def _process_slash_state(self, char: str | None) -> None:
        """Previous char was '/', which must start a comment."""
        if char is None:
            raise self._error("Unexpected end of stream")
        if char == "/":
            self.state = _LINE_COMMENT
        elif char == "*":
            self.state = _BLOCK_COMMENT
        else:
            raise self._error("Unknown comment type")

    def _process_line_comment_state(self, char: str | None) -> None:
        """Discard until newline. A comment may end the stream."""
        if char is None:
            self.state = _TOP
        elif char == "\n":
            if self._whitespace.emits_comment_line_breaks():
                self._emit(char)
            self.state = _TOP
        elif char == "\r":
            if self._whitespace.emits_comment_line_breaks():
                self._emit(char)

    def _process_block_comment_state(self, char: str | None) -> None:
        # Nothing inside a block comment is emitted, whatever the policy
        if char is None:
            raise self._error("Unexpected end of stream")
        if char == "*":
            self.state = _BLOCK_COMMENT_STAR

    def _process_block_comment_star_state(self, char: str | None) -> None:
        """Previous char was '*' inside a block comment."""
        if char is None:
            raise self._error("Unexpected end of stream")
        if char == "/":
            self.state = _TOP
        elif char != "*":
            self.state = _BLOCK_COMMENT

    def _process_string_state(self, char: str | None) -> None:
        """Copy a regular JSON string through to its closing quote."""
        if char is None:
            raise self._error("Unexpected end of stream")
        self._emit(char)
        if char == "\\":
            self.state = _ESCAPE
        elif char == '"':
            self.state = _TOP

    def _process_escape_state(self, char: str | None) -> None:
        """Previous char was a backslash in a string.

        Whatever follows is copied as-is; escape codes are not validated.
        """
        if char is None:
            raise self._error("Unexpected end of stream")
        self._emit(char)
        self.state = _STRING

    def _process_at_state(self, char: str | None) -> None:
        """Previous char was '@', which must open a multi-line string."""
        if char is None:
            raise self._error("Unexpected end of stream")
        if char != '"':
            raise self._error("Malformed multi-line string literal")
        self._begin_token()
        self._emit('"')
        self.state = _MULTILINE

    def _process_multiline_state(self, char: str | None) -> None:
        """Re-encode a multi-line string body as a JSON string body.

        Backslashes carry no meaning in the body and are doubled. Line
        breaks become escape sequences since JSON strings cannot hold them.
        """
        if char is None:
            raise self._error("Unexpected end of stream")
        if char == '"':
            self.state = _MULTILINE_QUOTE
        elif char == "\\":
            self._emit("\\")
            self._emit("\\")
        elif char == "\r":
            self._emit("\\")
            self._emit("r")
        elif char == "\n":
            self._emit("\\")
            self._emit("n")
        else:
            self._emit(char)

    def _process_multiline_quote_state(self, char: str | None) -> None:
        """Previous char was '"' in a multi-line string: "" or the end."""
        if char == '"':
            self._emit("\\")
            self._emit('"')
            self.state = _MULTILINE
        else:
            self._emit('"')
            self._unread(char)
            self.state = _TOP


def strip_hson(
    source: CharacterSource | str,
    whitespace: WhitespaceHandling = WhitespaceHandling.NO_WHITESPACE,
) -> str:
    """Strip HSON extensions from source and return the JSON text.

    Examples:
        >>> strip_hson('{"a": 1, /* two */ "b": 2}')
        '{"a":1,"b":2}'

        >>> strip_hson('{"a":1,"b":2}', WhitespaceHandling.SPACES_AFTER_COMMA_COLON)
        '{"a": 1, "b": 2}'
    """
    return "".join(HsonStripper(source, whitespace))


__all__ = ["HsonStripper", "Position", "strip_hson"]
