"""
Recursive descent parser producing tagged value trees.

The parser dispatches on the next significant character and threads the
cursor through every call: each method takes a position and returns the
parsed value together with the position just past it. Containers add one
level of recursion per nesting level, bounded by ``ParseConfig.max_depth``
and by the interpreter recursion limit, whichever is reached first.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO
from typing import Any

from ._config import ParseConfig
from ._errors import ParseError
from ._errors import ParseErrorKind
from ._errors import Position
from ._offsets import OffsetMapper
from ._profile import ProfileContext
from ._scalars import scan_keyword
from ._scalars import scan_number
from ._scalars import scan_string
from ._values import Dict
from ._values import List
from ._values import Null
from ._values import String
from ._values import Value

type Buffer = str | bytes | bytearray

_WHITESPACE = frozenset(" \t\n\r")
_NUMBER_START = frozenset("0123456789+-")
_KEYWORD_START = frozenset("tfn")


class Parser:
    """
    Recursive descent parser over one in-memory text buffer.

    Holds only the buffer and configuration; all cursor state travels
    through method arguments and return values, so one instance can serve
    any number of ``parse_value`` calls.
    """

    def __init__(self, text: str, config: ParseConfig | None = None):
        self.text = text
        self.length = len(text)
        self.config = config or ParseConfig()

    def skip_whitespace(self, pos: Position) -> Position:
        """Returns the first position at or after ``pos`` that is not whitespace."""
        text = self.text
        length = self.length
        while pos < length and text[pos] in _WHITESPACE:
            pos += 1
        return pos

    def _error(
        self, kind: ParseErrorKind, msg: str, pos: Position
    ) -> ParseError:
        return ParseError(kind, msg, self.text, pos)

    def _require_input(self, pos: Position, expecting: str) -> None:
        if pos >= self.length:
            raise self._error(
                ParseErrorKind.UNEXPECTED_END, f"Expecting {expecting}", pos
            )

    def parse_value(
        self, pos: Position = 0, depth: int = 0
    ) -> tuple[Value, Position]:
        """
        Parses one value starting at ``pos``.

        If only whitespace remains, returns ``Null()`` with ``pos`` unchanged:
        no value is present, which is not an error.
        """
        start = self.skip_whitespace(pos)
        if start >= self.length:
            return Null(), pos
        return self._parse_present(start, depth)

    def _parse_present(
        self, pos: Position, depth: int
    ) -> tuple[Value, Position]:
        """Dispatches on the character at ``pos``, which must exist."""
        char = self.text[pos]

        if char in _NUMBER_START:
            return scan_number(self.text, pos, self.config)
        elif char == '"':
            decoded, end = scan_string(self.text, pos, self.config)
            return String(decoded), end
        elif char == "[":
            return self.parse_array(pos, depth)
        elif char == "{":
            return self.parse_object(pos, depth)
        elif char in _KEYWORD_START:
            return scan_keyword(self.text, pos)
        else:
            raise self._error(
                ParseErrorKind.UNEXPECTED_CHAR, "Expecting value", pos
            )

    def _enter(self, pos: Position, depth: int) -> int:
        if depth >= self.config.max_depth:
            raise self._error(
                ParseErrorKind.NESTING_TOO_DEEP,
                f"Nesting exceeds maximum depth of {self.config.max_depth}",
                pos,
            )
        return depth + 1

    def _stack_exhausted(self, pos: Position) -> ParseError:
        # Built by the innermost container that still has stack to spare
        return self._error(
            ParseErrorKind.NESTING_TOO_DEEP,
            "Nesting exceeds the interpreter recursion limit",
            pos,
        )

    def parse_array(
        self, pos: Position, depth: int = 0
    ) -> tuple[List, Position]:
        """Parses an array whose ``[`` is at ``pos``."""
        with ProfileContext("parse_array"):
            inner = self._enter(pos, depth)
            start = pos
            text = self.text
            items: list[Value] = []

            pos = self.skip_whitespace(pos + 1)
            self._require_input(pos, "value or ']'")
            if text[pos] == "]":
                return List(), pos + 1

            while True:
                try:
                    value, pos = self._parse_present(pos, inner)
                except RecursionError:
                    raise self._stack_exhausted(start) from None
                items.append(value)

                pos = self.skip_whitespace(pos)
                self._require_input(pos, "',' delimiter")
                char = text[pos]
                if char == "]":
                    return List(tuple(items)), pos + 1
                if char != ",":
                    raise self._error(
                        ParseErrorKind.UNEXPECTED_CHAR,
                        "Expecting ',' delimiter",
                        pos,
                    )

                comma_pos = pos
                pos = self.skip_whitespace(pos + 1)
                self._require_input(pos, "value")
                if text[pos] == "]":
                    raise self._error(
                        ParseErrorKind.UNEXPECTED_CHAR,
                        "Illegal trailing comma before end of array",
                        comma_pos,
                    )

    def parse_object(
        self, pos: Position, depth: int = 0
    ) -> tuple[Dict, Position]:
        """
        Parses an object whose ``{`` is at ``pos``.

        A repeated key keeps its first position and takes the last value.
        """
        with ProfileContext("parse_object"):
            inner = self._enter(pos, depth)
            start = pos
            text = self.text
            entries: dict[str, Value] = {}

            pos = self.skip_whitespace(pos + 1)
            self._require_input(pos, "property name or '}'")
            if text[pos] == "}":
                return Dict(), pos + 1

            while True:
                if text[pos] != '"':
                    raise self._error(
                        ParseErrorKind.UNEXPECTED_CHAR,
                        "Expecting property name enclosed in double quotes",
                        pos,
                    )
                key, pos = scan_string(text, pos, self.config)

                pos = self.skip_whitespace(pos)
                self._require_input(pos, "':' delimiter")
                if text[pos] != ":":
                    raise self._error(
                        ParseErrorKind.UNEXPECTED_CHAR,
                        "Expecting ':' delimiter",
                        pos,
                    )

                pos = self.skip_whitespace(pos + 1)
                self._require_input(pos, "value")
                try:
                    entries[key], pos = self._parse_present(pos, inner)
                except RecursionError:
                    raise self._stack_exhausted(start) from None

                pos = self.skip_whitespace(pos)
                self._require_input(pos, "',' delimiter")
                char = text[pos]
                if char == "}":
                    return Dict(entries), pos + 1
                if char != ",":
                    raise self._error(
                        ParseErrorKind.UNEXPECTED_CHAR,
                        "Expecting ',' delimiter",
                        pos,
                    )

                comma_pos = pos
                pos = self.skip_whitespace(pos + 1)
                self._require_input(pos, "property name")
                if text[pos] == "}":
                    raise self._error(
                        ParseErrorKind.UNEXPECTED_CHAR,
                        "Illegal trailing comma before end of object",
                        comma_pos,
                    )


@contextmanager
def _byte_offsets(mapper: OffsetMapper | None) -> Iterator[None]:
    """Re-raises parse errors with byte offsets when input was bytes."""
    if mapper is None:
        yield
        return
    try:
        yield
    except ParseError as err:
        raise err.with_offset(mapper.char_to_byte(err.pos)) from None


def _decode(buffer: Buffer) -> tuple[str, OffsetMapper | None]:
    if isinstance(buffer, str):
        return buffer, None
    if isinstance(buffer, bytes | bytearray):
        text = bytes(buffer).decode("utf-8")
        return text, OffsetMapper(text)
    raise TypeError(
        f"buffer must be str, bytes or bytearray, not {type(buffer).__name__}"
    )


def parse(
    buffer: Buffer,
    start_offset: Position = 0,
    *,
    config: ParseConfig | None = None,
) -> tuple[Value, Position]:
    """
    Parses one value from ``buffer`` starting at ``start_offset``.

    Returns the value and the offset just past it; content after the value
    is left for the caller. For ``bytes`` input the buffer is decoded as
    UTF-8 and every offset, in and out, is a byte offset.
    """
    text, mapper = _decode(buffer)
    if isinstance(start_offset, bool) or not isinstance(start_offset, int):
        raise TypeError("start_offset must be an integer")

    if mapper is not None:
        start = mapper.byte_to_char(start_offset)
    elif 0 <= start_offset <= len(text):
        start = start_offset
    else:
        raise ValueError(f"start_offset {start_offset} out of range")

    parser = Parser(text, config)
    with _byte_offsets(mapper):
        value, end = parser.parse_value(start)

    if mapper is not None:
        end = mapper.char_to_byte(end)
    return value, end


def _parse_document(text: str, config: ParseConfig) -> Value:
    with ProfileContext("parse_document", len(text)):
        parser = Parser(text, config)
        value, end = parser.parse_value(0)

        # Check for extra data after the value
        end = parser.skip_whitespace(end)
        if end < parser.length:
            raise ParseError(
                ParseErrorKind.UNEXPECTED_CHAR, "Extra data", text, end
            )
        return value


def loads(s: Buffer, **kwargs: Any) -> Value:
    """
    Parses a complete document; only whitespace may follow the value.

    Keyword arguments are passed to ``ParseConfig``. An empty or
    whitespace-only document yields ``Null()``.
    """
    text, mapper = _decode(s)
    config = ParseConfig(**kwargs)
    with _byte_offsets(mapper):
        return _parse_document(text, config)


def load(fp: IO[str], **kwargs: Any) -> Value:
    """
    Parses a complete document from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)
