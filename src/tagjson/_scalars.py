"""
Leaf value scanners: numbers, strings and keyword literals.

Each scanner takes the buffer and a position at the first character of the
literal and returns the decoded value together with the position just past
it. None of them recurse.
"""

import math
import re

from ._config import ParseConfig
from ._errors import ParseError
from ._errors import ParseErrorKind
from ._errors import Position
from ._profile import ProfileContext
from ._values import Bool
from ._values import Double
from ._values import Int
from ._values import Null

_NUMBER_RE = re.compile(r"[+-]?[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?")

# Characters allowed to follow a number or keyword literal
LITERAL_DELIMITERS = frozenset(" \t\n\r,]}:")

ESCAPES = {
    "n": "\n",
    "r": "\r",
    "0": "\0",
    "t": "\t",
    "v": "\v",
    "f": "\f",
    "b": "\b",
    "a": "\a",
}

_KEYWORDS = (
    ("true", Bool(True)),
    ("false", Bool(False)),
    ("null", Null()),
)

_CONTROL_LIMIT = 0x20


def unescape(char: str) -> str:
    """Decodes the character following a backslash; unknown ones map to themselves."""
    return ESCAPES.get(char, char)


def _number_error(msg: str, text: str, pos: Position) -> ParseError:
    return ParseError(ParseErrorKind.NUMBER_FORMAT, msg, text, pos)


def scan_number(
    text: str, pos: Position, config: ParseConfig
) -> tuple[Int | Double, Position]:
    """
    Scans the longest number literal at ``pos``.

    Integer conversion is tried first and wins when the literal has no
    fraction or exponent and fits the configured width; everything else
    becomes a ``Double``. The returned position advances by the length of
    the literal text.
    """
    with ProfileContext("scan_number"):
        match = _NUMBER_RE.match(text, pos)
        if match is None:
            raise _number_error("Invalid number", text, pos)

        end = match.end()
        if end < len(text) and text[end] not in LITERAL_DELIMITERS:
            raise _number_error("Invalid number", text, pos)

        literal = match.group()
        if literal.lstrip("+-").isdigit():
            number: int | None
            try:
                number = int(literal)
            except ValueError:
                # Beyond the interpreter's int string conversion limit
                number = None
            if number is not None and (
                config.int_min <= number <= config.int_max
            ):
                return Int(number), end

        try:
            real = float(literal)
        except ValueError as e:  # pragma: no cover
            raise _number_error("Invalid number", text, pos) from e

        if not math.isfinite(real):
            raise _number_error("Number out of range", text, pos)

        return Double(real), end


def scan_string(
    text: str, pos: Position, config: ParseConfig
) -> tuple[str, Position]:
    """
    Decodes the string literal whose opening quote is at ``pos``.

    Backslash escapes go through ``ESCAPES``; there is no ``\\u`` decoding,
    so ``\\u0041`` yields ``u0041``. Running out of input before the closing
    quote reports the offset of the opening quote.
    """
    with ProfileContext("scan_string"):
        length = len(text)
        chunks: list[str] = []
        i = pos + 1
        run_start = i

        while i < length:
            char = text[i]
            if char == '"':
                chunks.append(text[run_start:i])
                return "".join(chunks), i + 1
            if char == "\\":
                if i + 1 >= length:
                    break
                chunks.append(text[run_start:i])
                chunks.append(unescape(text[i + 1]))
                i += 2
                run_start = i
                continue
            if config.strict and ord(char) < _CONTROL_LIMIT:
                raise ParseError(
                    ParseErrorKind.UNEXPECTED_CHAR,
                    "Invalid control character in string",
                    text,
                    i,
                )
            i += 1

        raise ParseError(
            ParseErrorKind.UNTERMINATED_STRING,
            "Unterminated string starting at",
            text,
            pos,
        )


def scan_keyword(text: str, pos: Position) -> tuple[Bool | Null, Position]:
    """
    Scans ``true``, ``false`` or ``null`` at ``pos``.

    The keyword must end the buffer or be followed by whitespace or a
    structural character, so ``nullx`` is rejected at ``pos``.
    """
    for word, value in _KEYWORDS:
        if text.startswith(word, pos):
            end = pos + len(word)
            if end < len(text) and text[end] not in LITERAL_DELIMITERS:
                break
            return value, end

    raise ParseError(
        ParseErrorKind.UNEXPECTED_CHAR, "Expecting value", text, pos
    )
