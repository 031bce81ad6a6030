"""Structured parse failures carrying an error kind and a buffer offset."""

from enum import Enum

type Position = int


class ParseErrorKind(Enum):
    """
    Categories of parse failure.

    Every failure is reported with exactly one kind and the offset at which
    the parser detected it.
    """

    UNEXPECTED_END = "unexpected_end"
    UNEXPECTED_CHAR = "unexpected_char"
    NUMBER_FORMAT = "number_format"
    UNTERMINATED_STRING = "unterminated_string"
    NESTING_TOO_DEEP = "nesting_too_deep"


class ParseError(ValueError):
    """
    Reports a parse failure with its kind, offset and line/column position.

    The offset is an index into the buffer as the caller supplied it: a
    character index for ``str`` input and a byte index for ``bytes`` input.
    Line and column numbers are always computed on the decoded text.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        offset: Position | None = None,
    ) -> None:
        if not isinstance(kind, ParseErrorKind):
            raise TypeError("kind must be a ParseErrorKind")
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.kind = kind
        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.offset = pos if offset is None else offset

        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(
            f"{msg} at line {self.lineno}, column {self.colno}"
            f" (offset {self.offset})"
        )

    def __reduce__(self) -> tuple[type, tuple[object, ...]]:
        return (
            type(self),
            (self.kind, self.msg, self.doc, self.pos, self.offset),
        )

    def with_offset(self, offset: Position) -> "ParseError":
        """Returns a copy reporting ``offset`` instead of the text index."""
        return type(self)(self.kind, self.msg, self.doc, self.pos, offset)
