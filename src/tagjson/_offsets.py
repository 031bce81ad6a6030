"""UTF-8 byte offset to character index mapping for byte-buffer input."""

from bisect import bisect_right
from typing import Final

_ONE_BYTE_LIMIT = 0x80
_TWO_BYTE_LIMIT = 0x800
_THREE_BYTE_LIMIT = 0x10000


def _utf8_len(char: str) -> int:
    code = ord(char)
    if code < _ONE_BYTE_LIMIT:
        return 1
    if code < _TWO_BYTE_LIMIT:
        return 2
    if code < _THREE_BYTE_LIMIT:
        return 3
    return 4


class OffsetMapper:
    """
    Maps between byte offsets in UTF-8 data and indices in decoded text.

    Instead of storing the byte offset of every character, the mapper keeps
    checkpoints at a fixed character interval and walks forward from the
    nearest one.
    """

    def __init__(self, text: str, checkpoint_interval: int = 256) -> None:
        """
        Records a checkpoint every ``checkpoint_interval`` characters.

        ASCII text needs no checkpoints since byte and character offsets agree.
        """
        if checkpoint_interval < 1:
            raise ValueError("checkpoint_interval must be positive")

        self.text: Final = text
        self.checkpoint_interval: Final = checkpoint_interval
        self.is_ascii: Final = text.isascii()
        self._char_marks: list[int] = [0]
        self._byte_marks: list[int] = [0]
        self.byte_length = len(text)

        if not self.is_ascii:
            self._build_checkpoints()

    def _build_checkpoints(self) -> None:
        byte_pos = 0
        for char_pos, char in enumerate(self.text):
            if char_pos and char_pos % self.checkpoint_interval == 0:
                self._char_marks.append(char_pos)
                self._byte_marks.append(byte_pos)
            byte_pos += _utf8_len(char)
        self.byte_length = byte_pos

    def byte_to_char(self, byte_pos: int) -> int:
        """
        Converts a byte offset to a character index.

        The offset must lie within the data and on a character boundary,
        otherwise ``ValueError`` is raised.
        """
        if not 0 <= byte_pos <= self.byte_length:
            raise ValueError(f"byte offset {byte_pos} out of range")
        if self.is_ascii:
            return byte_pos

        mark = bisect_right(self._byte_marks, byte_pos) - 1
        char_pos = self._char_marks[mark]
        current = self._byte_marks[mark]

        while current < byte_pos:
            current += _utf8_len(self.text[char_pos])
            char_pos += 1

        if current != byte_pos:
            raise ValueError(
                f"byte offset {byte_pos} splits a multi-byte character"
            )
        return char_pos

    def char_to_byte(self, char_pos: int) -> int:
        """Converts a character index to a byte offset."""
        if not 0 <= char_pos <= len(self.text):
            raise ValueError(f"character index {char_pos} out of range")
        if self.is_ascii:
            return char_pos

        mark = min(
            char_pos // self.checkpoint_interval, len(self._char_marks) - 1
        )
        byte_pos = self._byte_marks[mark]
        for i in range(self._char_marks[mark], char_pos):
            byte_pos += _utf8_len(self.text[i])
        return byte_pos
