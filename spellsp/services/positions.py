"""Translation between UTF-8 byte offsets and line/character positions.

Characters are byte offsets within a line, not code points. Offsets that
fall inside a multi-byte sequence snap back to the start of that sequence.
"""

from bisect import bisect_right

from lsprotocol.types import Position


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def snap_to_boundary(data: bytes, offset: int) -> int:
    """Clamp offset into data and move it back onto a scalar-value boundary."""
    offset = max(0, min(offset, len(data)))
    while 0 < offset < len(data) and _is_continuation(data[offset]):
        offset -= 1
    return offset


class LineIndex:
    """Line start offsets of a text, for repeated translations over one buffer."""

    def __init__(self, text: str) -> None:
        self.data = text.encode("utf-8")
        self.line_starts = [0]
        start = self.data.find(b"\n")
        while start != -1:
            self.line_starts.append(start + 1)
            start = self.data.find(b"\n", start + 1)

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def line_end(self, line: int) -> int:
        """Byte offset of the end of a line's content (its newline, or end of text)."""
        if line + 1 < len(self.line_starts):
            return self.line_starts[line + 1] - 1
        return len(self.data)

    def position(self, byte_offset: int) -> Position:
        offset = snap_to_boundary(self.data, byte_offset)
        line = bisect_right(self.line_starts, offset) - 1
        return Position(line=line, character=offset - self.line_starts[line])

    def offset(self, position: Position) -> int:
        if position.line >= len(self.line_starts):
            return len(self.data)
        start = self.line_starts[position.line]
        end = self.line_end(position.line)
        return snap_to_boundary(self.data, min(start + position.character, end))


def byte_to_position(byte_offset: int, text: str) -> Position:
    """Convert a byte offset in text to a position, clamping past the end of the text."""
    return LineIndex(text).position(byte_offset)


def position_to_byte(position: Position, text: str) -> int:
    """Convert a position back to a byte offset, clamping to the addressed line."""
    return LineIndex(text).offset(position)
