"""Word segmentation for spellchecking and hover lookups."""

import re
import unicodedata
from collections.abc import Iterator

from lsprotocol.types import Position

from spellsp.services.positions import snap_to_boundary

# Letters only, allowing internal apostrophes (don't, l'homme)
WORD_PATTERN = re.compile(r"[^\W\d_]+(?:['’][^\W\d_]+)*")


def is_word_char(char: str) -> bool:
    """
    Return True for characters that can be part of a hovered word.

    Letters, digits and underscore qualify, and so do combining marks such as
    Devanagari vowel signs, which belong to the letter before them.
    """
    return char.isalnum() or char == "_" or unicodedata.category(char) in ("Mn", "Mc")


def _line_at(text: str, line: int) -> str | None:
    lines = text.split("\n")
    if line >= len(lines):
        return None
    return lines[line].removesuffix("\r")


def word_at_position(text: str, position: Position) -> str | None:
    """
    Find the run of word characters touching a position.

    The character of the position is a byte offset into the line and names the
    character under the cursor. Returns None when the line does not exist, the
    position is at or past the end of the line, or the character under the
    cursor is not a word character.
    """
    line = _line_at(text, position.line)
    if line is None:
        return None

    data = line.encode("utf-8")
    if position.character >= len(data):
        return None

    offset = snap_to_boundary(data, position.character)
    cursor = len(data[:offset].decode("utf-8"))
    if not is_word_char(line[cursor]):
        return None

    start = cursor
    while start > 0 and is_word_char(line[start - 1]):
        start -= 1

    end = cursor
    while end < len(line) and is_word_char(line[end]):
        end += 1

    return line[start:end]


def iter_words(text: str) -> Iterator[tuple[int, str]]:
    """Yield (byte_offset, word) for every word in text, in order."""
    byte_offset = 0
    last = 0
    for match in WORD_PATTERN.finditer(text):
        byte_offset += len(text[last : match.start()].encode("utf-8"))
        last = match.start()
        yield byte_offset, match.group()
