"""Core services: positions, words, spellcheck diagnostics, definitions, assets."""

from spellsp.services.positions import LineIndex, byte_to_position, position_to_byte
from spellsp.services.spellcheck import Spellchecker, generate_diagnostics
from spellsp.services.tokenizer import iter_words, word_at_position

__all__ = [
    "LineIndex",
    "Spellchecker",
    "byte_to_position",
    "generate_diagnostics",
    "iter_words",
    "position_to_byte",
    "word_at_position",
]
