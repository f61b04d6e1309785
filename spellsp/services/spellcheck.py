"""Spellcheck diagnostics over a whole document buffer."""

import logging
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from typing import Protocol

from lsprotocol.types import (
    CodeAction,
    CodeActionKind,
    Diagnostic,
    DiagnosticSeverity,
    Range,
    TextEdit,
    WorkspaceEdit,
)
from spylls.hunspell import Dictionary

from spellsp.services.positions import LineIndex
from spellsp.services.tokenizer import iter_words

logger = logging.getLogger(__name__)

DIAGNOSTIC_SOURCE = "Spellcheck"
DIAGNOSTIC_MESSAGE = "Found Typo Here!"


class SpellcheckCapability(Protocol):
    """Anything that can flag misspelled words in a text."""

    def check_indices(self, text: str) -> Iterable[tuple[int, str]]:
        """Yield (byte_offset, word) for each misspelled word occurrence."""
        ...  # pragma: no cover

    def suggest(self, word: str, limit: int) -> list[str]:
        """Return up to limit replacement candidates for word."""
        ...  # pragma: no cover


class Spellchecker:
    """Spellcheck capability backed by a Hunspell dictionary loaded with spylls."""

    def __init__(self, dictionary: Dictionary) -> None:
        self.dictionary = dictionary

    def check_indices(self, text: str) -> Iterator[tuple[int, str]]:
        for byte_offset, word in iter_words(text):
            if not self.dictionary.lookup(word):
                yield byte_offset, word

    def suggest(self, word: str, limit: int) -> list[str]:
        return list(islice(self.dictionary.suggest(word), limit))


def typo_diagnostic(index: LineIndex, byte_offset: int, word: str) -> Diagnostic:
    """Build the diagnostic for one flagged word."""
    start = index.position(byte_offset)
    end = index.position(byte_offset + len(word.encode("utf-8")))
    return Diagnostic(
        range=Range(start=start, end=end),
        message=DIAGNOSTIC_MESSAGE,
        severity=DiagnosticSeverity.Error,
        source=DIAGNOSTIC_SOURCE,
    )


def generate_diagnostics(text: str, spellchecker: SpellcheckCapability) -> list[Diagnostic]:
    """
    Spellcheck the full text and return one diagnostic per flagged word.

    Mistakes are not assumed to arrive in order. Errors from the spellcheck
    capability are logged and re-raised: the dictionary was validated at load.
    """
    index = LineIndex(text)
    try:
        mistakes = list(spellchecker.check_indices(text))
    except Exception:
        logger.exception("Spellchecker failed on a loaded dictionary")
        raise
    return [typo_diagnostic(index, byte_offset, word) for byte_offset, word in mistakes]


def suggestion_actions(
    text: str,
    uri: str,
    diagnostics: Sequence[Diagnostic],
    spellchecker: SpellcheckCapability,
    limit: int,
) -> list[CodeAction]:
    """Build quick-fix code actions replacing each flagged word with a suggestion."""
    index = LineIndex(text)
    actions: list[CodeAction] = []
    for diagnostic in diagnostics:
        if diagnostic.source != DIAGNOSTIC_SOURCE:
            continue
        start = index.offset(diagnostic.range.start)
        end = index.offset(diagnostic.range.end)
        word = index.data[start:end].decode("utf-8")
        if not word:
            continue
        for suggestion in spellchecker.suggest(word, limit):
            actions.append(
                CodeAction(
                    title=f"Replace with '{suggestion}'",
                    kind=CodeActionKind.QuickFix,
                    diagnostics=[diagnostic],
                    edit=WorkspaceEdit(
                        changes={uri: [TextEdit(range=diagnostic.range, new_text=suggestion)]}
                    ),
                )
            )
    return actions
