"""Pytest configuration and fixtures."""

from collections.abc import Iterable
from typing import Any

import pytest

from spellsp.server import DocumentBuffer
from spellsp.services.definitions import DefinitionCache, DefinitionService


class FakeSpellchecker:
    """Spellcheck capability flagging a fixed set of words."""

    def __init__(
        self,
        mistakes: Iterable[tuple[int, str]] = (),
        suggestions: dict[str, list[str]] | None = None,
    ) -> None:
        self.mistakes = list(mistakes)
        self.suggestions = suggestions or {}
        self.checked: list[str] = []

    def check_indices(self, text: str) -> list[tuple[int, str]]:
        self.checked.append(text)
        return list(self.mistakes)

    def suggest(self, word: str, limit: int) -> list[str]:
        return self.suggestions.get(word, [])[:limit]


class FakeLanguageServer:
    """Stand-in for SpellServer recording what handlers send to the client."""

    def __init__(self, spellchecker=None, definitions=None, max_suggestions: int = 5) -> None:
        self.buffer = DocumentBuffer()
        self.spellchecker = spellchecker
        self.definitions = definitions or DefinitionService(cache=DefinitionCache())
        self.max_suggestions = max_suggestions
        self.published: list[Any] = []
        self.log_messages: list[Any] = []

    def text_document_publish_diagnostics(self, params) -> None:
        self.published.append(params)

    def window_log_message(self, params) -> None:
        self.log_messages.append(params)


@pytest.fixture
def fake_spellchecker() -> FakeSpellchecker:
    """Spellchecker flagging 'Helo' at the start of the text."""
    return FakeSpellchecker(mistakes=[(0, "Helo")], suggestions={"Helo": ["Hello", "Help"]})


@pytest.fixture
def fake_server(fake_spellchecker: FakeSpellchecker) -> FakeLanguageServer:
    return FakeLanguageServer(spellchecker=fake_spellchecker)


@pytest.fixture
def cat_payload() -> list[dict[str, Any]]:
    """Definitions endpoint response for 'cat'."""
    return [
        {
            "word": "cat",
            "phonetic": "/kæt/",
            "origin": "Old English catt",
            "meanings": [
                {
                    "partOfSpeech": "noun",
                    "definitions": [
                        {
                            "definition": "A small domesticated carnivorous mammal.",
                            "example": "The cat sat on the mat.",
                            "synonyms": [],
                        }
                    ],
                },
                {
                    "partOfSpeech": "verb",
                    "definitions": [{"definition": "To hoist (an anchor)."}],
                },
            ],
        }
    ]
