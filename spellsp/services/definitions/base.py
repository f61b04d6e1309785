"""Dataclasses and backend interface for word definitions."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class WordSense:
    """One definition of a word with an optional usage example."""

    definition: str | None = None
    example: str | None = None

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> "WordSense":
        return cls(definition=obj.get("definition"), example=obj.get("example"))


@dataclass
class Meaning:
    """Definitions grouped under one part of speech."""

    part_of_speech: str | None = None
    definitions: list[WordSense] = field(default_factory=list)

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> "Meaning":
        return cls(
            part_of_speech=obj.get("partOfSpeech"),
            definitions=[WordSense.from_dict(d) for d in obj.get("definitions") or []],
        )


@dataclass
class Definition:
    """Dictionary entry for a word as returned by the definitions endpoint."""

    word: str | None = None
    phonetic: str | None = None
    origin: str | None = None
    meanings: list[Meaning] = field(default_factory=list)

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> "Definition":
        return cls(
            word=obj.get("word"),
            phonetic=obj.get("phonetic"),
            origin=obj.get("origin"),
            meanings=[Meaning.from_dict(m) for m in obj.get("meanings") or []],
        )


class DefinitionBackend(ABC):
    """Abstract base class for definition sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this definition backend."""
        ...  # pragma: no cover

    @abstractmethod
    async def fetch(self, word: str) -> list[Definition]:
        """
        Fetch the definitions of a word.

        Raises:
            DefinitionNotFoundError: The backend has no entry for the word
            DefinitionLookupError: The lookup failed for any other reason
        """
        ...  # pragma: no cover
