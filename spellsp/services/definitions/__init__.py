"""Word definitions for hover, fetched remotely and cached per session."""

from spellsp.services.definitions.base import Definition, DefinitionBackend, Meaning, WordSense
from spellsp.services.definitions.cache import DefinitionCache
from spellsp.services.definitions.freedictionary import FreeDictionaryBackend
from spellsp.services.definitions.render import render_definitions
from spellsp.services.definitions.service import DefinitionService

__all__ = [
    "Definition",
    "DefinitionBackend",
    "DefinitionCache",
    "DefinitionService",
    "FreeDictionaryBackend",
    "Meaning",
    "WordSense",
    "render_definitions",
]
