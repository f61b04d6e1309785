"""In-memory cache of rendered definitions."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from spellsp.exceptions import DefinitionNotFoundError
from spellsp.services.definitions.base import Definition
from spellsp.services.definitions.render import render_definitions

logger = logging.getLogger(__name__)

FetchDefinitions = Callable[[str], Awaitable[list[Definition]]]


class DefinitionCache:
    """
    Memoizes word -> rendered definition for the lifetime of a session.

    Keys are the looked-up word trimmed of surrounding whitespace, with case
    preserved. Entries are never evicted or expired, so the cache grows with
    the number of distinct words hovered. Only successful lookups are stored.
    Two concurrent misses for the same word may both fetch; the last write wins.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip() in self._entries

    async def lookup(self, word: str, fetch: FetchDefinitions) -> str:
        """
        Return the rendered definitions of word, fetching them on a miss.

        Raises whatever fetch raises, and DefinitionNotFoundError when fetch
        returns no definitions. Neither case is cached.
        """
        key = word.strip()
        async with self._lock:
            cached = self._entries.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for '{key}'")
            return cached

        definitions = await fetch(key)
        if not definitions:
            raise DefinitionNotFoundError(f"No definitions for '{key}'")

        rendered = render_definitions(definitions)
        async with self._lock:
            self._entries[key] = rendered
        return rendered

    def clear(self) -> None:
        self._entries.clear()
