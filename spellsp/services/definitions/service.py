"""Definition service facade combining a backend with the session cache."""

import logging

from spellsp.exceptions import DefinitionLookupError
from spellsp.services.definitions.base import DefinitionBackend
from spellsp.services.definitions.cache import DefinitionCache
from spellsp.services.definitions.freedictionary import FreeDictionaryBackend

logger = logging.getLogger(__name__)


class DefinitionService:
    """
    Facade for hover lookups.

    Failed lookups are logged and yield no content; they never reach the cache,
    so the next hover over the same word retries.
    """

    def __init__(
        self,
        backend: DefinitionBackend | None = None,
        cache: DefinitionCache | None = None,
    ) -> None:
        """
        Initialize the definition service.

        Args:
            backend: Definition source. Defaults to FreeDictionaryBackend()
            cache: Session cache. Defaults to a fresh DefinitionCache()
        """
        self.backend = backend or FreeDictionaryBackend()
        self.cache = cache if cache is not None else DefinitionCache()

    async def define(self, word: str) -> str | None:
        """Return rendered definitions for word, or None if the lookup failed."""
        if not word.strip():
            return None
        try:
            return await self.cache.lookup(word, self.backend.fetch)
        except DefinitionLookupError as e:
            logger.warning(f"Error looking up '{word.strip()}' in {self.backend.name}: {e}")
            return None
