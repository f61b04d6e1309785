"""Definition backend for the Free Dictionary API (dictionaryapi.dev)."""

import logging
from urllib.parse import quote

import httpx

from spellsp.config import settings
from spellsp.exceptions import DefinitionLookupError, DefinitionNotFoundError
from spellsp.services.definitions.base import Definition, DefinitionBackend

logger = logging.getLogger(__name__)


class FreeDictionaryBackend(DefinitionBackend):
    """Look up English definitions over HTTP."""

    def __init__(self, url_template: str | None = None, timeout: float | None = None) -> None:
        self.url_template = url_template or settings.definitions_url
        self.timeout = timeout or settings.http_timeout

    @property
    def name(self) -> str:
        return "freedictionary"

    def url_for(self, word: str) -> str:
        return self.url_template.format(word=quote(word, safe=""))

    async def fetch(self, word: str) -> list[Definition]:
        url = self.url_for(word)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url)
            if response.status_code == 404:
                raise DefinitionNotFoundError(f"No definitions for '{word}'")
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise DefinitionLookupError(f"Lookup of '{word}' failed: {e}") from e
        except ValueError as e:
            raise DefinitionLookupError(f"Malformed response for '{word}': {e}") from e

        if not isinstance(payload, list) or not all(isinstance(d, dict) for d in payload):
            raise DefinitionLookupError(f"Unexpected payload for '{word}'")

        try:
            return [Definition.from_dict(d) for d in payload]
        except (AttributeError, TypeError) as e:
            raise DefinitionLookupError(f"Malformed definition for '{word}': {e}") from e
