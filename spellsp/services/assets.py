"""Dictionary asset provisioning: fetch the Hunspell files once, reuse them afterwards."""

import logging
import os
import tempfile
from collections.abc import Awaitable, Callable
from pathlib import Path

import httpx
from spylls.hunspell import Dictionary

from spellsp.config import settings
from spellsp.exceptions import DictionaryLoadError, DictionaryProvisionError
from spellsp.languages import Language
from spellsp.services.spellcheck import Spellchecker

logger = logging.getLogger(__name__)

AFF_FILENAME = "index.aff"
DIC_FILENAME = "index.dic"


async def ensure_asset(path: Path, producer: Callable[[], Awaitable[str]]) -> str:
    """
    Return the text stored at path, producing and persisting it if missing.

    The produced text is written to a temporary sibling file and renamed onto
    path, so a failed producer or write never leaves a partial file at path.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        pass

    path.parent.mkdir(parents=True, exist_ok=True)
    text = await producer()

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_name, path)
    except Exception:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.info(f"Stored {len(text)} characters at {path}")
    return text


class DictionaryProvisioner:
    """Download and cache Hunspell dictionaries from wooorm/dictionaries."""

    def __init__(
        self,
        data_dir: Path | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.data_dir = data_dir or settings.data_dir
        self.base_url = (base_url or settings.dictionary_base_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout

    def asset_paths(self, language: Language) -> tuple[Path, Path]:
        """Return the (aff, dic) paths for a language."""
        lang_dir = self.data_dir / language.dictionary_dir
        return lang_dir / AFF_FILENAME, lang_dir / DIC_FILENAME

    def asset_url(self, language: Language, filename: str) -> str:
        return f"{self.base_url}/{language.dictionary_dir}/{filename}"

    async def _download(self, url: str) -> str:
        """Fetch a dictionary file, refusing error pages."""
        logger.info(f"Downloading {url}")
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.text

    async def ensure(self, language: Language) -> tuple[Path, Path]:
        """Make sure both dictionary files exist locally and return their paths."""
        aff_path, dic_path = self.asset_paths(language)
        for path in (aff_path, dic_path):
            url = self.asset_url(language, path.name)
            try:
                await ensure_asset(path, lambda url=url: self._download(url))
            except (httpx.HTTPError, OSError) as e:
                raise DictionaryProvisionError(
                    f"Failed to provision {path.name} for '{language.value}': {e}"
                ) from e
        return aff_path, dic_path

    async def load(self, language: Language) -> Spellchecker:
        """Provision the dictionary for a language and load it into a spellchecker."""
        aff_path, _ = await self.ensure(language)
        logger.info(f"Loading '{language.value}' dictionary from {aff_path.parent}")
        try:
            dictionary = Dictionary.from_files(str(aff_path.with_suffix("")))
        except Exception as e:
            raise DictionaryLoadError(
                f"Failed to load dictionary for '{language.value}': {e}"
            ) from e
        logger.info(f"Dictionary '{language.value}' loaded")
        return Spellchecker(dictionary)
