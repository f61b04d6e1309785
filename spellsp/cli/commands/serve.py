"""Language server command."""

import logging

import typer

from spellsp import server
from spellsp.cli.commands.options import LanguageOption
from spellsp.cli.utils.async_runner import run_async
from spellsp.cli.utils.console import error_console
from spellsp.config import settings
from spellsp.exceptions import DictionaryLoadError, DictionaryProvisionError
from spellsp.languages import Language
from spellsp.services.assets import DictionaryProvisioner

logger = logging.getLogger(__name__)


def serve(lang: Language | None = LanguageOption) -> None:
    """Load the dictionary and run the language server on stdio."""
    language = lang or settings.dictionary_language
    try:
        spellchecker = run_async(DictionaryProvisioner().load(language))
    except (DictionaryProvisionError, DictionaryLoadError) as e:
        error_console.print(f"[error]Failed to load dictionary: {e}[/]")
        raise typer.Exit(1) from None

    logger.info(f"Starting spellsp language server ({language.value})")
    server.start(spellchecker)
