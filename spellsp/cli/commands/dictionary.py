"""Dictionary commands: provision assets and spellcheck files."""

from pathlib import Path

import typer
from rich.table import Table

from spellsp.cli.commands.options import LanguageOption
from spellsp.cli.utils.async_runner import run_async
from spellsp.cli.utils.console import console, error_console
from spellsp.cli.utils.progress import create_simple_progress
from spellsp.config import settings
from spellsp.exceptions import DictionaryLoadError, DictionaryProvisionError
from spellsp.languages import Language
from spellsp.services.assets import DictionaryProvisioner
from spellsp.services.positions import LineIndex
from spellsp.services.spellcheck import generate_diagnostics


def fetch(lang: Language | None = LanguageOption) -> None:
    """Download the dictionary files for a language if they are missing."""
    language = lang or settings.dictionary_language
    provisioner = DictionaryProvisioner()

    try:
        with create_simple_progress() as progress:
            progress.add_task(f"Provisioning '{language.value}' dictionary...", total=None)
            aff_path, dic_path = run_async(provisioner.ensure(language))
    except DictionaryProvisionError as e:
        error_console.print(f"[error]{e}[/]")
        raise typer.Exit(1) from None

    console.print(f"[success]Dictionary '{language.value}' is ready[/]")
    console.print(f"[dim]{aff_path}[/]")
    console.print(f"[dim]{dic_path}[/]")


def check(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    lang: Language | None = LanguageOption,
) -> None:
    """Spellcheck a file and list the misspelled words."""
    language = lang or settings.dictionary_language
    text = path.read_text(encoding="utf-8")

    try:
        with create_simple_progress() as progress:
            progress.add_task(f"Loading '{language.value}' dictionary...", total=None)
            spellchecker = run_async(DictionaryProvisioner().load(language))
    except (DictionaryProvisionError, DictionaryLoadError) as e:
        error_console.print(f"[error]Failed to load dictionary: {e}[/]")
        raise typer.Exit(1) from None

    diagnostics = generate_diagnostics(text, spellchecker)
    if not diagnostics:
        console.print(f"[success]No spelling mistakes in {path}[/]")
        return

    table = Table(title=f"{len(diagnostics)} spelling mistakes in {path}")
    table.add_column("Line", justify="right", style="location")
    table.add_column("Column", justify="right", style="location")
    table.add_column("Word", style="typo")

    index = LineIndex(text)
    for diagnostic in diagnostics:
        start, end = diagnostic.range.start, diagnostic.range.end
        word = index.data[index.offset(start) : index.offset(end)].decode("utf-8")
        table.add_row(str(start.line + 1), str(start.character + 1), word)

    console.print(table)
    raise typer.Exit(1)
