"""Definition lookup command."""


import typer
from rich.markdown import Markdown

from spellsp.cli.utils.async_runner import run_async
from spellsp.cli.utils.console import console, error_console
from spellsp.services.definitions import DefinitionService


def define(word: str = typer.Argument(..., help="Word to look up")) -> None:
    """Print the dictionary definitions of a word."""
    rendered = run_async(DefinitionService().define(word))
    if rendered is None:
        error_console.print(f"[warning]No definitions found for '{word.strip()}'[/]")
        raise typer.Exit(1)
    console.print(Markdown(rendered))
