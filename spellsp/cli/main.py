"""Main CLI application entry point."""

from typing import get_args

import typer

from spellsp.cli.commands import define, dictionary, serve
from spellsp.config import LogLevel
from spellsp.logging_config import setup_logging

app = typer.Typer(
    name="spellsp",
    help="Spellchecking language server with dictionary definitions on hover",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override the LOG_LEVEL setting (DEBUG, INFO, ...)"
    ),
) -> None:
    """Configure logging before any command runs."""
    level = log_level.upper() if log_level else None
    if level is not None and level not in get_args(LogLevel):
        raise typer.BadParameter(f"unknown log level '{log_level}'", param_hint="--log-level")
    setup_logging(level)


app.command(name="serve", help="Run the language server on stdio")(serve.serve)
app.command(name="check", help="Spellcheck a file")(dictionary.check)
app.command(name="define", help="Look up the definitions of a word")(define.define)
app.command(name="fetch", help="Download the dictionary for a language")(dictionary.fetch)


if __name__ == "__main__":
    app()
