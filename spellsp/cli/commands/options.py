"""Options shared by CLI commands."""

import typer

LanguageOption = typer.Option(
    None,
    "--lang",
    "-l",
    help="Dictionary language (defaults to the DICTIONARY_LANGUAGE setting)",
    case_sensitive=False,
)
