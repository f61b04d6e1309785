"""Rich consoles for CLI output."""

from rich.console import Console
from rich.theme import Theme

spellsp_theme = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "typo": "magenta underline",
        "location": "blue",
        "dim": "dim",
    }
)

console = Console(theme=spellsp_theme)

# `serve` owns stdout for the protocol stream, so diagnostics from the CLI itself go here
error_console = Console(theme=spellsp_theme, stderr=True)
