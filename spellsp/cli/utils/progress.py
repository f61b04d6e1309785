"""Rich progress utilities."""

from rich.progress import Progress, SpinnerColumn, TextColumn

from spellsp.cli.utils.console import error_console


def create_simple_progress() -> Progress:
    """Create a transient spinner on stderr, leaving stdout to command output."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=error_console,
        transient=True,
    )
