"""CLI utility modules."""

from spellsp.cli.utils.async_runner import run_async
from spellsp.cli.utils.console import console, error_console
from spellsp.cli.utils.progress import create_simple_progress

__all__ = ["console", "error_console", "create_simple_progress", "run_async"]
