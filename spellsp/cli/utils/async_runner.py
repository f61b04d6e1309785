"""Bridge from synchronous typer commands to the async services."""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run a provisioning or lookup coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)
