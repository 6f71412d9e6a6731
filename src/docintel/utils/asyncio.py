"""Async/event loop utilities."""

import asyncio
import inspect
from typing import Any, Callable


def run_async(coro) -> Any:
    """Run async code from sync context (e.g., Celery tasks).

    Handles event loop creation/reuse gracefully for different environments.

    Args:
        coro: Coroutine to run

    Returns:
        Result of the coroutine
    """
    try:
        loop = asyncio.get_event_loop()
        if loop.is_closed():
            raise RuntimeError("event loop is closed")
    except RuntimeError:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)

    return loop.run_until_complete(coro)


async def run_blocking(func: Callable[..., Any], *args: Any) -> Any:
    """Call a parser entry point off the event loop.

    Parsing libraries are synchronous, so the call runs in the default
    thread pool. If the entry point hands back an awaitable (async-flavoured
    libraries and test doubles do), it is awaited on the loop.

    Args:
        func: Library callable to invoke
        *args: Positional arguments for ``func``

    Returns:
        Whatever ``func`` returned, awaited if needed
    """
    result = await asyncio.to_thread(func, *args)
    if inspect.isawaitable(result):
        result = await result
    return result


__all__ = ["run_async", "run_blocking"]
