"""Ordered concurrent fan-out that stops remaining work on the first failure."""

import asyncio
from typing import Any, Awaitable, List


async def gather_or_cancel(*aws: Awaitable[Any]) -> List[Any]:
    """Run awaitables concurrently and return their results in argument order.

    Unlike a bare ``asyncio.gather``, the first exception cancels every awaitable that
    is still pending, and waits for them to wind down before re-raising. Work already
    handed to a worker thread finishes its current call, but nothing new is started.

    Args:
        *aws: Coroutines or futures to run.

    Returns:
        The results, in the order the awaitables were given.

    Raises:
        Exception: The first exception raised by any of the awaitables.

    Example:
        >>> async def double(x):
        ...     return 2 * x
        >>> asyncio.run(gather_or_cancel(double(1), double(2)))
        [2, 4]
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except Exception:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
