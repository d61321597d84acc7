"""Bounded-concurrency execution with cooperative abort."""

from __future__ import annotations

import asyncio
import collections
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

T = typ.TypeVar("T")


async def run_bounded(
    items: cabc.Sequence[T],
    concurrency: int,
    fn: cabc.Callable[[T], cabc.Awaitable[None]],
) -> None:
    """Apply *fn* to every item with at most *concurrency* calls in flight.

    Workers pull from a shared queue, so completion order is not input
    order. When *fn* raises, the queue is cleared so no further items start;
    calls already running on other workers finish normally. Once every
    worker has returned, the first captured exception is re-raised.

    Parameters
    ----------
    items
        Work items; each is passed to *fn* at most once.
    concurrency
        Maximum number of simultaneous *fn* calls. Must be at least 1.
    fn
        Coroutine function applied to each item.

    Raises
    ------
    ValueError
        If *concurrency* is less than 1.
    Exception
        The first exception raised by *fn*, after in-flight calls finish.

    """
    if concurrency < 1:
        msg = f"concurrency must be at least 1, got {concurrency}"
        raise ValueError(msg)

    queue: collections.deque[T] = collections.deque(items)
    failure: Exception | None = None

    async def worker() -> None:
        nonlocal failure
        while queue and failure is None:
            item = queue.popleft()
            try:
                await fn(item)
            except Exception as exc:  # noqa: BLE001 - re-raised after workers drain
                if failure is None:
                    failure = exc
                queue.clear()
                return

    workers = [worker() for _ in range(min(concurrency, len(queue)))]
    await asyncio.gather(*workers)

    if failure is not None:
        raise failure
