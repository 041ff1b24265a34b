"""
Shared helpers for checking that route handlers keep the event loop free.
"""

import asyncio
import time

SLOW_WRITE_SEC = 0.3
TICK_SEC = 0.02


def max_loop_gap(make_coro) -> float:
    """
    Await `make_coro()` next to a ticker task and return the longest gap
    between ticks. A handler that blocks the loop shows up as a gap close
    to the blocking call's duration.
    """

    async def run() -> float:
        gaps: list[float] = []
        done = asyncio.Event()

        async def ticker():
            last = time.perf_counter()
            while not done.is_set():
                await asyncio.sleep(TICK_SEC)
                now = time.perf_counter()
                gaps.append(now - last)
                last = now

        task = asyncio.create_task(ticker())
        await asyncio.sleep(0)
        try:
            await make_coro()
        finally:
            done.set()
            await task
        return max(gaps)

    return asyncio.run(run())
