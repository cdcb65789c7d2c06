"""Pacing between requests to respect the external API's rate limit."""

import asyncio
from typing import Awaitable, Callable

Sleep = Callable[[float], Awaitable[None]]


class FixedDelayPacer:
    """Waits a fixed delay between records and a multiplied delay after failures."""

    def __init__(self, delay_ms: int, backoff_multiplier: int = 3, sleep: Sleep = asyncio.sleep) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must not be negative")
        self.delay_ms = delay_ms
        self.backoff_multiplier = backoff_multiplier
        self._sleep = sleep

    async def _wait(self, milliseconds: int) -> None:
        if milliseconds > 0:
            await self._sleep(milliseconds / 1000)

    async def pause(self) -> None:
        """Wait the regular delay."""
        await self._wait(self.delay_ms)

    async def backoff(self) -> None:
        """Wait the delay used after a failed page fetch."""
        await self._wait(self.delay_ms * self.backoff_multiplier)
