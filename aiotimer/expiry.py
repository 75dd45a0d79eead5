from __future__ import annotations

import asyncio
from collections.abc import Callable

ExpiryCallback = Callable[[], None]


class ExpiryHandle:
    """
    A pending expiry returned by `ExpiryTrigger.arm()`.

    `disarm()` — revokes the loop registration so the callback never runs.
    """

    def __init__(self, handle: asyncio.TimerHandle) -> None:
        self._handle = handle

    def disarm(self) -> None:
        self._handle.cancel()


class ExpiryTrigger:
    def __init__(self, delay: float) -> None:
        self._delay = delay

    def arm(self, on_expire: ExpiryCallback, loop: asyncio.AbstractEventLoop) -> ExpiryHandle:
        handle = loop.call_at(loop.time() + self._delay, on_expire)
        return ExpiryHandle(handle)
