from __future__ import annotations

import asyncio
import logging
import numbers
from enum import Enum, auto
from typing import ClassVar

from .errors import (
    ERRORS,
    InvalidTimeoutType,
    NotInSetOrRunningStates,
    NotRunning,
    TimeoutOutOfBounds,
    TimerErrors,
)
from .expiry import ExpiryHandle, ExpiryTrigger

logger = logging.getLogger(__name__)

# Longest delay handed to the loop (about 285,000 years); larger ints overflow a float.
_MAX_DELAY_MS = 2**53


class TimerState(Enum):
    SET = auto()
    RUNNING = auto()
    DONE = auto()
    CANCELLED = auto()

    @property
    def terminal(self) -> bool:
        return self is TimerState.DONE or self is TimerState.CANCELLED


def _whole_milliseconds(value: object) -> int:
    # bool is an Integral, but True is not a duration
    if isinstance(value, bool):
        raise InvalidTimeoutType()
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidTimeoutType()


class _SharedWait(asyncio.Future):
    """
    Wait future shared by every caller of `Timer.start()`.

    `cancel()` is refused, so cancelling one awaiting task (directly or via
    `asyncio.wait_for`) cancels only that task, not the other joiners.
    Only `Timer.cancel()` ends the wait early.
    """

    def cancel(self, msg: object | None = None) -> bool:
        return False


class _Settlement:
    """
    One-shot resolution of a wait future.

    The first `resolve()` settles the future; every later call is a no-op
    and returns False.
    """

    def __init__(self, future: asyncio.Future[TimerState]) -> None:
        self._future = future
        self._settled = False

    @property
    def future(self) -> asyncio.Future[TimerState]:
        return self._future

    def resolve(self, state: TimerState) -> bool:
        if self._settled:
            return False

        self._settled = True
        self._future.set_result(state)
        return True


class Timer:
    """
    A single timeout that can be awaited and cancelled, exactly once.

    `start()` arms the timeout on the running loop and returns a future
    resolving to `Timer.DONE` on expiry or `Timer.CANCELLED` after
    `cancel()`. Calling `start()` again while running returns the same
    future, so several awaiters can join one timer.

    The timeout is a whole number of milliseconds, at least 1.
    """

    SET: ClassVar[TimerState] = TimerState.SET
    RUNNING: ClassVar[TimerState] = TimerState.RUNNING
    DONE: ClassVar[TimerState] = TimerState.DONE
    CANCELLED: ClassVar[TimerState] = TimerState.CANCELLED

    errors: ClassVar[TimerErrors] = ERRORS

    def __init__(self, timeout: int, *, name: str | None = None) -> None:
        timeout = _whole_milliseconds(timeout)
        if timeout < 1:
            raise TimeoutOutOfBounds()

        self._timeout = timeout
        self._name = name
        self._state = TimerState.SET
        self._settlement: _Settlement | None = None
        self._expiry: ExpiryHandle | None = None
        logger.debug("timer %s created with timeout %dms", self._label, self._timeout)

    @property
    def timeout(self) -> int:
        return self._timeout

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def _label(self) -> str:
        return repr(self._name) if self._name is not None else f"0x{id(self):x}"

    def __repr__(self) -> str:
        label = f" {self._name!r}" if self._name is not None else ""
        return f"<Timer{label} timeout={self._timeout}ms state={self._state.name}>"

    def start(self) -> asyncio.Future[TimerState]:
        """
        Arms the timer, or joins it if it is already running.

        Raises `NotInSetOrRunningStates` once the timer is DONE or CANCELLED,
        and `RuntimeError` when called without a running event loop.
        """
        if self._state is TimerState.RUNNING:
            settlement, _ = self._running_preconditions()
            logger.debug("timer %s joined", self._label)
            return settlement.future

        if self._state.terminal:
            raise NotInSetOrRunningStates(self._state)

        loop = asyncio.get_running_loop()
        settlement = _Settlement(_SharedWait(loop=loop))
        delay = min(self._timeout, _MAX_DELAY_MS) / 1000
        self._expiry = ExpiryTrigger(delay).arm(self._on_expire, loop)
        self._settlement = settlement
        self._state = TimerState.RUNNING
        logger.debug("timer %s started", self._label)
        return settlement.future

    def cancel(self) -> asyncio.Future[TimerState]:
        """
        Revokes the pending expiry and resolves the wait to `Timer.CANCELLED`.

        Raises `NotRunning` unless the timer is RUNNING.
        """
        if self._state is not TimerState.RUNNING:
            raise NotRunning(self._state)

        _, expiry = self._running_preconditions()
        # disarm before settling so the loop can never deliver DONE afterwards
        expiry.disarm()
        future = self._finish(TimerState.CANCELLED)
        logger.debug("timer %s cancelled", self._label)
        return future

    def _on_expire(self) -> None:
        if self._state is not TimerState.RUNNING:
            return

        self._finish(TimerState.DONE)
        logger.debug("timer %s expired", self._label)

    def _finish(self, state: TimerState) -> asyncio.Future[TimerState]:
        settlement, _ = self._running_preconditions()
        self._expiry = None
        self._settlement = None
        self._state = state
        settlement.resolve(state)
        return settlement.future

    def _running_preconditions(self) -> tuple[_Settlement, ExpiryHandle]:
        if self._settlement is None or self._expiry is None:
            raise RuntimeError(f"{self!r} is running without a pending expiry")

        return self._settlement, self._expiry
