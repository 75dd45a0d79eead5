from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import TimerState


class TimerError(Exception):
    """Base class for every error raised by `Timer`."""

    default_message = "timer error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidTimeoutType(TimerError, TypeError):  # noqa: N818
    """Raised by `Timer()` when the timeout is not a whole number."""

    default_message = "The timer timeout type is not valid, it should be a whole number."


class TimeoutOutOfBounds(TimerError, ValueError):  # noqa: N818
    """Raised by `Timer()` when the timeout is less than 1 ms."""

    default_message = "The timer timeout is out of bounds, it should be between 1 ms and infinity."


class _StateError(TimerError, RuntimeError):
    def __init__(self, state: TimerState, message: str | None = None) -> None:
        self.state = state
        super().__init__(message)


class NotInSetOrRunningStates(_StateError):  # noqa: N818
    """Raised by `Timer.start()` once the timer is DONE or CANCELLED."""

    default_message = "The timer is not in the SET or RUNNING states."


class NotRunning(_StateError):  # noqa: N818
    """Raised by `Timer.cancel()` unless the timer is RUNNING."""

    default_message = "The timer is not in the RUNNING state."


@dataclass(frozen=True, kw_only=True, slots=True)
class TimerErrors:
    """
    Immutable registry of the error kinds, exposed as `Timer.errors`.
    """

    InvalidTimeoutType: type[InvalidTimeoutType]
    TimeoutOutOfBounds: type[TimeoutOutOfBounds]
    NotInSetOrRunningStates: type[NotInSetOrRunningStates]
    NotRunning: type[NotRunning]


ERRORS = TimerErrors(
    InvalidTimeoutType=InvalidTimeoutType,
    TimeoutOutOfBounds=TimeoutOutOfBounds,
    NotInSetOrRunningStates=NotInSetOrRunningStates,
    NotRunning=NotRunning,
)
