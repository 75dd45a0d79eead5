from .__version__ import __version__
from .core import Timer, TimerState
from .errors import (
    InvalidTimeoutType,
    NotInSetOrRunningStates,
    NotRunning,
    TimeoutOutOfBounds,
    TimerError,
    TimerErrors,
)
from .expiry import ExpiryHandle, ExpiryTrigger

__all__ = [
    "ExpiryHandle",
    "ExpiryTrigger",
    "InvalidTimeoutType",
    "NotInSetOrRunningStates",
    "NotRunning",
    "TimeoutOutOfBounds",
    "Timer",
    "TimerError",
    "TimerErrors",
    "TimerState",
    "__version__",
]
