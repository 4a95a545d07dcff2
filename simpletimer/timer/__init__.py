"""Timer package."""

from .engine import Timer, TimerState
from .formats import StringFormat, RENDERERS

__all__ = [
    "Timer",
    "TimerState",
    "StringFormat",
    "RENDERERS",
]
