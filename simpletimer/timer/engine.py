"""Stopwatch state machine.

States
------
UNSTARTED   Constructed with ``start=False`` and never started.
RUNNING     Started; elapsed time is measured against "now".
STOPPED     Stopped; elapsed time is frozen at the stop timestamp.

Transitions
-----------
UNSTARTED → RUNNING             (start)
RUNNING → RUNNING               (start / restart resets the clock)
RUNNING → STOPPED               (stop)
STOPPED → STOPPED               (stop is a no-op, the stop time is kept)
STOPPED → RUNNING               (start / restart)

A timer stringifies through :meth:`Timer.string` and converts to a number
through :meth:`Timer.elapsed`, so timers add, subtract and order like
numbers (equality stays identity-based)::

    total = timer1 + timer2
    slower = timer1 > timer2
    print(f"took {timer1}, in total {format_hms(total)}")
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

from ..clock import Timestamp, interval, now, resolve_hires
from ..errors import NotStartedError
from ..hms import default_format_spec, format_number, separate_hms
from ..options import TimerOptions, pop_legacy_format
from .formats import StringFormat, StringFormatSpec, render

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    UNSTARTED = "unstarted"
    RUNNING = "running"
    STOPPED = "stopped"


# ── engine ────────────────────────────────────────────────────────────────


class Timer:
    """Small wall-clock stopwatch.

    Accepts a :class:`TimerOptions`, keyword options, or both (keywords
    win)::

        Timer()
        Timer(start=False, string="human")
        Timer(load_options(path), hires=False)
    """

    def __init__(
        self,
        options: TimerOptions | None = None,
        **overrides: Any,
    ) -> None:
        options = options if options is not None else TimerOptions()
        legacy = pop_legacy_format(overrides)
        if legacy and not overrides.get("hms", options.hms):
            overrides["hms"] = legacy
        if overrides:
            options = options.merged(**overrides)

        # ── configuration ─────────────────────────────────────────────
        self._hires: bool = resolve_hires(options.hires)
        self._hms_format: str = options.hms or default_format_spec(self._hires)
        self._string_format: StringFormatSpec = options.string

        # ── clock state ───────────────────────────────────────────────
        self._started_at: Timestamp | None = None
        self._stopped_at: Timestamp | None = None

        if options.start:
            self.start()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def hires(self) -> bool:
        """True when timestamps carry microseconds."""
        return self._hires

    @property
    def hms_format(self) -> str:
        return self._hms_format

    @property
    def string_format(self) -> StringFormatSpec:
        return self._string_format

    @property
    def started_at(self) -> Timestamp | None:
        return self._started_at

    @property
    def stopped_at(self) -> Timestamp | None:
        return self._stopped_at

    @property
    def state(self) -> TimerState:
        if self._started_at is None:
            return TimerState.UNSTARTED
        if self._stopped_at is None:
            return TimerState.RUNNING
        return TimerState.STOPPED

    @property
    def is_running(self) -> bool:
        return self.state == TimerState.RUNNING

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def time(self) -> Timestamp:
        """Current time in this timer's resolution."""
        return now(self._hires)

    def start(self) -> None:
        """Set the clock to now.  Also used to restart a timer."""
        # an old stop time must not survive a restart
        self._stopped_at = None
        self._started_at = self.time()
        logger.debug("timer started at %s", self._started_at)

    restart = start

    def stop(self) -> float:
        """Freeze the clock and return the elapsed seconds.

        Stopping an already stopped timer keeps the original stop time.
        """
        if self._started_at is None:
            raise NotStartedError()
        if self._stopped_at is None:
            self._stopped_at = self.time()
            logger.debug("timer stopped at %s", self._stopped_at)
        return self.elapsed()

    # ══════════════════════════════════════════════════════════════════
    #  MEASUREMENTS
    # ══════════════════════════════════════════════════════════════════

    def elapsed(self) -> float:
        """Seconds since the timer was started (up to the stop, if any)."""
        if self._started_at is None:
            raise NotStartedError()
        end = self._stopped_at if self._stopped_at is not None else self.time()
        return interval(self._started_at, end)

    def hms_units(self) -> tuple[int, int, float]:
        """Elapsed time as ``(hours, minutes, seconds)``."""
        return separate_hms(self.elapsed())

    def hms(self, fmt: str | None = None) -> str:
        """Elapsed time through an HMS ``%`` template.

        Defaults to the ``hms`` option: ``00:00:00.000000`` with the
        fine-grained clock, ``00:00:00`` without.
        """
        return (fmt or self._hms_format) % self.hms_units()

    def string(self, fmt: StringFormatSpec | None = None) -> str:
        """Render the elapsed time.

        *fmt* may be a :class:`StringFormat` (or its name), ``"hms"``,
        ``"elapsed"`` or ``"stop"`` to delegate to those methods, or a
        callable that is given the timer.  Defaults to the ``string`` option.
        """
        fmt = fmt or self._string_format

        if callable(fmt):
            return _scalar(fmt(self))
        if isinstance(fmt, str) and fmt in _DELEGATES:
            return _scalar(_DELEGATES[fmt](self))

        variant = StringFormat.parse(fmt)
        # one reading of the clock, so every part of the string agrees
        seconds = self.elapsed()
        return render(variant, seconds, self._hms_format)

    # ══════════════════════════════════════════════════════════════════
    #  CONVERSIONS
    # ══════════════════════════════════════════════════════════════════

    def __str__(self) -> str:
        return self.string()

    def __float__(self) -> float:
        return float(self.elapsed())

    def __int__(self) -> int:
        return int(self.elapsed())

    def __add__(self, other: Any) -> float:
        seconds = _seconds(other)
        if seconds is NotImplemented:
            return NotImplemented
        return self.elapsed() + seconds

    __radd__ = __add__

    def __sub__(self, other: Any) -> float:
        seconds = _seconds(other)
        if seconds is NotImplemented:
            return NotImplemented
        return self.elapsed() - seconds

    def __rsub__(self, other: Any) -> float:
        seconds = _seconds(other)
        if seconds is NotImplemented:
            return NotImplemented
        return seconds - self.elapsed()

    # equality and hashing stay identity-based
    def __lt__(self, other: Any) -> bool:
        seconds = _seconds(other)
        if seconds is NotImplemented:
            return NotImplemented
        return self.elapsed() < seconds

    def __le__(self, other: Any) -> bool:
        seconds = _seconds(other)
        if seconds is NotImplemented:
            return NotImplemented
        return self.elapsed() <= seconds

    def __gt__(self, other: Any) -> bool:
        seconds = _seconds(other)
        if seconds is NotImplemented:
            return NotImplemented
        return self.elapsed() > seconds

    def __ge__(self, other: Any) -> bool:
        seconds = _seconds(other)
        if seconds is NotImplemented:
            return NotImplemented
        return self.elapsed() >= seconds

    def __repr__(self) -> str:
        return (
            f"Timer(state={self.state.value}, hires={self._hires}, "
            f"started_at={self._started_at!r}, stopped_at={self._stopped_at!r})"
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTEXT MANAGER
    # ══════════════════════════════════════════════════════════════════

    def __enter__(self) -> "Timer":
        if self._started_at is None or self._stopped_at is not None:
            self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()


_DELEGATES: dict[str, Callable[[Timer], Any]] = {
    "hms": Timer.hms,
    "elapsed": Timer.elapsed,
    "stop": Timer.stop,
}


def _scalar(value: Any) -> str:
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def _seconds(value: Any) -> Any:
    if isinstance(value, Timer):
        return value.elapsed()
    if isinstance(value, (int, float)):
        return value
    return NotImplemented
