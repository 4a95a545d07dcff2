"""Wall-clock time source.

Timestamps come in two resolutions:

coarse   ``int`` seconds since the epoch.
fine     :class:`FineTimestamp`, seconds plus microseconds.

Whether the fine-grained clock is usable is decided once per process by
:func:`hires_available` and cached.  Asking for fine timestamps when the
host can't provide them quietly degrades to coarse ones.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import NamedTuple, Union

logger = logging.getLogger(__name__)

USEC_PER_SEC = 1_000_000
NSEC_PER_USEC = 1_000
NSEC_PER_SEC = 1_000_000_000


class FineTimestamp(NamedTuple):
    """Epoch time split into whole seconds and microseconds."""

    seconds: int
    microseconds: int


Timestamp = Union[int, FineTimestamp]


# ── capability check (computed lazily, once) ─────────────────────────────

_hires: bool | None = None
_hires_lock = threading.Lock()


def _probe_hires() -> bool:
    info = time.get_clock_info("time")
    return info.resolution < 1.0


def hires_available() -> bool:
    """True when the wall clock has sub-second resolution."""
    global _hires
    if _hires is None:
        with _hires_lock:
            if _hires is None:
                _hires = _probe_hires()
                logger.debug("fine-grained clock available: %s", _hires)
    return _hires


def resolve_hires(requested: bool | None) -> bool:
    """Pick the precision a timer will actually use.

    ``None`` means "whatever is available".  An explicit ``True`` is only
    honoured when the fine-grained clock exists.
    """
    available = hires_available()
    if requested is None:
        return available
    if requested and not available:
        logger.debug("fine-grained clock requested but unavailable; using whole seconds")
        return False
    return bool(requested)


# ── reading the clock ────────────────────────────────────────────────────


def wall_clock_ns() -> int:
    return time.time_ns()


def now(hires: bool) -> Timestamp:
    """Current time as a coarse or fine timestamp."""
    ns = wall_clock_ns()
    if hires:
        seconds, usec = divmod(ns // NSEC_PER_USEC, USEC_PER_SEC)
        return FineTimestamp(seconds, usec)
    return ns // NSEC_PER_SEC


def interval(start: Timestamp, end: Timestamp) -> float | int:
    """Seconds from *start* to *end*.

    Fine timestamps are compared as whole microsecond counts so the
    microsecond field borrows from the seconds field correctly.
    """
    if isinstance(start, FineTimestamp) and isinstance(end, FineTimestamp):
        usec = (end.seconds - start.seconds) * USEC_PER_SEC + (
            end.microseconds - start.microseconds
        )
        return usec / USEC_PER_SEC
    return end - start
