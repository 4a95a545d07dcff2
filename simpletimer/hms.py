"""Hours/minutes/seconds helpers.

Usage::

    separate_hms(3725.5)        # (1, 2, 5.5)
    format_hms(3725.5)          # '01:02:05.500000'
    format_hms(1, 2, 5)         # '01:02:05'
    default_format_spec(False)  # '%02d:%02d:%02d'
"""

from __future__ import annotations

from .clock import hires_available

SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60

# 9 wide, 6 after the point, 1 for the point → 2 digits before it
FRACTIONAL_SPEC = "%02d:%02d:%09.6f"
WHOLE_SPEC = "%02d:%02d:%02d"


def separate_hms(seconds: float) -> tuple[int, int, float]:
    """Split *seconds* into whole hours, whole minutes and the remainder.

    The remainder keeps any fraction.  Hours are not rolled into days.
    """
    hours, rest = divmod(seconds, SECONDS_PER_HOUR)
    minutes, rest = divmod(rest, SECONDS_PER_MINUTE)
    return int(hours), int(minutes), rest


def default_format_spec(fractional: bool | None = None) -> str:
    """``%`` template for an HMS string.

    Fractional seconds when *fractional* is true, whole seconds when
    false, and whatever the clock supports when omitted.
    """
    if fractional is None:
        fractional = hires_available()
    return FRACTIONAL_SPEC if fractional else WHOLE_SPEC


def format_hms(*units: float) -> str:
    """Format ``(hours, minutes, seconds)`` or a bare total of seconds."""
    if len(units) == 1:
        units = separate_hms(units[0])
    elif len(units) != 3:
        raise TypeError(
            f"format_hms() takes 1 or 3 arguments ({len(units)} given)"
        )
    hours, minutes, seconds = units
    return default_format_spec(int(seconds) != seconds) % (hours, minutes, seconds)


def format_number(value: float) -> str:
    """Render a number the plain way: ``2``, ``0.25``, ``1.23456789012346``."""
    if isinstance(value, float):
        return "%.15g" % value
    return str(value)
