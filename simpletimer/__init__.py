"""Small, simple timer (stopwatch) objects.

Usage::

    from simpletimer import Timer

    t = Timer()
    do_something()
    print(f"something took: {t}")
"""

import logging

from .clock import FineTimestamp, hires_available
from .errors import TimerError, NotStartedError, UnknownFormatError
from .hms import default_format_spec, format_hms, format_number, separate_hms
from .options import TimerOptions, load_options, save_options
from .timer import Timer, TimerState, StringFormat

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Timer",
    "TimerState",
    "StringFormat",
    "TimerOptions",
    "load_options",
    "save_options",
    "TimerError",
    "NotStartedError",
    "UnknownFormatError",
    "FineTimestamp",
    "hires_available",
    "default_format_spec",
    "format_hms",
    "format_number",
    "separate_hms",
]
