"""Named string renderings of an elapsed duration.

=========  ===============================================
``short``  ``'123s (00:02:03)'``
``rps``    ``'4.743616s (0.211/s)'``
``human``  ``'6 hours 4 minutes 12 seconds'``
``full``   ``'2 seconds (0 hours 0 minutes 2 seconds)'``
=========  ===============================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Union

from ..errors import UnknownFormatError
from ..hms import format_number, separate_hms


class StringFormat(Enum):
    SHORT = "short"
    RPS = "rps"
    HUMAN = "human"
    FULL = "full"

    @classmethod
    def parse(cls, value: object) -> "StringFormat":
        """Accept a member or its name; anything else is an error."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownFormatError(value) from None


StringFormatSpec = Union[StringFormat, str, Callable[..., Any]]


# ── renderers ────────────────────────────────────────────────────────────


def render_short(seconds: float, hms_spec: str) -> str:
    return f"{format_number(seconds)}s ({hms_spec % separate_hms(seconds)})"


def render_rps(seconds: float, hms_spec: str) -> str:
    elapsed = "%f" % seconds
    rate = "??" if float(elapsed) == 0 else "%.3f" % (1 / float(elapsed))
    return f"{elapsed}s ({rate}/s)"


def render_human(seconds: float, hms_spec: str) -> str:
    hours, minutes, rest = separate_hms(seconds)
    return f"{hours} hours {minutes} minutes {format_number(rest)} seconds"


def render_full(seconds: float, hms_spec: str) -> str:
    return f"{format_number(seconds)} seconds ({render_human(seconds, hms_spec)})"


RENDERERS: dict[StringFormat, Callable[[float, str], str]] = {
    StringFormat.SHORT: render_short,
    StringFormat.RPS: render_rps,
    StringFormat.HUMAN: render_human,
    StringFormat.FULL: render_full,
}


def render(fmt: StringFormat, seconds: float, hms_spec: str) -> str:
    """Render *seconds* with one of the built-in variants."""
    return RENDERERS[fmt](seconds, hms_spec)
