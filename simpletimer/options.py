"""Timer construction options with optional JSON persistence.

Usage::

    options = TimerOptions(start=False, string="human")
    timer = Timer(options)

    save_options(options, path)
    timer = Timer(load_options(path))
"""

from __future__ import annotations

import json
import logging
import warnings
from dataclasses import dataclass, asdict, fields, replace
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from .timer.formats import StringFormatSpec

logger = logging.getLogger(__name__)


def pop_legacy_format(data: dict[str, Any], stacklevel: int = 2) -> str | None:
    """Remove the deprecated ``format`` key from *data* and warn.

    *stacklevel* counts from the function calling this one, so the
    default of 2 blames that function's caller.
    """
    legacy = data.pop("format", None)
    if legacy:
        warnings.warn(
            "Timer option 'format' is deprecated.  Use 'hms' (or 'string')",
            DeprecationWarning,
            stacklevel=stacklevel + 1,
        )
    return legacy


@dataclass
class TimerOptions:
    """Everything a :class:`~simpletimer.Timer` can be configured with."""

    start: bool = True                     # start the clock on construction
    hires: bool | None = None              # None → auto-detect
    hms: str | None = None                 # None → default_format_spec(hires)
    string: StringFormatSpec = "short"     # StringFormat, its name, or a callable

    # ── deprecated ────────────────────────────────────────────────────
    format: str | None = None              # old name for ``hms``

    def __post_init__(self) -> None:
        legacy = pop_legacy_format({"format": self.format}, stacklevel=3)
        self.format = None
        if legacy and not self.hms:
            self.hms = legacy

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TimerOptions":
        """Build options from a mapping, ignoring keys we don't know."""
        valid_keys = {f.name for f in fields(cls)}
        unknown = set(data) - valid_keys
        if unknown:
            logger.debug("ignoring unknown timer options: %s", sorted(unknown))
        known = {k: v for k, v in data.items() if k in valid_keys}
        legacy = pop_legacy_format(known)
        if legacy and not known.get("hms"):
            known["hms"] = legacy
        return cls(**known)

    def merged(self, **overrides: Any) -> "TimerOptions":
        """Copy of these options with *overrides* applied."""
        valid_keys = {f.name for f in fields(self)}
        bad = set(overrides) - valid_keys
        if bad:
            raise TypeError(f"unknown timer option(s): {', '.join(sorted(bad))}")
        legacy = pop_legacy_format(overrides)
        if legacy and not overrides.get("hms", self.hms):
            overrides["hms"] = legacy
        return replace(self, **overrides)


def load_options(path: str | Path) -> TimerOptions:
    """Load options from a JSON file, falling back to defaults."""
    path = Path(path)
    if not path.exists():
        return TimerOptions()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("could not read timer options from %s: %s", path, exc)
        return TimerOptions()
    if not isinstance(data, dict):
        logger.warning("timer options in %s are not a JSON object", path)
        return TimerOptions()
    return TimerOptions.from_mapping(data)


def save_options(options: TimerOptions, path: str | Path) -> None:
    """Write options to disk as JSON."""
    if callable(options.string):
        raise TypeError("a custom string formatter cannot be saved")
    data = asdict(options)
    if isinstance(data["string"], Enum):
        data["string"] = data["string"].value
    del data["format"]

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
