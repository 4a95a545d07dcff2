"""Shared pytest fixtures for simpletimer tests."""

import pytest

from simpletimer import clock
from simpletimer.timer.engine import Timer

from helpers import FakeClock


@pytest.fixture
def fake_clock(monkeypatch):
    """Replace the wall clock with one that only moves when told to."""
    fake = FakeClock()
    monkeypatch.setattr(clock, "wall_clock_ns", fake)
    return fake


@pytest.fixture
def hires_clock(monkeypatch, fake_clock):
    """Fake clock on a host that has sub-second resolution."""
    monkeypatch.setattr(clock, "_hires", True)
    return fake_clock


@pytest.fixture
def coarse_clock(monkeypatch, fake_clock):
    """Fake clock on a host limited to whole seconds."""
    monkeypatch.setattr(clock, "_hires", False)
    return fake_clock


@pytest.fixture
def timer(hires_clock):
    """Fresh fine-grained Timer, already running."""
    return Timer()


@pytest.fixture
def unstarted(hires_clock):
    """Fine-grained Timer that was never started."""
    return Timer(start=False)
