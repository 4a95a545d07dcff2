"""Tests for Timer.string dispatch and the built-in renderings.

Covers: short / rps / human / full output, zero-duration rps, callable
and delegate formats, unknown formats, and single clock reads per render.
"""

import pytest

from simpletimer.errors import UnknownFormatError
from simpletimer.timer.engine import Timer, TimerState
from simpletimer.timer.formats import (
    StringFormat,
    render,
    render_full,
    render_human,
    render_rps,
    render_short,
)


FINE = "%02d:%02d:%09.6f"
WHOLE = "%02d:%02d:%02d"


@pytest.fixture
def stopped(hires_clock):
    """Timer stopped after exactly 123 seconds."""
    t = Timer()
    hires_clock.advance(123)
    t.stop()
    return t


# ═══════════════════════════════════════════════════════════════════════════
#  RENDERERS
# ═══════════════════════════════════════════════════════════════════════════


class TestRenderers:

    def test_short_whole(self):
        assert render_short(123, WHOLE) == "123s (00:02:03)"

    def test_short_fractional(self):
        assert render_short(4.5, FINE) == "4.5s (00:00:04.500000)"

    def test_rps(self):
        assert render_rps(4.743616, FINE) == "4.743616s (0.211/s)"

    def test_rps_zero_has_placeholder(self):
        assert render_rps(0, FINE) == "0.000000s (??/s)"

    def test_rps_rounds_to_zero(self):
        assert "??" in render_rps(0.0000001, FINE)

    def test_human(self):
        assert render_human(6 * 3600 + 4 * 60 + 12, FINE) == "6 hours 4 minutes 12 seconds"

    def test_human_fraction(self):
        assert render_human(61.25, FINE) == "0 hours 1 minutes 1.25 seconds"

    def test_full(self):
        assert render_full(2, WHOLE) == "2 seconds (0 hours 0 minutes 2 seconds)"

    def test_render_dispatches(self):
        assert render(StringFormat.SHORT, 123, WHOLE) == "123s (00:02:03)"


class TestStringFormatParse:

    def test_member_passes_through(self):
        assert StringFormat.parse(StringFormat.RPS) is StringFormat.RPS

    def test_by_name(self):
        assert StringFormat.parse("full") is StringFormat.FULL

    def test_unknown(self):
        with pytest.raises(UnknownFormatError) as excinfo:
            StringFormat.parse("bogus-name")
        assert excinfo.value.format == "bogus-name"
        assert "bogus-name" in str(excinfo.value)


# ═══════════════════════════════════════════════════════════════════════════
#  TIMER.STRING
# ═══════════════════════════════════════════════════════════════════════════


class TestTimerString:

    def test_default_is_short(self, stopped):
        assert stopped.string() == "123s (00:02:03.000000)"

    @pytest.mark.parametrize("fmt, expected", [
        ("short", "123s (00:02:03.000000)"),
        ("rps", "123.000000s (0.008/s)"),
        ("human", "0 hours 2 minutes 3 seconds"),
        ("full", "123 seconds (0 hours 2 minutes 3 seconds)"),
        (StringFormat.HUMAN, "0 hours 2 minutes 3 seconds"),
    ])
    def test_named_variants(self, stopped, fmt, expected):
        assert stopped.string(fmt) == expected

    def test_short_uses_configured_hms(self, hires_clock):
        t = Timer(hms="%dh %dm %ds")
        hires_clock.advance(123)
        t.stop()
        assert t.string("short") == "123s (0h 2m 3s)"

    def test_rps_zero_elapsed(self, timer):
        timer.stop()
        assert "??" in timer.string("rps")

    def test_empty_falls_back_to_default(self, stopped):
        assert stopped.string("") == stopped.string()

    def test_unknown_format(self, stopped):
        with pytest.raises(UnknownFormatError, match="bogus-name"):
            stopped.string("bogus-name")

    def test_unknown_default_format_fails_on_str(self, hires_clock):
        t = Timer(string="nope")
        with pytest.raises(UnknownFormatError):
            str(t)

    def test_unknown_format_is_a_value_error(self, stopped):
        with pytest.raises(ValueError):
            stopped.string("nope")


class TestDelegates:

    def test_hms_delegate(self, stopped):
        assert stopped.string("hms") == "00:02:03.000000"

    def test_elapsed_delegate(self, stopped):
        assert stopped.string("elapsed") == "123"

    def test_stop_delegate_stops_and_reports(self, timer, hires_clock):
        hires_clock.advance(4)
        assert timer.string("stop") == "4"
        assert timer.state == TimerState.STOPPED
        hires_clock.advance(10)
        assert timer.elapsed() == pytest.approx(4)

    def test_callable_gets_timer(self, stopped):
        seen = []

        def fmt(t):
            seen.append(t)
            return f"{t.elapsed():.0f} secs"

        assert stopped.string(fmt) == "123 secs"
        assert seen == [stopped]

    def test_callable_numeric_result(self, stopped):
        assert stopped.string(lambda t: t.elapsed() / 2) == "61.5"

    def test_callable_as_default(self, hires_clock):
        t = Timer(string=lambda timer: "custom")
        assert str(t) == "custom"


class TestSingleClockRead:

    @pytest.mark.parametrize("fmt", ["short", "rps", "human", "full"])
    def test_running_render_reads_clock_once(self, timer, hires_clock, fmt):
        before = hires_clock.reads
        timer.string(fmt)
        assert hires_clock.reads - before == 1
