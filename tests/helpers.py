"""Shared test helpers for simpletimer."""

NSEC_PER_SEC = 1_000_000_000


class FakeClock:
    """Stand-in for ``clock.wall_clock_ns`` that advances on demand."""

    def __init__(self, epoch_ns: int = 1_700_000_000 * NSEC_PER_SEC):
        self.ns = epoch_ns
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        return self.ns

    def advance(self, seconds: float) -> None:
        self.ns += round(seconds * NSEC_PER_SEC)

    def set(self, seconds: int, microseconds: int = 0) -> None:
        self.ns = seconds * NSEC_PER_SEC + microseconds * 1_000
