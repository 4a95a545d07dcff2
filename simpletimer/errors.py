"""Exceptions raised by simpletimer."""


class TimerError(Exception):
    """Base class for timer misuse."""


class NotStartedError(TimerError, RuntimeError):
    """An elapsed-time query was made before the timer was started."""

    def __init__(self, message: str = "Timer never started!") -> None:
        super().__init__(message)


class UnknownFormatError(TimerError, ValueError):
    """``Timer.string`` was given a format it cannot resolve."""

    def __init__(self, fmt: object) -> None:
        self.format = fmt
        super().__init__(f"Unknown format: {fmt!r}")
