"""Clock abstraction used to timestamp assertions and expire tokens."""

from __future__ import annotations

import abc
import time


class Clock(metaclass=abc.ABCMeta):
    """Source of the current time in whole seconds since the epoch."""

    @abc.abstractmethod
    def now(self) -> int:
        raise NotImplementedError


class SystemClock(Clock):
    """Wall-clock time."""

    def now(self) -> int:
        return int(time.time())


class FakeClock(Clock):
    """Manually driven clock for tests."""

    def __init__(self, now_value: int = 0) -> None:
        self.now_value = now_value

    def now(self) -> int:
        return self.now_value

    def advance(self, seconds: int) -> None:
        self.now_value += seconds
