"""Wall-clock access for the generator."""

import time
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current Unix time in milliseconds."""

    def millis(self) -> int: ...


def current_millis() -> int:
    return int(time.time() * 1000)


class SystemClock:
    """Clock backed by the system wall clock."""

    def millis(self) -> int:
        return current_millis()
