"""Time queries backed by the engine settings and a microsecond clock."""

from __future__ import annotations

import time
from typing import Callable

from .settings import Settings


def _default_clock() -> int:
    return time.perf_counter_ns() // 1000


class Timer:
    """Implements ``lutro.timer``."""

    def __init__(self, settings: Settings, clock: Callable[[], int] | None = None) -> None:
        self.settings = settings
        self.clock = clock or _default_clock

    def get_time(self) -> float:
        """Seconds from the clock, which counts microseconds."""
        return self.clock() / 1000000.0

    def get_delta(self) -> float:
        return self.settings.delta

    def get_fps(self) -> int:
        return self.settings.fps