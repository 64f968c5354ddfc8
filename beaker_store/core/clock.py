# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
EpochClock — Sample timestamps in epoch microseconds.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

MICROS_PER_SECOND = 1_000_000


def now_us() -> int:
    """Current wall-clock time as integer microseconds since the epoch."""
    return time.time_ns() // 1_000


class EpochClock:
    """
    Wall clock that never runs backwards.

    If the system clock is adjusted back, the last issued timestamp is
    repeated until real time catches up, so samples stay ordered.
    """

    def __init__(self, source: Optional[Callable[[], int]] = None) -> None:
        """
        Args:
            source: Raw timestamp source in microseconds. Defaults to now_us.
        """
        self._source = source or now_us
        self._last: int = 0

    @property
    def last(self) -> int:
        """Last timestamp handed out (0 before the first call)."""
        return self._last

    def __call__(self) -> int:
        current = self._source()
        if current < self._last:
            return self._last
        self._last = current
        return current
