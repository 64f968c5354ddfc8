# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
Sliding Window — Retention-bounded sample queue for one time series.

Samples are kept newest-first. Expired samples are evicted only when a
new sample is added; there is no background sweep, so an idle window
keeps reporting its last contents until the next write.

The window has no locking of its own. It is only ever touched from the
coordinator task, which serializes all access.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, List, NamedTuple, Optional


class Sample(NamedTuple):
    """One observation: epoch-microsecond timestamp and caller value."""
    timestamp: int
    value: Any


class SlidingWindow:
    """
    Ordered samples restricted to a trailing retention duration.

    Invariant: timestamps are non-increasing from front (newest) to back
    (oldest), so expired samples are always found at the back.
    """

    def __init__(self, retention: int) -> None:
        """
        Args:
            retention: Window length in timestamp units (microseconds).
        """
        self._retention = retention
        self._items: Deque[Sample] = deque()

    @classmethod
    def timed(cls, retention: int, first: Sample, now: int) -> "SlidingWindow":
        """
        Create a window seeded with ``first``.

        A first sample that is already older than the window is discarded,
        which yields an empty window.
        """
        window = cls(retention)
        return window.add(first, now)

    @property
    def retention(self) -> int:
        return self._retention

    @property
    def newest(self) -> Optional[Sample]:
        return self._items[0] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def add(self, sample: Sample, now: int) -> "SlidingWindow":
        """Evict samples older than ``now - retention`` and push ``sample`` to the front."""
        cutoff = now - self._retention
        while self._items and self._items[-1].timestamp < cutoff:
            self._items.pop()
        if sample.timestamp >= cutoff:
            self._items.appendleft(sample)
        return self

    def to_list(self) -> List[Sample]:
        """Export the samples newest-first."""
        return list(self._items)
