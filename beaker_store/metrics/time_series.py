# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
TimeSeries — Values sampled over time.

Commonly used to watch changing values for patterns and averages:
  - Response time across time
  - Download numbers over time
  - Error rates across time

Each series is a list of (timestamp, value) pairs, timestamps in epoch
microseconds, always newest-first. Only samples inside the retention
window (5 minutes by default) are kept.
"""

from __future__ import annotations

import inspect
from contextlib import contextmanager
from time import perf_counter
from typing import Any, Callable, Dict, Iterator, List, Optional

from beaker_store.core.clock import MICROS_PER_SECOND
from beaker_store.core.errors import StoreNotRunningError
from beaker_store.kernel import coordinator as co
from beaker_store.memory.sliding_window import Sample


def _elapsed_us(start: float) -> int:
    return int((perf_counter() - start) * MICROS_PER_SECOND)


class TimeSeries:
    """Client API for the time series held by a StateCoordinator."""

    def __init__(self, coordinator: co.StateCoordinator) -> None:
        self._coordinator = coordinator

    async def all(self) -> Dict[str, List[Sample]]:
        """Snapshot of every series, each newest-first."""
        return await self._coordinator.call(co.SERIES_ALL)

    async def get(self, name: str) -> Optional[List[Sample]]:
        """Samples for ``name`` newest-first, or None if it was never sampled."""
        return await self._coordinator.call(co.SERIES_GET, name)

    def sample(self, name: str, value: Any) -> bool:
        """
        Record ``value`` into the series ``name`` at the current time.

        Fire-and-forget: returns as soon as the sample is enqueued. Returns
        False if the coordinator mailbox was full and the sample was dropped.
        """
        return self._coordinator.cast(co.SERIES_SAMPLE, name, value)

    def clear(self, name: Optional[str] = None) -> None:
        """Remove one series, or all of them when no name is given (fire-and-forget)."""
        self._coordinator.cast(co.SERIES_CLEAR, name)

    async def time(self, name: str, func: Callable[[], Any]) -> Any:
        """
        Run ``func`` once, sample its duration in microseconds, return its result.

        ``func`` may be a plain callable or return an awaitable (e.g. an
        async function). If it raises, nothing is sampled. A stopped store
        raises StoreNotRunningError before ``func`` is called.

        Usage:
            rows = await series.time("db.query", lambda: db.fetch(sql))
        """
        self._ensure_running()
        start = perf_counter()
        result = func()
        if inspect.isawaitable(result):
            result = await result
        self.sample(name, _elapsed_us(start))
        return result

    @contextmanager
    def timed(self, name: str) -> Iterator[None]:
        """
        Time the enclosed block and sample its duration in microseconds.

        Usage:
            with series.timed("render"):
                html = template.render(ctx)
        """
        self._ensure_running()
        start = perf_counter()
        yield
        self.sample(name, _elapsed_us(start))

    def _ensure_running(self) -> None:
        # Checked before the timed work starts
        if not self._coordinator.running:
            raise StoreNotRunningError(co.SERIES_SAMPLE)
