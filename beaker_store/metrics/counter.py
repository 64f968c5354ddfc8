# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
Counter — Named integer counters.

Commonly used to count occurrences: requests served, cache misses,
jobs enqueued. All operations wait for the coordinator to apply them.
"""

from __future__ import annotations

from typing import Dict, Optional

from beaker_store.kernel import coordinator as co


class Counter:
    """Client API for the counters held by a StateCoordinator."""

    def __init__(self, coordinator: co.StateCoordinator) -> None:
        self._coordinator = coordinator

    async def all(self) -> Dict[str, int]:
        """Snapshot of every counter currently stored."""
        return await self._coordinator.call(co.COUNTER_ALL)

    async def get(self, name: str) -> Optional[int]:
        """Return the counter value, or None if it was never set."""
        return await self._coordinator.call(co.COUNTER_GET, name)

    async def set(self, name: str, value: int) -> None:
        await self._coordinator.call(co.COUNTER_SET, name, value)

    async def incr(self, name: str) -> None:
        await self.incr_by(name, 1)

    async def incr_by(self, name: str, amount: int) -> None:
        """Add ``amount``; an absent counter starts from 0."""
        await self._coordinator.call(co.COUNTER_INCR_BY, name, amount)

    async def decr(self, name: str) -> None:
        await self.decr_by(name, 1)

    async def decr_by(self, name: str, amount: int) -> None:
        """Subtract ``amount``; an absent counter starts from 0."""
        await self._coordinator.call(co.COUNTER_DECR_BY, name, amount)

    async def clear(self, name: Optional[str] = None) -> None:
        """Remove one counter, or all of them when no name is given."""
        await self._coordinator.call(co.COUNTER_CLEAR, name)
