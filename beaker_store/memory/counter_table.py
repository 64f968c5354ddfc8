# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
Counter Table — Named integer counters.

A counter is absent until first written; increments on an absent
counter start from zero.
"""

from __future__ import annotations

from typing import Dict, Optional


class CounterTable:
    """Plain name -> int mapping, accessed only from the coordinator task."""

    def __init__(self) -> None:
        self._values: Dict[str, int] = {}

    def get(self, name: str) -> Optional[int]:
        return self._values.get(name)

    def set(self, name: str, value: int) -> None:
        self._values[name] = value

    def incr_by(self, name: str, amount: int = 1) -> int:
        """Add ``amount`` to the counter and return the new value."""
        value = self._values.get(name, 0) + amount
        self._values[name] = value
        return value

    def decr_by(self, name: str, amount: int = 1) -> int:
        return self.incr_by(name, -amount)

    def clear(self, name: Optional[str] = None) -> None:
        """Remove one counter, or every counter when ``name`` is None."""
        if name is None:
            self._values.clear()
        else:
            self._values.pop(name, None)

    def all(self) -> Dict[str, int]:
        return dict(self._values)

    def __len__(self) -> int:
        return len(self._values)
