# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
Beaker Store — In-memory counters and sliding-window time series.
"""

from beaker_store.core.errors import BeakerError, StoreNotRunningError
from beaker_store.memory.sliding_window import Sample
from beaker_store.metrics.counter import Counter
from beaker_store.metrics.time_series import TimeSeries
from beaker_store.store import BeakerStore

__all__ = [
    "BeakerError",
    "BeakerStore",
    "Counter",
    "Sample",
    "StoreNotRunningError",
    "TimeSeries",
]
