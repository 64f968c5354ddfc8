# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
BeakerStore — Holds the coordinator and the metric client APIs.

Created once by the host application and passed to whatever needs to
record or read metrics:

    async with BeakerStore() as store:
        await store.counters.incr("requests")
        store.series.sample("latency_ms", 12.5)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from beaker_store.core.config import BeakerSettings, settings as default_settings
from beaker_store.core.logging import apply_log_level
from beaker_store.kernel.coordinator import StateCoordinator
from beaker_store.metrics.counter import Counter
from beaker_store.metrics.time_series import TimeSeries

logger = logging.getLogger("beaker.store")


class BeakerStore:
    """In-memory counters and time series behind one serializing coordinator."""

    def __init__(
        self,
        settings: Optional[BeakerSettings] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        """
        Args:
            settings: Store configuration. Defaults to the environment settings.
            clock: Timestamp source in epoch microseconds (injectable for tests).
        """
        self.settings = settings or default_settings
        apply_log_level(self.settings.LOG_LEVEL)
        self.coordinator = StateCoordinator(
            retention=self.settings.retention_us,
            clock=clock,
            maxsize=self.settings.MAILBOX_MAXSIZE,
        )
        self.counters = Counter(self.coordinator)
        self.series = TimeSeries(self.coordinator)
        logger.debug(
            "Store created (retention=%ds, log_level=%s)",
            self.settings.RETENTION_SECONDS, self.settings.LOG_LEVEL,
        )

    @property
    def running(self) -> bool:
        return self.coordinator.running

    async def start(self) -> None:
        await self.coordinator.start()

    async def stop(self) -> None:
        await self.coordinator.stop()

    async def __aenter__(self) -> "BeakerStore":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
