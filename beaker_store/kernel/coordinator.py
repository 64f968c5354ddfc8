# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
State Coordinator — Single writer for all counter and time series state.

One asyncio task owns both mappings and drains a FIFO mailbox, handling
requests strictly one at a time. Two request disciplines:

  - call: the caller awaits a future resolved once the request is applied
  - cast: fire-and-forget, the caller only learns whether it was enqueued

Because the mailbox is FIFO, a caller's own requests are applied in the
order it issued them.

Backpressure: with MAILBOX_MAXSIZE=0 the mailbox grows without bound.
When bounded and full, calls wait for space and casts are dropped
(logged and counted in ``dropped``).

All callers must run on the event loop the coordinator was started on.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from beaker_store.core.clock import EpochClock
from beaker_store.core.errors import StoreNotRunningError
from beaker_store.memory.counter_table import CounterTable
from beaker_store.memory.sliding_window import Sample, SlidingWindow

logger = logging.getLogger("beaker.coordinator")

# Request names
COUNTER_ALL = "counter.all"
COUNTER_GET = "counter.get"
COUNTER_SET = "counter.set"
COUNTER_INCR_BY = "counter.incr_by"
COUNTER_DECR_BY = "counter.decr_by"
COUNTER_CLEAR = "counter.clear"
SERIES_ALL = "series.all"
SERIES_GET = "series.get"
SERIES_SAMPLE = "series.sample"
SERIES_CLEAR = "series.clear"


@dataclass
class Request:
    """A single mailbox entry."""
    op: str
    args: Tuple[Any, ...] = ()
    reply: Optional[asyncio.Future] = None


_STOP = Request(op="__stop__")


class StateCoordinator:
    """
    Serializing owner of the counter table and the time series windows.

    Every read and write goes through the mailbox, so no two requests ever
    interleave and every reply reflects all requests queued before it.
    """

    def __init__(
        self,
        retention: int,
        clock: Optional[Callable[[], int]] = None,
        maxsize: int = 0,
    ) -> None:
        """
        Args:
            retention: Window length for every new series, in microseconds.
            clock: Raw timestamp source in epoch microseconds, wrapped so
                it never runs backwards.
            maxsize: Mailbox capacity; 0 means unbounded.
        """
        self._retention = retention
        self._clock = EpochClock(source=clock)
        self._maxsize = maxsize
        self._counters = CounterTable()
        self._series: Dict[str, SlidingWindow] = {}
        self._mailbox: Optional[asyncio.Queue] = None
        self._task: Optional[asyncio.Task] = None
        self._draining: Optional[asyncio.Task] = None
        self._running: bool = False
        self._dropped: int = 0
        self._handlers: Dict[str, Callable[..., Any]] = {
            COUNTER_ALL: self._counter_all,
            COUNTER_GET: self._counters.get,
            COUNTER_SET: self._counters.set,
            COUNTER_INCR_BY: self._counters.incr_by,
            COUNTER_DECR_BY: self._counters.decr_by,
            COUNTER_CLEAR: self._counters.clear,
            SERIES_ALL: self._series_all,
            SERIES_GET: self._series_get,
            SERIES_SAMPLE: self._series_sample,
            SERIES_CLEAR: self._series_clear,
        }

    @property
    def running(self) -> bool:
        return self._running

    @property
    def retention(self) -> int:
        return self._retention

    @property
    def dropped(self) -> int:
        """Fire-and-forget requests rejected because the mailbox was full."""
        return self._dropped

    @property
    def pending(self) -> int:
        """Requests waiting in the mailbox."""
        return self._mailbox.qsize() if self._mailbox else 0

    # ── Lifecycle ───────────────────────────────────────────────

    async def start(self) -> None:
        """Start the coordinator loop, first letting an in-flight stop finish draining."""
        if self._running:
            return
        if self._draining is not None:
            await self._draining
            self._draining = None
            if self._running:
                return
        self._mailbox = asyncio.Queue(maxsize=self._maxsize)
        self._running = True
        self._task = asyncio.create_task(self._loop(self._mailbox))
        logger.info(
            "Coordinator started (retention=%dus, mailbox=%s)",
            self._retention, self._maxsize or "unbounded",
        )

    async def stop(self) -> None:
        """Stop accepting requests, apply everything already queued, then exit."""
        if not self._running:
            return
        self._running = False
        # Only this stop owns the old loop; a later start may install a new one
        task, self._task = self._task, None
        self._draining = task
        await self._mailbox.put(_STOP)
        await task
        if self._draining is task:
            self._draining = None
        logger.info(
            "Coordinator stopped (%d counters, %d series, %d dropped)",
            len(self._counters), len(self._series), self._dropped,
        )

    async def _loop(self, mailbox: asyncio.Queue) -> None:
        """Internal mailbox loop, bound to the mailbox it was started with."""
        while True:
            request = await mailbox.get()
            if request is _STOP:
                break
            self._handle(request)

    def _handle(self, request: Request) -> None:
        try:
            result = self._handlers[request.op](*request.args)
        except Exception as exc:
            if request.reply is None:
                logger.error(
                    "Coordinator error handling %s: %s", request.op, exc,
                    extra={"request": request.op},
                )
            elif not request.reply.done():
                request.reply.set_exception(exc)
            return
        # A cancelled caller no longer waits for its reply
        if request.reply is not None and not request.reply.done():
            request.reply.set_result(result)

    # ── Client side ─────────────────────────────────────────────

    async def call(self, op: str, *args: Any) -> Any:
        """Enqueue a request and wait for its result."""
        if not self._running:
            raise StoreNotRunningError(op)
        reply = asyncio.get_running_loop().create_future()
        await self._mailbox.put(Request(op=op, args=args, reply=reply))
        return await reply

    def cast(self, op: str, *args: Any) -> bool:
        """
        Enqueue a request without waiting for it to be applied.

        Returns False if the request was dropped because the mailbox is full.
        """
        if not self._running:
            raise StoreNotRunningError(op)
        try:
            self._mailbox.put_nowait(Request(op=op, args=args))
        except asyncio.QueueFull:
            self._dropped += 1
            logger.warning(
                "Mailbox full (%d pending), dropped %s", self._maxsize, op,
                extra={"request": op},
            )
            return False
        return True

    # ── Handlers (run inside the coordinator task only) ─────────

    def _counter_all(self) -> Dict[str, int]:
        return self._counters.all()

    def _series_all(self) -> Dict[str, List[Sample]]:
        return {name: window.to_list() for name, window in self._series.items()}

    def _series_get(self, name: str) -> Optional[List[Sample]]:
        window = self._series.get(name)
        if window is None:
            return None
        return window.to_list()

    def _series_sample(self, name: str, value: Any) -> None:
        now = self._clock()
        entry = Sample(now, value)
        window = self._series.get(name)
        if window is None:
            self._series[name] = SlidingWindow.timed(self._retention, entry, now)
            logger.debug("Created time series %s", name, extra={"series": name})
        else:
            window.add(entry, now)

    def _series_clear(self, name: Optional[str] = None) -> None:
        if name is None:
            self._series.clear()
        else:
            self._series.pop(name, None)
