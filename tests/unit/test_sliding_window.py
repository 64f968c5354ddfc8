# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.
"""Unit tests for SlidingWindow."""

from beaker_store.memory.sliding_window import Sample, SlidingWindow

MINUTE = 60 * 1_000_000
NOW = 1_700_000_000_000_000


class TestSample:
    def test_equals_plain_tuple(self):
        assert Sample(5, 10) == (5, 10)
        assert Sample(5, 10).value == 10


class TestSlidingWindow:
    def test_timed_holds_first_sample(self):
        window = SlidingWindow.timed(5 * MINUTE, Sample(NOW, 1), NOW)
        assert window.to_list() == [(NOW, 1)]
        assert window.retention == 5 * MINUTE

    def test_timed_with_stale_sample_is_empty(self):
        stale = Sample(NOW - 6 * MINUTE, 1)
        window = SlidingWindow.timed(5 * MINUTE, stale, NOW)
        assert len(window) == 0
        assert window.to_list() == []
        assert window.newest is None

    def test_sample_exactly_at_cutoff_is_kept(self):
        edge = Sample(NOW - 5 * MINUTE, 1)
        window = SlidingWindow.timed(5 * MINUTE, edge, NOW)
        assert window.to_list() == [edge]

    def test_add_is_newest_first(self):
        window = SlidingWindow.timed(5 * MINUTE, Sample(NOW, "a"), NOW)
        window.add(Sample(NOW + 1, "b"), NOW + 1)
        window.add(Sample(NOW + 2, "c"), NOW + 2)
        assert [s.value for s in window.to_list()] == ["c", "b", "a"]
        assert window.newest == (NOW + 2, "c")

    def test_add_evicts_expired_samples(self):
        window = SlidingWindow.timed(5 * MINUTE, Sample(NOW, "old"), NOW)
        window.add(Sample(NOW + 2 * MINUTE, "mid"), NOW + 2 * MINUTE)
        later = NOW + 6 * MINUTE
        window.add(Sample(later, "new"), later)
        assert window.to_list() == [(later, "new"), (NOW + 2 * MINUTE, "mid")]

    def test_idle_window_keeps_stale_samples_until_next_add(self):
        window = SlidingWindow.timed(5 * MINUTE, Sample(NOW, 1), NOW)
        # No sweep happens without a write
        assert window.to_list() == [(NOW, 1)]
        much_later = NOW + 60 * MINUTE
        window.add(Sample(much_later, 2), much_later)
        assert window.to_list() == [(much_later, 2)]

    def test_add_returns_same_window(self):
        window = SlidingWindow(MINUTE)
        assert window.add(Sample(NOW, 1), NOW) is window

    def test_to_list_is_a_copy(self):
        window = SlidingWindow.timed(MINUTE, Sample(NOW, 1), NOW)
        exported = window.to_list()
        exported.clear()
        assert len(window) == 1

    def test_length_bounded_by_rate_times_retention(self):
        window = SlidingWindow(MINUTE)
        # One sample per second for ten minutes
        for i in range(600):
            ts = NOW + i * 1_000_000
            window.add(Sample(ts, i), ts)
        assert len(window) == 61
        timestamps = [s.timestamp for s in window.to_list()]
        assert timestamps == sorted(timestamps, reverse=True)
