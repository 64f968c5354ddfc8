# Copyright (c) 2026 Beaker Store Contributors. All Rights Reserved.

"""
Shared test fixtures for all Beaker Store tests.
"""

import pytest

from beaker_store.core.config import BeakerSettings

START_US = 1_700_000_000_000_000


class FakeClock:
    """Manually driven epoch-microsecond clock."""

    def __init__(self, start: int = START_US) -> None:
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += int(seconds * 1_000_000)

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def test_settings() -> BeakerSettings:
    """Default settings, isolated from any local .env file."""
    return BeakerSettings(_env_file=None)
