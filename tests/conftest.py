"""Pytest configuration and shared fixtures.

Provides environment isolation for settings, deterministic random sources
for the night pass, and stub narrators for the day advance.
"""

from __future__ import annotations

import asyncio
import os
import random
from typing import TYPE_CHECKING

import pytest

from harvest_valley.core.config import FarmSettings
from harvest_valley.engine.session import FarmSession
from harvest_valley.models import DailyEvent, Weather


if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


# =============================================================================
# Test Doubles
# =============================================================================


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return self.value


class StubNarrator:
    """Narrator returning a fixed event and recording its calls."""

    def __init__(self, event: DailyEvent) -> None:
        self.event = event
        self.calls: list[tuple[int, int]] = []

    async def generate(self, day: int, money: int) -> DailyEvent:
        self.calls.append((day, money))
        return self.event


class BlockingNarrator(StubNarrator):
    """Narrator that waits until ``release`` is set before answering."""

    def __init__(self, event: DailyEvent) -> None:
        super().__init__(event)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def generate(self, day: int, money: int) -> DailyEvent:
        self.calls.append((day, money))
        self.started.set()
        await self.release.wait()
        return self.event


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Run each test without ambient HARVEST_VALLEY_ variables or .env files."""
    from harvest_valley.core.config import clear_settings_cache

    for key in list(os.environ):
        if key.startswith("HARVEST_VALLEY_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def farm_settings() -> FarmSettings:
    """Default farm settings."""
    return FarmSettings()


# =============================================================================
# Random Sources
# =============================================================================


@pytest.fixture
def no_decay_rng() -> FixedRandom:
    """Random source under which tilled soil never decays."""
    return FixedRandom(0.99)


@pytest.fixture
def always_decay_rng() -> FixedRandom:
    """Random source under which tilled soil always decays."""
    return FixedRandom(0.0)


# =============================================================================
# Narrators
# =============================================================================


@pytest.fixture
def sunny_event() -> DailyEvent:
    return DailyEvent(weather=Weather.SUNNY, message="Clear skies over the valley.")


@pytest.fixture
def rainy_event() -> DailyEvent:
    return DailyEvent(weather=Weather.RAINY, message="A soft rain falls on the fields.")


@pytest.fixture
def sunny_narrator(sunny_event: DailyEvent) -> StubNarrator:
    return StubNarrator(sunny_event)


@pytest.fixture
def rainy_narrator(rainy_event: DailyEvent) -> StubNarrator:
    return StubNarrator(rainy_event)


@pytest.fixture
def blocking_narrator(sunny_event: DailyEvent) -> BlockingNarrator:
    return BlockingNarrator(sunny_event)


@pytest.fixture
def rainy_blocking_narrator(rainy_event: DailyEvent) -> BlockingNarrator:
    return BlockingNarrator(rainy_event)


# =============================================================================
# Sessions
# =============================================================================


@pytest.fixture
def session(
    sunny_narrator: StubNarrator,
    farm_settings: FarmSettings,
    no_decay_rng: FixedRandom,
) -> FarmSession:
    """Fresh session with a sunny narrator and no soil decay."""
    return FarmSession(
        narrator=sunny_narrator,
        settings=farm_settings,
        rng=no_decay_rng,
    )
