"""Farm simulation engine.

Exports:
    ActionResolver, ActionOutcome, ActionKind: tool actions.
    DayAdvanceEngine, NightReport, apply_weather: overnight pass and rain.
    FarmSession, FarmSnapshot: session orchestration.
"""

from __future__ import annotations

from harvest_valley.engine.actions import (
    ActionKind,
    ActionOutcome,
    ActionResolver,
)
from harvest_valley.engine.day_cycle import DayAdvanceEngine, NightReport, apply_weather
from harvest_valley.engine.session import FarmSession, FarmSnapshot


__all__ = [
    "ActionKind",
    "ActionOutcome",
    "ActionResolver",
    "DayAdvanceEngine",
    "NightReport",
    "apply_weather",
    "FarmSession",
    "FarmSnapshot",
]
