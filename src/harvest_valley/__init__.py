"""Harvest Valley - a cozy single-screen farming simulation.

Till, plant, water and harvest crops on a 5x5 farm, one day at a time,
with an LLM narrator writing each morning's weather report.
"""

from __future__ import annotations

from harvest_valley.engine import ActionOutcome, FarmSession, FarmSnapshot
from harvest_valley.models import DailyEvent, PlotStatus, ToolType, Weather


__version__ = "0.1.0"

__all__ = [
    "__version__",
    "FarmSession",
    "FarmSnapshot",
    "ActionOutcome",
    "DailyEvent",
    "PlotStatus",
    "ToolType",
    "Weather",
]
