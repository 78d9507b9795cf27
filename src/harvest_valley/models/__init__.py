"""Farm data models.

Exports:
    Enums: ToolType, PlotStatus, Weather
    Crops: CropConfig, CROPS, get_crop
    Plots: EmptyPlot, TilledPlot, PlantedPlot, Plot
    Grid: FarmGrid
    Resources: ResourceLedger
    Events: DailyEvent, WELCOME_EVENT, MISSING_KEY_EVENT, FALLBACK_EVENT
"""

from __future__ import annotations

from harvest_valley.models.crops import CROPS, CropConfig, get_crop
from harvest_valley.models.enums import PlotStatus, ToolType, Weather
from harvest_valley.models.events import (
    FALLBACK_EVENT,
    MISSING_KEY_EVENT,
    WELCOME_EVENT,
    DailyEvent,
)
from harvest_valley.models.grid import FarmGrid
from harvest_valley.models.ledger import ResourceLedger
from harvest_valley.models.plot import EmptyPlot, PlantedPlot, Plot, PlotId, TilledPlot


__all__ = [
    # Enums
    "ToolType",
    "PlotStatus",
    "Weather",
    # Crops
    "CropConfig",
    "CROPS",
    "get_crop",
    # Plots
    "PlotId",
    "EmptyPlot",
    "TilledPlot",
    "PlantedPlot",
    "Plot",
    # Grid & resources
    "FarmGrid",
    "ResourceLedger",
    # Events
    "DailyEvent",
    "WELCOME_EVENT",
    "MISSING_KEY_EVENT",
    "FALLBACK_EVENT",
]
