"""Enumeration types for Harvest Valley.

Tools the player can hold, the three plot statuses, and the weather of the
morning report.
"""

from __future__ import annotations

from enum import StrEnum


class ToolType(StrEnum):
    """A tool the player can select.

    The hoe, watering can and basket are permanent tools; each seed packet
    is its own tool and plants the matching crop.
    """

    HOE = "HOE"
    WATERING_CAN = "WATERING_CAN"
    BASKET = "BASKET"
    SEED_CARROT = "SEED_CARROT"
    SEED_CORN = "SEED_CORN"
    SEED_PUMPKIN = "SEED_PUMPKIN"

    @property
    def is_seed(self) -> bool:
        """Whether selecting this tool plants a crop."""
        return self.value.startswith("SEED_")

    @property
    def label(self) -> str:
        """Short display label (e.g., 'Watering Can')."""
        return self.value.removeprefix("SEED_").replace("_", " ").title()


class PlotStatus(StrEnum):
    """Farming state of a single plot."""

    EMPTY = "EMPTY"
    TILLED = "TILLED"
    PLANTED = "PLANTED"


class Weather(StrEnum):
    """Weather reported in the morning report."""

    SUNNY = "Sunny"
    RAINY = "Rainy"
    CLOUDY = "Cloudy"

    @property
    def icon(self) -> str:
        """Emoji used by the UI for this weather."""
        return {
            Weather.SUNNY: "☀️",
            Weather.RAINY: "🌧️",
            Weather.CLOUDY: "☁️",
        }[self]


__all__ = [
    "ToolType",
    "PlotStatus",
    "Weather",
]
