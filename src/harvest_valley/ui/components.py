"""Presentation helpers for the farm UI.

Pure functions that turn plots, tools and resources into the labels and
hints the Streamlit page renders. Kept free of Streamlit calls so they can
be used from any front end.
"""

from __future__ import annotations

from harvest_valley.models.crops import CROPS, get_crop
from harvest_valley.models.enums import ToolType
from harvest_valley.models.plot import EmptyPlot, PlantedPlot, Plot, TilledPlot


TOOL_ICONS: dict[ToolType, str] = {
    ToolType.HOE: "⛏️",
    ToolType.WATERING_CAN: "🚿",
    ToolType.BASKET: "🧺",
}


def tool_label(tool: ToolType) -> str:
    """Button label of a tool; seeds show their price."""
    crop = get_crop(tool)
    if crop is not None:
        return f"{crop.seed_emoji} {crop.name} ({crop.seed_cost}g)"
    return f"{TOOL_ICONS.get(tool, '')} {tool.label}".strip()


def seed_tooltip(seed: ToolType) -> str:
    """Hover text of a seed button: price, growth time and profit."""
    crop = get_crop(seed)
    if crop is None:
        return ""
    return (
        f"Sells for {crop.sell_price}g after {crop.growth_days} watered nights "
        f"(+{crop.profit}g profit)"
    )


def plot_glyph(plot: Plot) -> str:
    """Single glyph summarising a plot's state."""
    if isinstance(plot, EmptyPlot):
        return "🟫"
    if isinstance(plot, TilledPlot):
        return "💧" if plot.is_watered else "🟤"
    if plot.is_withered:
        return "🥀"
    if plot.is_mature:
        return plot.crop.emoji
    return "🌱" if plot.growth_stage > 0 else plot.crop.seed_emoji


def plot_label(plot: Plot) -> str:
    """Button label of a plot, with a watered marker on planted crops."""
    glyph = plot_glyph(plot)
    if isinstance(plot, PlantedPlot) and plot.is_watered:
        return f"{glyph}💧"
    return glyph


def plot_tooltip(plot: Plot) -> str:
    """Hover text describing a plot."""
    if isinstance(plot, EmptyPlot):
        return "Untilled ground"
    if isinstance(plot, TilledPlot):
        return "Tilled soil (watered)" if plot.is_watered else "Tilled soil"
    crop = plot.crop
    if plot.is_withered:
        return f"Withered {crop.name}"
    if plot.is_mature:
        return f"{crop.name} ready to harvest"
    watered = ", watered" if plot.is_watered else ""
    return f"{crop.name} {plot.growth_stage}/{crop.growth_days}{watered}"


def energy_warning(energy: int, max_energy: int) -> bool:
    """Whether the energy gauge should be highlighted as low."""
    return energy < max(1, max_energy // 5)


def seed_tools() -> list[ToolType]:
    return list(CROPS)


__all__ = [
    "TOOL_ICONS",
    "tool_label",
    "seed_tooltip",
    "plot_glyph",
    "plot_label",
    "plot_tooltip",
    "energy_warning",
    "seed_tools",
]
