"""Game-wide constants for Harvest Valley.

Rule constants for the farm grid, the resource economy and tool energy
costs. Values that players may want to tune per session (starting money,
capacities, soil decay) are exposed again through FarmSettings with these as
defaults.
"""

from __future__ import annotations

# =============================================================================
# Grid Layout
# =============================================================================

GRID_SIZE = 25
"""Number of plots on the farm."""

GRID_WIDTH = 5
"""Plots per row. Rows are addressed row-major: row = id // 5."""

# =============================================================================
# Resources
# =============================================================================

MAX_ENERGY = 50
"""Energy restored every morning."""

MAX_WATER_CAPACITY = 12
"""Watering can capacity, restored by the well or by rain."""

INITIAL_MONEY = 100
"""Coins the player starts with."""

# =============================================================================
# Energy Costs
# =============================================================================

TILL_COST = 2
WATER_COST = 2
PLANT_COST = 1
HARVEST_COST = 3

CLEAR_COST = 1
"""Flat cost of removing a withered crop."""

# =============================================================================
# Overnight Rules
# =============================================================================

SOIL_DECAY_CHANCE = 0.3
"""Probability that an unplanted tilled plot reverts to empty overnight."""

# =============================================================================
# Presentation
# =============================================================================

NOTIFICATION_SECONDS = 2.0
"""How long a toast notification stays visible."""


__all__ = [
    "GRID_SIZE",
    "GRID_WIDTH",
    "MAX_ENERGY",
    "MAX_WATER_CAPACITY",
    "INITIAL_MONEY",
    "TILL_COST",
    "WATER_COST",
    "PLANT_COST",
    "HARVEST_COST",
    "CLEAR_COST",
    "SOIL_DECAY_CHANCE",
    "NOTIFICATION_SECONDS",
]
