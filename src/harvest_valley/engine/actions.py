"""Tool action resolution.

The ActionResolver applies the selected tool to a target plot. Each handler
validates its preconditions against the grid and ledger as they are at call
time and returns a pending change set; the resolver commits that change set
in one step, so an action either takes full effect or none at all.

Invalid actions never raise. They come back as an unsuccessful
ActionOutcome, with a reason when the player should be told why.

Tools:
    HOE: Till an empty plot.
    SEED_*: Plant a seed on tilled soil, paying its seed cost.
    WATERING_CAN: Water the target and its same-row neighbours.
    BASKET: Sell a mature crop or clear a withered one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from harvest_valley.core.constants import (
    CLEAR_COST,
    HARVEST_COST,
    PLANT_COST,
    TILL_COST,
    WATER_COST,
)
from harvest_valley.core.logging import get_logger
from harvest_valley.models.crops import get_crop
from harvest_valley.models.enums import ToolType
from harvest_valley.models.grid import FarmGrid
from harvest_valley.models.ledger import ResourceLedger
from harvest_valley.models.plot import EmptyPlot, PlantedPlot, Plot, TilledPlot


logger = get_logger(__name__)


TOO_TIRED = "Too tired! Need to sleep."
NOT_ENOUGH_MONEY = "Not enough money!"
CAN_EMPTY = "Watering can is empty! Refill at the well."
CLEARED_DEAD_CROP = "Cleared dead crop."


class ActionKind(StrEnum):
    """What an action ended up doing."""

    TILL = "till"
    PLANT = "plant"
    WATER = "water"
    HARVEST = "harvest"
    CLEAR = "clear"
    NONE = "none"
    """Nothing happened."""


@dataclass(frozen=True)
class ActionOutcome:
    """Result of applying a tool to a plot.

    Attributes:
        success: Whether the action changed the farm.
        kind: What the action did.
        reason: Message for the player, if any.
        energy_spent: Energy deducted.
        money_delta: Coins gained (positive) or spent (negative).
        water_used: Water units taken from the can.
        affected_plots: Ids of plots whose state changed.
    """

    success: bool
    kind: ActionKind = ActionKind.NONE
    reason: str | None = None
    energy_spent: int = 0
    money_delta: int = 0
    water_used: int = 0
    affected_plots: tuple[int, ...] = ()


@dataclass
class _ChangeSet:
    """Pending mutations of one action, committed all at once."""

    kind: ActionKind
    plots: list[Plot] = field(default_factory=list)
    energy_cost: int = 0
    money_delta: int = 0
    water_used: int = 0
    reason: str | None = None


def _rejected(reason: str | None = None) -> ActionOutcome:
    return ActionOutcome(success=False, reason=reason)


class ActionResolver:
    """Applies tools to plots on one grid and ledger."""

    def __init__(self, grid: FarmGrid, ledger: ResourceLedger) -> None:
        self._grid = grid
        self._ledger = ledger

    def apply_tool(self, tool: ToolType | None, plot_id: int) -> ActionOutcome:
        """Apply ``tool`` to the plot ``plot_id``.

        Args:
            tool: The selected tool, or None when nothing is selected.
            plot_id: Target plot id.

        Returns:
            The outcome. Unsuccessful outcomes leave every counter and plot
            untouched.
        """
        if tool is None or not self._grid.contains(plot_id):
            return _rejected()

        if not self._ledger.has_energy:
            return _rejected(TOO_TIRED)

        plot = self._grid.get(plot_id)

        if tool == ToolType.HOE:
            result = self._till(plot)
        elif tool == ToolType.WATERING_CAN:
            result = self._water(plot_id)
        elif tool == ToolType.BASKET:
            result = self._harvest(plot)
        elif tool.is_seed:
            result = self._plant(plot, tool)
        else:
            result = None

        if isinstance(result, _ChangeSet):
            return self._commit(result)
        return result or _rejected()

    # -------------------------------------------------------------------------
    # Tool handlers
    # -------------------------------------------------------------------------

    def _till(self, plot: Plot) -> _ChangeSet | None:
        if not isinstance(plot, EmptyPlot):
            return None
        return _ChangeSet(
            kind=ActionKind.TILL,
            plots=[plot.till()],
            energy_cost=TILL_COST,
        )

    def _plant(self, plot: Plot, seed: ToolType) -> _ChangeSet | ActionOutcome | None:
        crop = get_crop(seed)
        if crop is None or not isinstance(plot, TilledPlot):
            return None
        if not self._ledger.can_afford(crop.seed_cost):
            return _rejected(NOT_ENOUGH_MONEY)
        return _ChangeSet(
            kind=ActionKind.PLANT,
            plots=[plot.plant(seed)],
            energy_cost=PLANT_COST,
            money_delta=-crop.seed_cost,
        )

    def _water(self, plot_id: int) -> _ChangeSet | ActionOutcome | None:
        if not self._ledger.has_water:
            return _rejected(CAN_EMPTY)

        budget = self._ledger.water_level
        watered: list[Plot] = []
        for target_id in self._grid.watering_targets(plot_id):
            if budget - len(watered) <= 0:
                break
            target = self._grid.get(target_id)
            if isinstance(target, (TilledPlot, PlantedPlot)) and target.can_be_watered:
                watered.append(target.water())

        if not watered:
            return None
        return _ChangeSet(
            kind=ActionKind.WATER,
            plots=watered,
            energy_cost=WATER_COST,
            water_used=len(watered),
        )

    def _harvest(self, plot: Plot) -> _ChangeSet | None:
        if not isinstance(plot, PlantedPlot):
            return None

        if plot.is_withered:
            return _ChangeSet(
                kind=ActionKind.CLEAR,
                plots=[plot.clear()],
                energy_cost=CLEAR_COST,
                reason=CLEARED_DEAD_CROP,
            )

        if plot.is_mature:
            crop = plot.crop
            return _ChangeSet(
                kind=ActionKind.HARVEST,
                plots=[plot.clear()],
                energy_cost=HARVEST_COST,
                money_delta=crop.sell_price,
                reason=f"Sold {crop.name} for {crop.sell_price}!",
            )

        return None

    # -------------------------------------------------------------------------
    # Commit
    # -------------------------------------------------------------------------

    def _commit(self, changes: _ChangeSet) -> ActionOutcome:
        for plot in changes.plots:
            self._grid.replace(plot)

        if changes.money_delta >= 0:
            self._ledger.earn_money(changes.money_delta)
        else:
            self._ledger.spend_money(-changes.money_delta)
        self._ledger.consume_water(changes.water_used)
        self._ledger.spend_energy(changes.energy_cost)

        affected = tuple(p.id for p in changes.plots)
        logger.debug(
            "Action applied",
            kind=changes.kind,
            plots=affected,
            energy=self._ledger.energy,
            money=self._ledger.money,
            water=self._ledger.water_level,
        )

        return ActionOutcome(
            success=True,
            kind=changes.kind,
            reason=changes.reason,
            energy_spent=changes.energy_cost,
            money_delta=changes.money_delta,
            water_used=changes.water_used,
            affected_plots=affected,
        )


__all__ = [
    "ActionKind",
    "ActionOutcome",
    "ActionResolver",
    "TOO_TIRED",
    "NOT_ENOUGH_MONEY",
    "CAN_EMPTY",
    "CLEARED_DEAD_CROP",
]
