"""Overnight day-advance and the weather rule.

The night pass runs in a fixed order:

1. Planted plots: watered crops grow one stage; every crop dries out.
2. Tilled plots: unplanted soil reverts to empty with a fixed chance,
   drawn independently per plot; surviving soil dries out.
3. The day counter advances.
4. Energy is restored. Water is not.

Crops never wither on their own: nothing in the night pass marks a crop as
withered, so withered plots only come from outside the night pass.

The weather rule is separate because it reacts to every new morning report,
including the welcome report of a fresh session: rain waters every tilled
or planted plot and refills the watering can.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from harvest_valley.core.constants import SOIL_DECAY_CHANCE
from harvest_valley.core.logging import get_logger
from harvest_valley.models.events import DailyEvent
from harvest_valley.models.grid import FarmGrid
from harvest_valley.models.ledger import ResourceLedger
from harvest_valley.models.plot import PlantedPlot, TilledPlot


logger = get_logger(__name__)


@dataclass(frozen=True)
class NightReport:
    """Summary of one night pass.

    Attributes:
        day: The day that has just begun.
        grown: Ids of crops that grew a stage.
        decayed: Ids of tilled plots that reverted to empty.
    """

    day: int
    grown: tuple[int, ...] = ()
    decayed: tuple[int, ...] = ()


class DayAdvanceEngine:
    """Applies the overnight transition to a grid and ledger.

    Attributes:
        soil_decay_chance: Probability that unplanted tilled soil reverts.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        soil_decay_chance: float = SOIL_DECAY_CHANCE,
    ) -> None:
        """Initialize the engine.

        Args:
            rng: Random source for soil decay. Pass a seeded instance for
                reproducible nights.
            soil_decay_chance: Probability in [0, 1] of soil reverting.
        """
        self._rng = rng or random.Random()
        self.soil_decay_chance = soil_decay_chance

    def run_night(self, grid: FarmGrid, ledger: ResourceLedger) -> NightReport:
        """Run the synchronous part of the day advance.

        Args:
            grid: Farm grid, updated in place.
            ledger: Resource ledger, updated in place.

        Returns:
            What happened overnight.
        """
        grown: list[int] = []
        decayed: list[int] = []

        for plot in grid.snapshot():
            if isinstance(plot, PlantedPlot):
                successor = plot.grow_overnight()
                if successor.growth_stage > plot.growth_stage:
                    grown.append(plot.id)
                grid.replace(successor)
            elif isinstance(plot, TilledPlot):
                if self._rng.random() < self.soil_decay_chance:
                    grid.replace(plot.decay())
                    decayed.append(plot.id)
                else:
                    grid.replace(plot.dry())

        day = ledger.advance_day()
        ledger.reset_energy_for_new_day()

        logger.info(
            "Night processed",
            day=day,
            grown=len(grown),
            decayed=len(decayed),
        )
        return NightReport(day=day, grown=tuple(grown), decayed=tuple(decayed))


def apply_weather(event: DailyEvent, grid: FarmGrid, ledger: ResourceLedger) -> bool:
    """Apply the side effects of a morning report's weather.

    Rain waters every tilled and living planted plot and fills the can.

    Returns:
        True if the weather changed anything.
    """
    if not event.is_rainy:
        return False

    for plot in grid.snapshot():
        if isinstance(plot, (TilledPlot, PlantedPlot)) and plot.can_be_watered:
            grid.replace(plot.water())
    ledger.refill()

    logger.info("Rain watered the farm", day=ledger.day)
    return True


__all__ = [
    "NightReport",
    "DayAdvanceEngine",
    "apply_weather",
]
