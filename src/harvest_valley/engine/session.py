"""Farm session orchestration.

FarmSession owns all state of one game: the grid, the resource ledger, the
selected tool, the current morning report, the sleeping flag and the toast
notification. Player input enters through four methods (``select_tool``,
``click_plot``, ``refill_water`` and ``end_day``) and state leaves only as
immutable FarmSnapshot values.

``end_day`` is single-flight. While the narrator call is outstanding the
session is sleeping: plot clicks, refills, resets and a second ``end_day``
are refused until the report arrives. The flag is cleared in a ``finally``
block. A narrator that raises anyway is replaced by the fallback report,
so a day advance always completes.
"""

from __future__ import annotations

import random
import time
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from harvest_valley.core.config import FarmSettings, get_settings
from harvest_valley.core.constants import NOTIFICATION_SECONDS
from harvest_valley.core.logging import bind_context, get_logger
from harvest_valley.engine.actions import ActionOutcome, ActionResolver
from harvest_valley.engine.day_cycle import DayAdvanceEngine, NightReport, apply_weather
from harvest_valley.models.enums import ToolType
from harvest_valley.models.events import FALLBACK_EVENT, WELCOME_EVENT, DailyEvent
from harvest_valley.models.grid import FarmGrid
from harvest_valley.models.ledger import ResourceLedger
from harvest_valley.models.plot import Plot
from harvest_valley.narrative.generator import LLMNarrativeGenerator, NarrativeGenerator


logger = get_logger(__name__)


REFILLED = "Watering can refilled! 💧"
RAINING = "It's raining! Crops watered."


class FarmSnapshot(BaseModel):
    """Read-only view of a session for the presentation layer.

    Attributes:
        plots: Every plot, in id order.
        money: Coins on hand.
        day: Current day.
        energy: Remaining energy.
        max_energy: Energy restored each morning.
        water_level: Water in the can.
        max_water: Can capacity.
        selected_tool: Tool in hand, if any.
        daily_event: Current morning report.
        is_sleeping: Whether a day advance is in progress.
        notification: Visible toast text, if any.
    """

    model_config = ConfigDict(frozen=True)

    plots: tuple[Plot, ...] = Field(description="Plots in id order")
    money: int
    day: int
    energy: int
    max_energy: int
    water_level: int
    max_water: int
    selected_tool: ToolType | None = None
    daily_event: DailyEvent | None = None
    is_sleeping: bool = False
    notification: str | None = None


class FarmSession:
    """One player's farm, from the first morning until the process ends.

    Attributes:
        last_night: Report of the most recent night, if any has passed.
    """

    def __init__(
        self,
        *,
        narrator: NarrativeGenerator | None = None,
        settings: FarmSettings | None = None,
        rng: random.Random | None = None,
        grid: FarmGrid | None = None,
        ledger: ResourceLedger | None = None,
        welcome_event: DailyEvent = WELCOME_EVENT,
        notification_seconds: float = NOTIFICATION_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Start a session.

        Args:
            narrator: Morning report writer; defaults to the LLM narrator.
            settings: Farm economy settings; defaults to application settings.
            rng: Random source for overnight soil decay.
            grid: Existing grid to play on instead of a fresh one.
            ledger: Existing ledger instead of a fresh one.
            welcome_event: Report shown before the first night.
            notification_seconds: How long toasts stay visible.
            clock: Monotonic time source for toast expiry.
        """
        self._settings = settings or get_settings().farm
        self._narrator = narrator or LLMNarrativeGenerator()
        self._rng = rng or random.Random(self._settings.random_seed)
        self._welcome_event = welcome_event
        self._notification_seconds = notification_seconds
        self._clock = clock

        self._engine = DayAdvanceEngine(
            rng=self._rng,
            soil_decay_chance=self._settings.soil_decay_chance,
        )
        self._selected_tool: ToolType | None = None
        self._is_sleeping = False
        self._notification: tuple[str, float] | None = None
        self._daily_event: DailyEvent | None = None
        self.last_night: NightReport | None = None

        self._grid = grid if grid is not None else FarmGrid.create()
        self._ledger = ledger if ledger is not None else self._new_ledger()
        self._resolver = ActionResolver(self._grid, self._ledger)
        self._set_daily_event(welcome_event)

        logger.info(
            "Farm session started",
            plots=len(self._grid),
            money=self._ledger.money,
        )

    def _new_ledger(self) -> ResourceLedger:
        return ResourceLedger.start(
            initial_money=self._settings.initial_money,
            max_energy=self._settings.max_energy,
            max_water=self._settings.max_water_capacity,
        )

    # -------------------------------------------------------------------------
    # Observable state
    # -------------------------------------------------------------------------

    @property
    def is_sleeping(self) -> bool:
        return self._is_sleeping

    @property
    def selected_tool(self) -> ToolType | None:
        return self._selected_tool

    @property
    def daily_event(self) -> DailyEvent | None:
        return self._daily_event

    @property
    def notification(self) -> str | None:
        """Current toast text, or None once it has expired."""
        if self._notification is None:
            return None
        message, shown_at = self._notification
        if self._clock() - shown_at >= self._notification_seconds:
            self._notification = None
            return None
        return message

    @property
    def state(self) -> FarmSnapshot:
        """Immutable snapshot of everything the UI renders."""
        return FarmSnapshot(
            plots=self._grid.snapshot(),
            money=self._ledger.money,
            day=self._ledger.day,
            energy=self._ledger.energy,
            max_energy=self._ledger.max_energy,
            water_level=self._ledger.water_level,
            max_water=self._ledger.max_water,
            selected_tool=self._selected_tool,
            daily_event=self._daily_event,
            is_sleeping=self._is_sleeping,
            notification=self.notification,
        )

    def plot(self, plot_id: int) -> Plot:
        """Look up one plot.

        Raises:
            PlotNotFoundError: If the id is outside the grid.
        """
        return self._grid.get(plot_id)

    def notify(self, message: str) -> None:
        """Show a toast for the configured duration."""
        self._notification = (message, self._clock())

    # -------------------------------------------------------------------------
    # Player input
    # -------------------------------------------------------------------------

    def select_tool(self, tool: ToolType | str | None) -> bool:
        """Put a tool in the player's hand.

        Args:
            tool: Tool, tool id string, or None to empty the hand.

        Returns:
            False if ``tool`` names no known tool; the selection is then kept.
        """
        if tool is not None and not isinstance(tool, ToolType):
            try:
                tool = ToolType(tool)
            except ValueError:
                logger.warning("Unknown tool selected", tool=tool)
                return False
        self._selected_tool = tool
        return True

    def click_plot(self, plot_id: int) -> ActionOutcome:
        """Use the selected tool on a plot."""
        if self._is_sleeping:
            return ActionOutcome(success=False)

        outcome = self._resolver.apply_tool(self._selected_tool, plot_id)
        if outcome.reason:
            self.notify(outcome.reason)
        return outcome

    def refill_water(self) -> bool:
        """Fill the watering can at the well."""
        if self._is_sleeping:
            return False
        self._ledger.refill()
        self.notify(REFILLED)
        return True

    async def end_day(self) -> DailyEvent | None:
        """Sleep through the night and fetch the next morning report.

        Returns:
            The new morning report, or None if a day advance was already in
            progress.
        """
        if self._is_sleeping:
            logger.debug("End day ignored, already sleeping")
            return None

        self._is_sleeping = True
        try:
            self.last_night = self._engine.run_night(self._grid, self._ledger)
            bind_context(farm_day=self._ledger.day)
            try:
                event = await self._narrator.generate(self._ledger.day, self._ledger.money)
            except Exception:
                logger.exception("Narrator failed", day=self._ledger.day)
                event = FALLBACK_EVENT
            self._set_daily_event(event)
            return event
        finally:
            self._is_sleeping = False

    def reset(self) -> bool:
        """Start over on a fresh farm.

        Returns:
            False while a day advance is in progress; nothing is reset then.
        """
        if self._is_sleeping:
            logger.debug("Reset ignored, already sleeping")
            return False

        self._grid = FarmGrid.create(self._grid.size, width=self._grid.width)
        self._ledger = self._new_ledger()
        self._resolver = ActionResolver(self._grid, self._ledger)
        self._selected_tool = None
        self._notification = None
        self.last_night = None
        self._set_daily_event(self._welcome_event)
        logger.info("Farm session reset")
        return True

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _set_daily_event(self, event: DailyEvent) -> None:
        self._daily_event = event
        if apply_weather(event, self._grid, self._ledger):
            self.notify(RAINING)


__all__ = [
    "FarmSnapshot",
    "FarmSession",
    "REFILLED",
    "RAINING",
]
