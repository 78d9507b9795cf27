"""Tests for the farm session."""

from __future__ import annotations

import asyncio

import pytest
from pydantic import ValidationError as PydanticValidationError

from harvest_valley.core.config import FarmSettings
from harvest_valley.core.exceptions import PlotNotFoundError
from harvest_valley.engine.actions import TOO_TIRED
from harvest_valley.engine.session import RAINING, REFILLED, FarmSession
from harvest_valley.models import (
    FALLBACK_EVENT,
    MISSING_KEY_EVENT,
    WELCOME_EVENT,
    DailyEvent,
    EmptyPlot,
    FarmGrid,
    PlantedPlot,
    TilledPlot,
    ToolType,
)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class FailingNarrator:
    async def generate(self, day: int, money: int) -> DailyEvent:
        raise RuntimeError("narrator exploded")


class TestSessionStart:
    """Tests for a fresh session."""

    def test_initial_state(self, session: FarmSession) -> None:
        state = session.state

        assert len(state.plots) == 25
        assert all(isinstance(p, EmptyPlot) for p in state.plots)
        assert (state.money, state.day, state.energy, state.water_level) == (100, 1, 50, 12)
        assert state.selected_tool is None
        assert state.daily_event == WELCOME_EVENT
        assert state.is_sleeping is False
        assert state.notification is None

    def test_settings_shape_the_economy(self, sunny_narrator, no_decay_rng) -> None:
        settings = FarmSettings(initial_money=7, max_energy=9, max_water_capacity=4)

        state = FarmSession(narrator=sunny_narrator, settings=settings, rng=no_decay_rng).state

        assert (state.money, state.energy, state.water_level) == (7, 9, 4)
        assert state.max_energy == 9
        assert state.max_water == 4

    def test_rainy_welcome_waters_farm(
        self, rainy_event: DailyEvent, sunny_narrator, farm_settings, no_decay_rng
    ) -> None:
        """Test that the weather rule also applies to the first report."""
        grid = FarmGrid.create()
        grid.replace(TilledPlot(id=0))

        session = FarmSession(
            narrator=sunny_narrator,
            settings=farm_settings,
            rng=no_decay_rng,
            grid=grid,
            welcome_event=rainy_event,
        )

        assert session.plot(0) == TilledPlot(id=0, is_watered=True)
        assert session.notification == RAINING

    def test_snapshot_is_immutable(self, session: FarmSession) -> None:
        state = session.state
        with pytest.raises(PydanticValidationError):
            state.money = 1_000  # type: ignore[misc]

    def test_snapshot_does_not_follow_later_changes(self, session: FarmSession) -> None:
        before = session.state
        session.select_tool(ToolType.HOE)
        session.click_plot(0)

        assert isinstance(before.plots[0], EmptyPlot)
        assert before.energy == 50

    def test_plot_lookup_out_of_range(self, session: FarmSession) -> None:
        with pytest.raises(PlotNotFoundError):
            session.plot(25)


class TestSelectTool:
    """Tests for tool selection."""

    def test_select_by_enum(self, session: FarmSession) -> None:
        assert session.select_tool(ToolType.BASKET) is True
        assert session.selected_tool == ToolType.BASKET

    def test_select_by_string(self, session: FarmSession) -> None:
        assert session.select_tool("SEED_CORN") is True
        assert session.selected_tool == ToolType.SEED_CORN

    def test_unknown_tool_keeps_selection(self, session: FarmSession) -> None:
        session.select_tool(ToolType.HOE)

        assert session.select_tool("SCYTHE") is False
        assert session.selected_tool == ToolType.HOE

    def test_deselect(self, session: FarmSession) -> None:
        session.select_tool(ToolType.HOE)
        session.select_tool(None)

        assert session.selected_tool is None
        assert session.click_plot(0).success is False


class TestClickAndRefill:
    """Tests for plot clicks, notifications and the well."""

    def test_rejection_reason_becomes_notification(self, session: FarmSession) -> None:
        session.select_tool(ToolType.HOE)
        for plot_id in range(25):
            session.click_plot(plot_id)

        outcome = session.click_plot(0)

        assert outcome.success is False
        assert session.notification == TOO_TIRED

    def test_refill(self, session: FarmSession) -> None:
        session.select_tool(ToolType.HOE)
        session.click_plot(0)
        session.select_tool(ToolType.WATERING_CAN)
        session.click_plot(0)
        assert session.state.water_level == 11

        assert session.refill_water() is True

        assert session.state.water_level == 12
        assert session.state.energy == 46
        assert session.notification == REFILLED

    def test_notification_expires(self, sunny_narrator, farm_settings, no_decay_rng) -> None:
        clock = FakeClock()
        session = FarmSession(
            narrator=sunny_narrator,
            settings=farm_settings,
            rng=no_decay_rng,
            notification_seconds=2.0,
            clock=clock,
        )

        session.notify("Hello")
        clock.now += 1.5
        assert session.notification == "Hello"

        clock.now += 0.5
        assert session.notification is None
        assert session.state.notification is None


class TestEndDay:
    """Tests for the asynchronous day advance."""

    def test_end_day(self, session: FarmSession, sunny_narrator, sunny_event) -> None:
        session.select_tool(ToolType.HOE)
        session.click_plot(0)

        event = asyncio.run(session.end_day())

        assert event == sunny_event
        assert sunny_narrator.calls == [(2, 100)]
        assert session.daily_event == sunny_event
        assert session.state.day == 2
        assert session.state.energy == 50
        assert session.is_sleeping is False
        assert session.last_night is not None
        assert session.last_night.day == 2

    def test_rainy_morning(self, rainy_narrator, farm_settings, no_decay_rng) -> None:
        session = FarmSession(narrator=rainy_narrator, settings=farm_settings, rng=no_decay_rng)
        session.select_tool(ToolType.HOE)
        session.click_plot(0)
        session.select_tool(ToolType.SEED_CARROT)
        session.click_plot(0)
        session.select_tool(ToolType.WATERING_CAN)
        session.click_plot(0)

        asyncio.run(session.end_day())

        plot = session.plot(0)
        assert isinstance(plot, PlantedPlot)
        assert plot.growth_stage == 1
        assert plot.is_watered is True
        assert session.state.water_level == 12
        assert session.notification == RAINING

    def test_single_flight(self, blocking_narrator, farm_settings, no_decay_rng) -> None:
        """Test that input is refused while the narrator is outstanding."""
        session = FarmSession(
            narrator=blocking_narrator,
            settings=farm_settings,
            rng=no_decay_rng,
        )
        session.select_tool(ToolType.HOE)

        async def scenario() -> tuple:
            first = asyncio.create_task(session.end_day())
            await blocking_narrator.started.wait()

            sleeping = session.state.is_sleeping
            second = await session.end_day()
            click = session.click_plot(0)
            refilled = session.refill_water()

            blocking_narrator.release.set()
            result = await first
            return sleeping, second, click, refilled, result

        sleeping, second, click, refilled, result = asyncio.run(scenario())

        assert sleeping is True
        assert second is None
        assert click.success is False
        assert click.reason is None
        assert refilled is False
        assert result == blocking_narrator.event
        assert len(blocking_narrator.calls) == 1
        assert session.state.day == 2
        assert isinstance(session.plot(0), EmptyPlot)
        assert session.is_sleeping is False

    def test_narrator_failure_uses_fallback(self, farm_settings, no_decay_rng) -> None:
        """Test that a raising narrator still completes the day advance."""
        session = FarmSession(
            narrator=FailingNarrator(),
            settings=farm_settings,
            rng=no_decay_rng,
        )

        event = asyncio.run(session.end_day())

        assert event == FALLBACK_EVENT
        assert session.daily_event == FALLBACK_EVENT
        assert session.is_sleeping is False
        assert session.state.day == 2

    def test_reset_refused_while_sleeping(
        self, rainy_blocking_narrator, rainy_event: DailyEvent, farm_settings, no_decay_rng
    ) -> None:
        """Test that the pending report lands on the farm it was made for."""
        narrator = rainy_blocking_narrator
        session = FarmSession(narrator=narrator, settings=farm_settings, rng=no_decay_rng)
        session.select_tool(ToolType.HOE)
        session.click_plot(0)

        async def scenario() -> bool:
            task = asyncio.create_task(session.end_day())
            await narrator.started.wait()
            refused = session.reset()
            narrator.release.set()
            await task
            return refused

        refused = asyncio.run(scenario())

        assert refused is False
        assert session.state.day == 2
        assert session.daily_event == rainy_event
        assert session.plot(0) == TilledPlot(id=0, is_watered=True)
        assert session.selected_tool == ToolType.HOE

    def test_default_narrator_without_key(self, no_decay_rng) -> None:
        session = FarmSession(rng=no_decay_rng)

        event = asyncio.run(session.end_day())

        assert event == MISSING_KEY_EVENT


class TestReset:
    """Tests for starting over."""

    def test_reset(self, session: FarmSession) -> None:
        session.select_tool(ToolType.HOE)
        session.click_plot(0)
        asyncio.run(session.end_day())

        assert session.reset() is True

        state = session.state
        assert all(isinstance(p, EmptyPlot) for p in state.plots)
        assert (state.money, state.day, state.energy, state.water_level) == (100, 1, 50, 12)
        assert state.selected_tool is None
        assert state.daily_event == WELCOME_EVENT
        assert session.last_night is None

    def test_actions_work_after_reset(self, session: FarmSession) -> None:
        session.reset()
        session.select_tool(ToolType.HOE)

        assert session.click_plot(3).success is True
        assert isinstance(session.plot(3), TilledPlot)
