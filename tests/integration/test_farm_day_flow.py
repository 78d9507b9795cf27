"""Integration tests for whole farming days.

Drives a FarmSession through the same entry points the Streamlit page uses,
with a stub narrator standing in for the LLM.
"""

from __future__ import annotations

import asyncio

from harvest_valley.engine.session import FarmSession
from harvest_valley.models import EmptyPlot, PlantedPlot, TilledPlot, ToolType


class TestFirstDay:
    """Till, plant, water and sleep through the first night."""

    def test_carrot_first_day(self, session: FarmSession) -> None:
        session.select_tool(ToolType.HOE)
        assert session.click_plot(0).success is True

        session.select_tool(ToolType.SEED_CARROT)
        assert session.click_plot(0).success is True

        state = session.state
        plot = state.plots[0]
        assert state.money == 90
        assert state.energy == 47
        assert isinstance(plot, PlantedPlot)
        assert plot.crop_type == ToolType.SEED_CARROT
        assert plot.growth_stage == 0

        session.select_tool(ToolType.WATERING_CAN)
        assert session.click_plot(0).success is True

        state = session.state
        assert state.water_level == 11
        assert state.energy == 45
        assert state.plots[0].is_watered is True  # type: ignore[union-attr]

        asyncio.run(session.end_day())

        state = session.state
        plot = state.plots[0]
        assert state.day == 2
        assert state.energy == 50
        assert isinstance(plot, PlantedPlot)
        assert plot.growth_stage == 1
        assert plot.is_watered is False


class TestFullHarvest:
    """Grow a carrot to maturity and sell it."""

    def test_grow_and_sell(self, session: FarmSession, sunny_narrator) -> None:
        session.select_tool(ToolType.HOE)
        session.click_plot(12)
        session.select_tool(ToolType.SEED_CARROT)
        session.click_plot(12)

        for _ in range(3):
            session.select_tool(ToolType.WATERING_CAN)
            assert session.click_plot(12).success is True
            asyncio.run(session.end_day())

        plot = session.plot(12)
        assert isinstance(plot, PlantedPlot)
        assert plot.is_mature is True

        session.select_tool(ToolType.BASKET)
        outcome = session.click_plot(12)

        assert outcome.success is True
        assert session.notification == "Sold Carrot for 25!"
        assert session.state.money == 115
        assert session.state.day == 4
        assert session.state.water_level == 9
        assert session.plot(12) == TilledPlot(id=12)
        assert [day for day, _ in sunny_narrator.calls] == [2, 3, 4]

    def test_unwatered_crop_stalls(self, session: FarmSession) -> None:
        session.select_tool(ToolType.HOE)
        session.click_plot(0)
        session.select_tool(ToolType.SEED_CORN)
        session.click_plot(0)

        for _ in range(3):
            asyncio.run(session.end_day())

        plot = session.plot(0)
        assert isinstance(plot, PlantedPlot)
        assert plot.growth_stage == 0


class TestRainyDays:
    """A rainy morning does the watering for the player."""

    def test_rain_grows_crops_next_night(
        self, rainy_narrator, farm_settings, no_decay_rng
    ) -> None:
        session = FarmSession(narrator=rainy_narrator, settings=farm_settings, rng=no_decay_rng)
        session.select_tool(ToolType.HOE)
        session.click_plot(0)
        session.select_tool(ToolType.SEED_PUMPKIN)
        session.click_plot(0)

        asyncio.run(session.end_day())
        asyncio.run(session.end_day())

        plot = session.plot(0)
        assert isinstance(plot, PlantedPlot)
        assert plot.growth_stage == 1
        assert plot.is_watered is True


class TestAbandonedSoil:
    def test_unplanted_soil_reverts(
        self, sunny_narrator, farm_settings, always_decay_rng
    ) -> None:
        session = FarmSession(
            narrator=sunny_narrator,
            settings=farm_settings,
            rng=always_decay_rng,
        )
        session.select_tool(ToolType.HOE)
        session.click_plot(0)

        asyncio.run(session.end_day())

        assert isinstance(session.plot(0), EmptyPlot)
        assert session.last_night is not None
        assert session.last_night.decayed == (0,)
