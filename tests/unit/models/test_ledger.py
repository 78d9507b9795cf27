"""Tests for the resource ledger and daily events."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from harvest_valley.models import (
    FALLBACK_EVENT,
    WELCOME_EVENT,
    DailyEvent,
    ResourceLedger,
    Weather,
)


class TestResourceLedger:
    """Tests for ResourceLedger counters."""

    def test_start(self) -> None:
        ledger = ResourceLedger.start()

        assert ledger.money == 100
        assert ledger.energy == 50
        assert ledger.water_level == 12
        assert ledger.day == 1

    def test_start_custom(self) -> None:
        ledger = ResourceLedger.start(initial_money=5, max_energy=10, max_water=3)

        assert (ledger.money, ledger.energy, ledger.water_level) == (5, 10, 3)
        assert ledger.max_water == 3

    def test_energy_overdraft(self) -> None:
        """Test that spending more energy than remains is not clamped."""
        ledger = ResourceLedger.start()
        ledger.energy = 1

        ledger.spend_energy(3)

        assert ledger.energy == -2
        assert ledger.has_energy is False

    def test_reset_energy_keeps_water(self) -> None:
        ledger = ResourceLedger.start()
        ledger.energy = -1
        ledger.water_level = 4

        ledger.reset_energy_for_new_day()

        assert ledger.energy == 50
        assert ledger.water_level == 4

    def test_consume_water_floors_at_zero(self) -> None:
        ledger = ResourceLedger.start()
        ledger.water_level = 2

        ledger.consume_water(3)

        assert ledger.water_level == 0
        assert ledger.has_water is False

    def test_refill(self) -> None:
        ledger = ResourceLedger.start()
        ledger.water_level = 0

        ledger.refill()

        assert ledger.water_level == 12

    def test_money(self) -> None:
        ledger = ResourceLedger.start()

        ledger.spend_money(30)
        ledger.earn_money(5)

        assert ledger.money == 75
        assert ledger.can_afford(75) is True
        assert ledger.can_afford(76) is False

    def test_advance_day(self) -> None:
        ledger = ResourceLedger.start()
        assert ledger.advance_day() == 2
        assert ledger.day == 2


class TestDailyEvent:
    """Tests for the DailyEvent model."""

    def test_weather_from_string(self) -> None:
        event = DailyEvent.model_validate({"weather": "Rainy", "message": "Wet."})

        assert event.weather == Weather.RAINY
        assert event.is_rainy is True
        assert event.buff is None

    def test_unknown_weather_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            DailyEvent.model_validate({"weather": "Snowy", "message": "Cold."})

    def test_empty_message_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            DailyEvent(weather=Weather.SUNNY, message="")

    def test_fixed_events_are_sunny(self) -> None:
        assert WELCOME_EVENT.weather == Weather.SUNNY
        assert FALLBACK_EVENT.message == "A quiet day in the valley."
