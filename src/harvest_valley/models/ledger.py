"""Resource ledger: money, energy, watering-can water and the day counter.

Only the action resolver and the day-advance engine mutate a ledger. The
ledger enforces the bounds of each counter, not the affordability of an
action; affordability is the resolver's job.

Energy is allowed to overdraft: an action started with any positive energy
runs to completion even if its cost takes energy below zero. The next
action is then refused by the resolver's ``energy <= 0`` check.
"""

from __future__ import annotations

from dataclasses import dataclass

from harvest_valley.core.constants import INITIAL_MONEY, MAX_ENERGY, MAX_WATER_CAPACITY


@dataclass
class ResourceLedger:
    """Mutable resource counters of one farm session.

    Attributes:
        money: Coins on hand.
        energy: Remaining energy; may be negative after an overdraft.
        water_level: Water units left in the can, in [0, max_water].
        day: Current in-game day, starting at 1.
        max_energy: Energy restored every morning.
        max_water: Watering can capacity.
    """

    money: int = INITIAL_MONEY
    energy: int = MAX_ENERGY
    water_level: int = MAX_WATER_CAPACITY
    day: int = 1
    max_energy: int = MAX_ENERGY
    max_water: int = MAX_WATER_CAPACITY

    @classmethod
    def start(
        cls,
        *,
        initial_money: int = INITIAL_MONEY,
        max_energy: int = MAX_ENERGY,
        max_water: int = MAX_WATER_CAPACITY,
    ) -> "ResourceLedger":
        """Create the ledger of a fresh session: day 1, full energy and water."""
        return cls(
            money=initial_money,
            energy=max_energy,
            water_level=max_water,
            day=1,
            max_energy=max_energy,
            max_water=max_water,
        )

    @property
    def has_energy(self) -> bool:
        """Whether the player can still act today."""
        return self.energy > 0

    @property
    def has_water(self) -> bool:
        return self.water_level > 0

    def can_afford(self, cost: int) -> bool:
        return self.money >= cost

    # -------------------------------------------------------------------------
    # Energy
    # -------------------------------------------------------------------------

    def spend_energy(self, amount: int) -> None:
        """Deduct energy without clamping at zero."""
        self.energy -= amount

    def reset_energy_for_new_day(self) -> None:
        """Restore full energy; the water level is untouched."""
        self.energy = self.max_energy

    # -------------------------------------------------------------------------
    # Money
    # -------------------------------------------------------------------------

    def spend_money(self, amount: int) -> None:
        self.money -= amount

    def earn_money(self, amount: int) -> None:
        self.money += amount

    # -------------------------------------------------------------------------
    # Water
    # -------------------------------------------------------------------------

    def consume_water(self, amount: int) -> None:
        """Use water from the can, flooring at empty."""
        self.water_level = max(0, self.water_level - amount)

    def refill(self) -> None:
        """Fill the can to capacity."""
        self.water_level = self.max_water

    # -------------------------------------------------------------------------
    # Calendar
    # -------------------------------------------------------------------------

    def advance_day(self) -> int:
        """Move to the next day and return it."""
        self.day += 1
        return self.day


__all__ = [
    "ResourceLedger",
]
