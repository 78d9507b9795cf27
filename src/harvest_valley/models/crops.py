"""Crop catalog.

Static configuration of every plantable crop, keyed by the seed tool that
plants it. Entries are immutable; the glyphs are for display only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from harvest_valley.models.enums import ToolType


class CropConfig(BaseModel):
    """Economy and growth parameters of one crop.

    Attributes:
        name: Display name.
        seed_cost: Coins paid to plant one seed.
        sell_price: Coins earned when the mature crop is harvested.
        growth_days: Watered nights needed before the crop can be harvested.
        emoji: Glyph of the mature crop.
        seed_emoji: Glyph of the seed packet.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    name: str = Field(description="Display name")
    seed_cost: Annotated[int, Field(ge=0)] = Field(description="Coins to plant")
    sell_price: Annotated[int, Field(ge=0)] = Field(description="Coins on harvest")
    growth_days: Annotated[int, Field(ge=1)] = Field(
        description="Watered nights until mature"
    )
    emoji: str = Field(default="🌱", description="Crop glyph")
    seed_emoji: str = Field(default="🌰", description="Seed glyph")

    @property
    def profit(self) -> int:
        """Coins gained per harvest after paying for the seed."""
        return self.sell_price - self.seed_cost


CROPS: MappingProxyType[ToolType, CropConfig] = MappingProxyType(
    {
        ToolType.SEED_CARROT: CropConfig(
            name="Carrot",
            seed_cost=10,
            sell_price=25,
            growth_days=3,
            emoji="🥕",
            seed_emoji="🌰",
        ),
        ToolType.SEED_CORN: CropConfig(
            name="Corn",
            seed_cost=20,
            sell_price=55,
            growth_days=5,
            emoji="🌽",
            seed_emoji="🌽",
        ),
        ToolType.SEED_PUMPKIN: CropConfig(
            name="Pumpkin",
            seed_cost=50,
            sell_price=150,
            growth_days=8,
            emoji="🎃",
            seed_emoji="🎃",
        ),
    }
)
"""All plantable crops, keyed by seed tool."""


def get_crop(seed: ToolType) -> CropConfig | None:
    """Look up the crop planted by ``seed``, or None for non-seed tools."""
    return CROPS.get(seed)


__all__ = [
    "CropConfig",
    "CROPS",
    "get_crop",
]
