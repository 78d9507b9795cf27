"""Plot models for the farm grid.

A plot is a discriminated union on ``status``. Each status is its own frozen
model and carries only the fields that mean something in that status, so a
crop type can only exist on a planted plot. Transitions return the successor
value instead of mutating in place:

    EmptyPlot --till--> TilledPlot --plant--> PlantedPlot
        ^                   |  ^                    |
        +----soil decay-----+  +---harvest/clear----+

Models:
    EmptyPlot: Untouched ground.
    TilledPlot: Hoed soil, ready for a seed.
    PlantedPlot: A growing, mature or withered crop.
    Plot: Discriminated union of the three.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from harvest_valley.core.exceptions import InvalidGameStateError
from harvest_valley.models.crops import CropConfig, get_crop
from harvest_valley.models.enums import PlotStatus, ToolType


PlotId = Annotated[int, Field(ge=0)]


class _PlotBase(BaseModel):
    """Fields shared by every plot status."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    id: PlotId = Field(description="Row-major grid index, stable for the session")

    @property
    def can_be_watered(self) -> bool:
        """Whether a watering can swing would wet this plot."""
        return False


class EmptyPlot(_PlotBase):
    """Untouched ground. Only the hoe does anything here."""

    status: Literal[PlotStatus.EMPTY] = Field(
        default=PlotStatus.EMPTY,
        description="Plot status discriminator",
    )

    def till(self) -> TilledPlot:
        """Hoe the ground."""
        return TilledPlot(id=self.id)


class TilledPlot(_PlotBase):
    """Hoed soil waiting for a seed.

    Tilled soil can be watered ahead of planting; the moisture dries out
    overnight like any other plot.
    """

    status: Literal[PlotStatus.TILLED] = Field(
        default=PlotStatus.TILLED,
        description="Plot status discriminator",
    )
    is_watered: bool = Field(default=False, description="Watered since last night")

    @property
    def can_be_watered(self) -> bool:
        return not self.is_watered

    def plant(self, seed: ToolType) -> PlantedPlot:
        """Sow ``seed``. A fresh seed starts dry at growth stage zero."""
        return PlantedPlot(id=self.id, crop_type=seed)

    def water(self) -> TilledPlot:
        return self.model_copy(update={"is_watered": True})

    def dry(self) -> TilledPlot:
        return self.model_copy(update={"is_watered": False})

    def decay(self) -> EmptyPlot:
        """Let unplanted soil revert to empty ground."""
        return EmptyPlot(id=self.id)


class PlantedPlot(_PlotBase):
    """A crop in the ground.

    Attributes:
        crop_type: Seed tool that planted this crop.
        growth_stage: Number of watered nights the crop has grown.
        is_watered: Watered since the last night.
        is_withered: The crop has died and can only be cleared.
    """

    status: Literal[PlotStatus.PLANTED] = Field(
        default=PlotStatus.PLANTED,
        description="Plot status discriminator",
    )
    crop_type: ToolType = Field(description="Seed that was planted")
    growth_stage: Annotated[int, Field(ge=0)] = Field(
        default=0,
        description="Completed watered nights",
    )
    is_watered: bool = Field(default=False, description="Watered since last night")
    is_withered: bool = Field(default=False, description="Crop has died")

    @field_validator("crop_type")
    @classmethod
    def validate_crop_type(cls, value: ToolType) -> ToolType:
        """Only seed tools name a crop."""
        if get_crop(value) is None:
            raise ValueError(f"{value} is not a seed")
        return value

    @property
    def crop(self) -> CropConfig:
        """Catalog entry governing this plot.

        Raises:
            InvalidGameStateError: If ``crop_type`` has no catalog entry.
        """
        crop = get_crop(self.crop_type)
        if crop is None:
            raise InvalidGameStateError(
                "Planted plot names no known crop",
                current_state=str(self.crop_type),
                details={"plot_id": self.id},
            )
        return crop

    @property
    def is_mature(self) -> bool:
        """Whether the crop has grown enough to be sold."""
        return not self.is_withered and self.growth_stage >= self.crop.growth_days

    @property
    def can_be_watered(self) -> bool:
        return not self.is_watered and not self.is_withered

    def water(self) -> PlantedPlot:
        return self.model_copy(update={"is_watered": True})

    def grow_overnight(self) -> PlantedPlot:
        """Advance one night: a watered crop grows one stage, then dries."""
        if self.is_watered and not self.is_withered:
            return self.model_copy(
                update={"growth_stage": self.growth_stage + 1, "is_watered": False}
            )
        return self.model_copy(update={"is_watered": False})

    def clear(self) -> TilledPlot:
        """Pull the crop, leaving tilled soil behind.

        Raises:
            InvalidGameStateError: If the crop is still growing.
        """
        if not (self.is_withered or self.is_mature):
            raise InvalidGameStateError(
                "Only mature or withered crops can be removed",
                current_state="growing",
                expected_states=["mature", "withered"],
                details={"plot_id": self.id, "growth_stage": self.growth_stage},
            )
        return TilledPlot(id=self.id)


Plot = Annotated[
    EmptyPlot | TilledPlot | PlantedPlot,
    Field(discriminator="status", description="A farm plot in one of three statuses"),
]
"""Discriminated union of all plot statuses, keyed on ``status``."""


__all__ = [
    "PlotId",
    "EmptyPlot",
    "TilledPlot",
    "PlantedPlot",
    "Plot",
]
