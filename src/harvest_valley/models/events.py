"""Daily event model: the weather and narrative of the morning report."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from harvest_valley.models.enums import Weather


class DailyEvent(BaseModel):
    """Morning report shown once per day.

    Attributes:
        weather: Today's weather. Rain waters the farm and refills the can.
        message: One-sentence town news, farming tip or horoscope.
        buff: Optional flavour modifier named by the narrator. Informational.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    weather: Weather = Field(description="Today's weather")
    message: str = Field(min_length=1, description="Narrative message")
    buff: str | None = Field(default=None, description="Optional flavour buff")

    @property
    def is_rainy(self) -> bool:
        return self.weather == Weather.RAINY


WELCOME_EVENT = DailyEvent(
    weather=Weather.SUNNY,
    message="Welcome to Harvest Valley! Start by tilling the soil.",
)
"""Event shown when a session starts, before any night has passed."""

MISSING_KEY_EVENT = DailyEvent(
    weather=Weather.SUNNY,
    message="The town radio is silent today. (API key missing)",
)
"""Fallback when no narrator API key is configured."""

FALLBACK_EVENT = DailyEvent(
    weather=Weather.SUNNY,
    message="A quiet day in the valley.",
)
"""Fallback when the narrator fails for any other reason."""


__all__ = [
    "DailyEvent",
    "WELCOME_EVENT",
    "MISSING_KEY_EVENT",
    "FALLBACK_EVENT",
]
