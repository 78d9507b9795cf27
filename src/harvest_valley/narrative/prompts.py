"""Prompt templates for the morning report narrator."""

from __future__ import annotations


NARRATOR_SYSTEM_PROMPT = """You are the narrator of a cozy farming simulation game called "Harvest Valley".
Every morning you write a short report for the farmer.

Always answer with a single JSON object and nothing else:
{"weather": "Sunny" | "Rainy" | "Cloudy", "message": "<one sentence>"}"""


MORNING_REPORT_PROMPT = """It is Day {day}. The player has {money} coins.

Generate a daily morning report with:
1. A random weather condition (Sunny, Rainy, or Cloudy).
2. A short, charming, 1-sentence note about town news, a farming tip, or a horoscope.

Return JSON."""


def build_morning_report_prompt(day: int, money: int) -> str:
    """Fill in the user prompt for one morning."""
    return MORNING_REPORT_PROMPT.format(day=day, money=money)


__all__ = [
    "NARRATOR_SYSTEM_PROMPT",
    "MORNING_REPORT_PROMPT",
    "build_morning_report_prompt",
]
