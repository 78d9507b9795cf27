"""Morning report narration.

Exports:
    NarrativeGenerator: Protocol of a report writer.
    LLMNarrativeGenerator: Narrator backed by OpenRouter/OpenAI.
    parse_daily_event: Parse a narrator JSON answer.
"""

from __future__ import annotations

from harvest_valley.narrative.generator import (
    OPENROUTER_BASE_URL,
    LLMNarrativeGenerator,
    NarrativeGenerator,
    parse_daily_event,
)
from harvest_valley.narrative.prompts import build_morning_report_prompt


__all__ = [
    "NarrativeGenerator",
    "LLMNarrativeGenerator",
    "OPENROUTER_BASE_URL",
    "parse_daily_event",
    "build_morning_report_prompt",
]
