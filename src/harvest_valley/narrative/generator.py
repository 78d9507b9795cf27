"""Morning report generation.

The narrator is the simulation's only external collaborator. It is called
once per day advance with the new day and the player's coins and must
always produce a usable DailyEvent: missing credentials, connection
problems, API errors and malformed answers are all absorbed here and turned
into a fixed fallback report.

Transient failures (connection errors, timeouts, rate limits) are retried
with exponential backoff via tenacity before falling back.
"""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

from openai import APIConnectionError, APIStatusError, AsyncOpenAI, RateLimitError
from pydantic import ValidationError as PydanticValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from harvest_valley.core.config import AIProviderSettings, get_settings
from harvest_valley.core.exceptions import (
    NarrativeConnectionError,
    NarrativeError,
    NarrativeResponseError,
)
from harvest_valley.core.logging import get_logger
from harvest_valley.models.events import FALLBACK_EVENT, MISSING_KEY_EVENT, DailyEvent
from harvest_valley.narrative.prompts import (
    NARRATOR_SYSTEM_PROMPT,
    build_morning_report_prompt,
)


logger = get_logger(__name__)

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


@runtime_checkable
class NarrativeGenerator(Protocol):
    """Anything that can write a morning report.

    Implementations must not raise: on any failure they return a fallback
    event instead.
    """

    async def generate(self, day: int, money: int) -> DailyEvent:
        """Produce the report for ``day`` given the player's ``money``."""
        ...


def parse_daily_event(raw: str) -> DailyEvent:
    """Parse the narrator's JSON answer into a DailyEvent.

    Weather names are matched case-insensitively.

    Raises:
        NarrativeResponseError: If the answer is empty, not JSON, or does not
            name a known weather and a non-empty message.
    """
    if not raw or not raw.strip():
        raise NarrativeResponseError("Narrator returned an empty response")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise NarrativeResponseError(
            "Narrator response is not valid JSON",
            details={"response_preview": raw[:100]},
        ) from exc

    if not isinstance(data, dict):
        raise NarrativeResponseError(
            "Narrator response is not a JSON object",
            details={"response_preview": raw[:100]},
        )

    weather = data.get("weather")
    if isinstance(weather, str):
        data["weather"] = weather.strip().capitalize()

    try:
        return DailyEvent.model_validate(data)
    except PydanticValidationError as exc:
        raise NarrativeResponseError(
            f"Narrator response does not match the report schema: {exc.error_count()} errors",
            details={"response_preview": raw[:100]},
        ) from exc


class LLMNarrativeGenerator:
    """Morning report narrator backed by an OpenAI-compatible chat API.

    Talks to OpenRouter by default, or to OpenAI when configured.

    Attributes:
        model: Model identifier.
        provider: "openrouter" or "openai".
        temperature: Sampling temperature.
        max_retries: Retries after the first attempt on transient errors.
    """

    def __init__(
        self,
        *,
        settings: AIProviderSettings | None = None,
        client: Any = None,
        retry_wait: float = 1.0,
    ) -> None:
        """Initialize the narrator.

        Args:
            settings: Provider settings; defaults to the application settings.
            client: Pre-built AsyncOpenAI-compatible client. When given, no
                API key is required.
            retry_wait: Backoff multiplier in seconds between retries.
        """
        settings = settings or get_settings().ai
        self.model = settings.model
        self.provider = settings.default_provider
        self.temperature = settings.temperature
        self.max_retries = settings.max_retries
        self._timeout = settings.timeout_seconds
        self._api_key = settings.active_api_key
        self._retry_wait = retry_wait
        self._client = client

    @property
    def is_configured(self) -> bool:
        """Whether the narrator can reach a provider at all."""
        return self._client is not None or bool(self._api_key)

    def _get_client(self) -> Any:
        if self._client is None:
            kwargs: dict[str, Any] = {
                "api_key": self._api_key,
                "timeout": self._timeout,
                "max_retries": 0,
            }
            if self.provider == "openrouter":
                kwargs["base_url"] = OPENROUTER_BASE_URL
                kwargs["default_headers"] = {"X-Title": "Harvest Valley"}
            self._client = AsyncOpenAI(**kwargs)
        return self._client

    async def generate(self, day: int, money: int) -> DailyEvent:
        """Write the morning report, falling back on any failure."""
        if not self.is_configured:
            logger.warning("Narrator API key missing, using silent radio report", day=day)
            return MISSING_KEY_EVENT

        prompt = build_morning_report_prompt(day, money)
        try:
            raw = await self._request_with_retry(prompt)
            event = parse_daily_event(raw)
        except Exception:
            logger.exception("Failed to fetch daily event", day=day, model=self.model)
            return FALLBACK_EVENT

        logger.info("Morning report generated", day=day, weather=event.weather)
        return event

    async def _request_with_retry(self, prompt: str) -> str:
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(NarrativeConnectionError),
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_exponential(multiplier=self._retry_wait, max=8),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self._request(prompt)

        # Should not reach here
        raise NarrativeError("Narrator request failed after all retries", model=self.model)

    async def _request(self, prompt: str) -> str:
        """Send one chat completion request.

        Raises:
            NarrativeConnectionError: On transient provider failures.
            NarrativeError: On other API errors.
        """
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": NARRATOR_SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_tokens=200,
                response_format={"type": "json_object"},
            )
        except (APIConnectionError, RateLimitError) as exc:
            raise NarrativeConnectionError(
                f"Failed to reach narrator: {exc}",
                model=self.model,
                provider=self.provider,
            ) from exc
        except APIStatusError as exc:
            raise NarrativeError(
                f"Narrator API error: {exc}",
                model=self.model,
                provider=self.provider,
                details={"status_code": exc.status_code},
            ) from exc

        if not response.choices:
            raise NarrativeResponseError("Narrator returned no choices", model=self.model)
        return response.choices[0].message.content or ""


__all__ = [
    "NarrativeGenerator",
    "LLMNarrativeGenerator",
    "parse_daily_event",
    "OPENROUTER_BASE_URL",
]
