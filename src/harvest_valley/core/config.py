"""Configuration management for Harvest Valley.

Centralized configuration using pydantic-settings, supporting environment
variables, .env files, and runtime overrides. API keys are held as SecretStr.

Example:
    >>> from harvest_valley.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.farm.initial_money)
    100

Environment Variables:
    HARVEST_VALLEY_OPENROUTER_API_KEY: OpenRouter API key for the morning report
    HARVEST_VALLEY_OPENAI_API_KEY: OpenAI API key
    HARVEST_VALLEY_FARM_RANDOM_SEED: Seed for soil decay draws
    HARVEST_VALLEY_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from harvest_valley.core.constants import (
    INITIAL_MONEY,
    MAX_ENERGY,
    MAX_WATER_CAPACITY,
    NOTIFICATION_SECONDS,
    SOIL_DECAY_CHANCE,
)
from harvest_valley.core.exceptions import ConfigurationError


class AIProviderSettings(BaseSettings):
    """Configuration for the narrative LLM connection.

    Attributes:
        openrouter_api_key: OpenRouter API key (primary provider).
        openai_api_key: OpenAI API key for the alternative provider.
        default_provider: Which provider the narrator talks to.
        model: Model identifier sent with each request.
        temperature: Sampling temperature for the morning report.
        max_retries: Maximum number of retry attempts on transient errors.
        timeout_seconds: Request timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="HARVEST_VALLEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openrouter_api_key: SecretStr | None = Field(
        default=None,
        description="OpenRouter API key (primary)",
    )
    openai_api_key: SecretStr | None = Field(
        default=None,
        description="OpenAI API key",
    )
    default_provider: Literal["openrouter", "openai"] = Field(
        default="openrouter",
        description="Default AI provider to use",
    )
    model: str = Field(
        default="google/gemini-2.5-flash",
        description="Narrator model",
    )
    temperature: float = Field(
        default=0.9,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    max_retries: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Maximum API retry attempts",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="API request timeout",
    )

    @model_validator(mode="after")
    def validate_api_key_for_provider(self) -> "AIProviderSettings":
        """Ensure an explicitly chosen OpenAI provider has a key.

        A missing OpenRouter key is allowed: the narrator then falls back to
        its fixed "radio is silent" report.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If OpenAI is the provider but has no key.
        """
        if self.default_provider == "openai" and not self.openai_api_key:
            raise ConfigurationError(
                "OpenAI is set as default provider but OPENAI_API_KEY is not configured",
                config_key="openai_api_key",
            )
        return self

    @property
    def active_api_key(self) -> str | None:
        """Return the plain-text key for the default provider, if any."""
        secret = (
            self.openai_api_key
            if self.default_provider == "openai"
            else self.openrouter_api_key
        )
        return secret.get_secret_value() if secret else None


class FarmSettings(BaseSettings):
    """Tunable farm economy and overnight rules.

    Attributes:
        initial_money: Coins at session start.
        max_energy: Energy restored each morning.
        max_water_capacity: Watering can capacity.
        soil_decay_chance: Chance an unplanted tilled plot reverts overnight.
        random_seed: Seed for the soil decay random source.
    """

    model_config = SettingsConfigDict(
        env_prefix="HARVEST_VALLEY_FARM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    initial_money: int = Field(
        default=INITIAL_MONEY,
        ge=0,
        description="Starting coins",
    )
    max_energy: int = Field(
        default=MAX_ENERGY,
        ge=1,
        description="Energy restored each morning",
    )
    max_water_capacity: int = Field(
        default=MAX_WATER_CAPACITY,
        ge=1,
        description="Watering can capacity",
    )
    soil_decay_chance: float = Field(
        default=SOIL_DECAY_CHANCE,
        ge=0.0,
        le=1.0,
        description="Overnight tilled-soil reversion probability",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for reproducible soil decay",
    )


class UISettings(BaseSettings):
    """Configuration for the Streamlit UI.

    Attributes:
        page_title: Browser page title.
        notification_seconds: Toast display duration.
    """

    model_config = SettingsConfigDict(
        env_prefix="HARVEST_VALLEY_UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    page_title: str = Field(
        default="Harvest Valley",
        description="Browser page title",
    )
    notification_seconds: float = Field(
        default=NOTIFICATION_SECONDS,
        gt=0,
        description="Toast display duration",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        ai: Narrative provider settings.
        farm: Farm economy settings.
        ui: UI settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="HARVEST_VALLEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Harvest Valley",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    ai: AIProviderSettings = Field(default_factory=AIProviderSettings)
    farm: FarmSettings = Field(default_factory=FarmSettings)
    ui: UISettings = Field(default_factory=UISettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If required configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "AIProviderSettings",
    "FarmSettings",
    "UISettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
