"""Core infrastructure: configuration, constants, logging and exceptions.

Exports:
    Exceptions:
        HarvestValleyError: Base exception for all application errors.
        GameEngineError, PlotNotFoundError, InvalidGameStateError
        NarrativeError, NarrativeConnectionError, NarrativeResponseError
        ConfigurationError

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from harvest_valley.core.config import (
    AIProviderSettings,
    FarmSettings,
    Settings,
    UISettings,
    clear_settings_cache,
    get_settings,
)
from harvest_valley.core.exceptions import (
    ConfigurationError,
    GameEngineError,
    HarvestValleyError,
    InvalidGameStateError,
    NarrativeConnectionError,
    NarrativeError,
    NarrativeResponseError,
    PlotNotFoundError,
)
from harvest_valley.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "HarvestValleyError",
    "GameEngineError",
    "PlotNotFoundError",
    "InvalidGameStateError",
    "NarrativeError",
    "NarrativeConnectionError",
    "NarrativeResponseError",
    "ConfigurationError",
    # Configuration
    "AIProviderSettings",
    "FarmSettings",
    "UISettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
