"""Custom exception hierarchy for Harvest Valley.

All exceptions inherit from HarvestValleyError, so callers at the application
boundary can handle every domain error in one place while keeping the
domain-specific context in ``details``.

The simulation entry points (tool actions and the day advance) never raise
these to their callers: invalid actions degrade to no-ops, and narrative
failures are absorbed into a fallback event. The hierarchy is used below
those boundaries and by configuration loading.

Example:
    >>> from harvest_valley.core.exceptions import PlotNotFoundError
    >>> raise PlotNotFoundError("No such plot", plot_id=99)
"""

from __future__ import annotations

from typing import Any


class HarvestValleyError(Exception):
    """Base exception for all Harvest Valley errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Game Engine Exceptions
# =============================================================================


class GameEngineError(HarvestValleyError):
    """Base exception for farm simulation errors."""


class PlotNotFoundError(GameEngineError):
    """Raised when a plot id does not address a cell of the grid."""

    def __init__(
        self,
        message: str,
        *,
        plot_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the offending plot id.

        Args:
            message: Human-readable error description.
            plot_id: The id that was looked up.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if plot_id is not None:
            combined_details["plot_id"] = plot_id
        super().__init__(message, details=combined_details)


class InvalidGameStateError(GameEngineError):
    """Raised when a state transition is requested from the wrong state.

    Clearing a planted plot whose crop is still growing raises this. The
    action resolver checks maturity first, so it only surfaces on direct
    model misuse.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid game state error with state context.

        Args:
            message: Human-readable error description.
            current_state: The current state identifier.
            expected_states: List of valid states that were expected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


# =============================================================================
# Narrative Exceptions
# =============================================================================


class NarrativeError(HarvestValleyError):
    """Base exception for morning report generation errors."""

    def __init__(
        self,
        message: str,
        *,
        model: str | None = None,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize narrative error with model context.

        Args:
            message: Human-readable error description.
            model: Name of the LLM involved.
            provider: Name of the provider (e.g., 'openrouter', 'openai').
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if model:
            combined_details["model"] = model
        if provider:
            combined_details["provider"] = provider
        super().__init__(message, details=combined_details)


class NarrativeConnectionError(NarrativeError):
    """Raised when the LLM provider cannot be reached."""


class NarrativeResponseError(NarrativeError):
    """Raised when the LLM response is empty or does not match the schema."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(HarvestValleyError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


__all__ = [
    "HarvestValleyError",
    "GameEngineError",
    "PlotNotFoundError",
    "InvalidGameStateError",
    "NarrativeError",
    "NarrativeConnectionError",
    "NarrativeResponseError",
    "ConfigurationError",
]
