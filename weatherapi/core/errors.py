"""Error taxonomy shared by the weather pipeline and the API layer."""
from __future__ import annotations

from typing import Optional


class WeatherError(RuntimeError):
    """Base error for everything the weather pipeline raises."""


class ValidationError(WeatherError):
    """Raised when request parameters are missing or malformed."""


class NotFoundError(WeatherError):
    """Raised when the geocoding provider has no match for a place."""


class UpstreamError(WeatherError):
    """Raised on transport or HTTP failures of an upstream provider."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class QuotaExceeded(UpstreamError):
    """Raised when a provider reports a quota/usage limit issue."""


class BothProvidersFailedError(WeatherError):
    """Raised when the primary and the secondary provider both failed.

    The message headline is the primary provider's failure; both underlying
    errors stay available for logging.
    """

    def __init__(self, headline: str, primary_error: Exception, secondary_error: Exception) -> None:
        super().__init__(f"{headline}: {primary_error}")
        self.primary_error = primary_error
        self.secondary_error = secondary_error


__all__ = [
    "WeatherError",
    "ValidationError",
    "NotFoundError",
    "UpstreamError",
    "QuotaExceeded",
    "BothProvidersFailedError",
]
