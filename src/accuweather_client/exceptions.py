"""Application exception classes."""

from __future__ import annotations

from typing import Any


class AccuweatherError(Exception):
    """Base class for every error raised by the AccuWeather client."""


class ConfigError(AccuweatherError):
    """Raised when configuration is invalid or incomplete."""


class InvalidParameterError(AccuweatherError):
    """Raised when a caller passes an unsupported parameter value."""

    def __init__(self, message: str, *, parameter: str, value: Any) -> None:
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class MissingLocationError(AccuweatherError):
    """Raised when an operation needs a location and none is configured."""


class RequestBuildError(AccuweatherError):
    """Raised when a request URL cannot be assembled."""


class HttpStatusError(AccuweatherError):
    """Raised for non-success HTTP responses."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(AccuweatherError):
    """Raised when a response body does not match the expected schema."""


class TransportError(AccuweatherError):
    """Raised for network-level failures (DNS, connection, TLS, timeout)."""
