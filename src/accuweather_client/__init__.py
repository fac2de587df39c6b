"""Typed client for the AccuWeather forecast and current-conditions API."""

from .client import AccuweatherClient
from .config import DEFAULT_BASE_URL, Settings, load_settings
from .exceptions import (
    AccuweatherError,
    ConfigError,
    DecodeError,
    HttpStatusError,
    InvalidParameterError,
    MissingLocationError,
    RequestBuildError,
    TransportError,
)
from .log_setup import JsonConsoleFormatter, setup_logger
from .models import CurrentCondition, DailyForecastsAnswer, HourlyForecast

__all__ = [
    "DEFAULT_BASE_URL",
    "AccuweatherClient",
    "AccuweatherError",
    "ConfigError",
    "CurrentCondition",
    "DailyForecastsAnswer",
    "DecodeError",
    "HourlyForecast",
    "HttpStatusError",
    "InvalidParameterError",
    "JsonConsoleFormatter",
    "MissingLocationError",
    "RequestBuildError",
    "Settings",
    "TransportError",
    "load_settings",
    "setup_logger",
]
