"""Decode raw AccuWeather response bodies into typed models."""

from __future__ import annotations

from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from .exceptions import DecodeError
from .models import CurrentCondition, DailyForecastsAnswer, HourlyForecast

T = TypeVar("T")

_HOURLY_ADAPTER = TypeAdapter(list[HourlyForecast])
_DAILY_ADAPTER = TypeAdapter(DailyForecastsAnswer)
_CONDITIONS_ADAPTER = TypeAdapter(list[CurrentCondition])


def _decode(adapter: TypeAdapter[T], body: bytes | str, context: str) -> T:
    try:
        return adapter.validate_json(body)
    except ValidationError as exc:
        # Summarize without input values; bodies can be large.
        details = "; ".join(
            f"{'.'.join(str(item) for item in error['loc']) or '<root>'}: {error['msg']}"
            for error in exc.errors(include_url=False, include_input=False)[:5]
        )
        raise DecodeError(
            f"AccuWeather {context} payload did not match the expected schema "
            f"({exc.error_count()} error(s)): {details}"
        ) from exc


def decode_hourly_forecasts(body: bytes | str) -> list[HourlyForecast]:
    """Decode the hourly forecasts endpoint body (a JSON array)."""
    return _decode(_HOURLY_ADAPTER, body, "hourly forecasts")


def decode_daily_forecasts(body: bytes | str) -> DailyForecastsAnswer:
    """Decode the daily forecasts endpoint body."""
    return _decode(_DAILY_ADAPTER, body, "daily forecasts")


def decode_current_conditions(body: bytes | str) -> list[CurrentCondition]:
    """Decode the current conditions endpoint body (a one-element JSON array)."""
    return _decode(_CONDITIONS_ADAPTER, body, "current conditions")
