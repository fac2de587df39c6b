"""Typed AccuWeather response models."""

from .common import (
    AccuweatherModel,
    ConditionMeasurement,
    Measurement,
    Temperature,
    Wind,
    WindDirection,
    WindGust,
    to_wire_name,
)
from .conditions import (
    ConditionWind,
    ConditionWindGust,
    CurrentCondition,
    LocalSource,
    PrecipitationSummary,
    PressureTendency,
    TemperatureSummary,
    TemperatureSummaryRange,
)
from .daily import (
    AirAndPollen,
    DailyForecast,
    DailyForecastsAnswer,
    DayPartForecast,
    DegreeDaySummary,
    Headline,
    Moon,
    Sun,
)
from .hourly import HourlyForecast

__all__ = [
    "AccuweatherModel",
    "AirAndPollen",
    "ConditionMeasurement",
    "ConditionWind",
    "ConditionWindGust",
    "CurrentCondition",
    "DailyForecast",
    "DailyForecastsAnswer",
    "DayPartForecast",
    "DegreeDaySummary",
    "Headline",
    "HourlyForecast",
    "LocalSource",
    "Measurement",
    "Moon",
    "PrecipitationSummary",
    "PressureTendency",
    "Sun",
    "Temperature",
    "TemperatureSummary",
    "TemperatureSummaryRange",
    "Wind",
    "WindDirection",
    "WindGust",
    "to_wire_name",
]
