"""Typed models for the daily forecasts endpoint."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import AccuweatherModel, Measurement, Temperature, Wind


class AirAndPollen(AccuweatherModel):
    """Air quality or pollen reading for one pollutant."""

    name: str
    value: int
    category: str
    category_value: int
    type: str = ""


class DayPartForecast(AccuweatherModel):
    """Forecast detail for the day or the night half of a forecast day."""

    cloud_cover: int
    hours_of_precipitation: float
    hours_of_rain: float
    ice: Measurement
    ice_probability: int
    icon: int
    icon_phrase: str
    long_phrase: str
    precipitation_probability: int
    rain: Measurement
    rain_probability: int
    short_phrase: str
    snow: Measurement
    snow_probability: int
    thunderstorm_probability: int
    total_liquid: Measurement
    wind: Wind
    wind_gust: Wind


class DegreeDaySummary(AccuweatherModel):
    heating: Measurement
    cooling: Measurement


class Sun(AccuweatherModel):
    rise: datetime
    epoch_rise: int
    set: datetime
    epoch_set: int


class Moon(AccuweatherModel):
    """Moon data; any part of it may be missing for a given day."""

    rise: datetime | None = None
    epoch_rise: int | None = None
    set: datetime | None = None
    epoch_set: int | None = None
    phase: str | None = None
    age: int | None = None


class DailyForecast(AccuweatherModel):
    """Forecast for one calendar day."""

    air_and_pollen: list[AirAndPollen]
    date: datetime
    day: DayPartForecast
    degree_day_summary: DegreeDaySummary
    epoch_date: int
    hours_of_sun: float
    link: str
    mobile_link: str
    moon: Moon = Field(default_factory=Moon)
    night: DayPartForecast
    real_feel_temperature: Temperature
    real_feel_temperature_shade: Temperature
    sources: list[str]
    sun: Sun
    temperature: Temperature


class Headline(AccuweatherModel):
    """Summary headline attached to a daily forecast answer."""

    effective_date: datetime
    effective_epoch_date: int
    severity: int
    text: str
    category: str
    end_date: datetime
    end_epoch_date: int
    mobile_link: str
    link: str


class DailyForecastsAnswer(AccuweatherModel):
    """Top-level payload of the daily forecasts endpoint."""

    headline: Headline
    daily_forecasts: list[DailyForecast]
