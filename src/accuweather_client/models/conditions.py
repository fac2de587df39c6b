"""Typed models for the current conditions endpoint.

Every measurement here is a ``ConditionMeasurement`` carrying both metric and
imperial values, unlike the forecast endpoints which honour the ``metric``
query flag and return a single unit.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import AccuweatherModel, ConditionMeasurement, WindDirection


class LocalSource(AccuweatherModel):
    """Local data provider credited for the observation."""

    id: int
    name: str
    weather_code: str


class PressureTendency(AccuweatherModel):
    localized_text: str
    code: str


class PrecipitationSummary(AccuweatherModel):
    """Precipitation totals over rolling windows ending at the observation."""

    precipitation: ConditionMeasurement
    past_hour: ConditionMeasurement
    past3_hours: ConditionMeasurement
    past6_hours: ConditionMeasurement
    past9_hours: ConditionMeasurement
    past12_hours: ConditionMeasurement
    past18_hours: ConditionMeasurement
    past24_hours: ConditionMeasurement


class TemperatureSummaryRange(AccuweatherModel):
    minimum: ConditionMeasurement
    maximum: ConditionMeasurement


class TemperatureSummary(AccuweatherModel):
    """Temperature ranges over rolling windows ending at the observation."""

    past6_hour_range: TemperatureSummaryRange
    past12_hour_range: TemperatureSummaryRange
    past24_hour_range: TemperatureSummaryRange


class ConditionWind(AccuweatherModel):
    speed: ConditionMeasurement
    direction: WindDirection


class ConditionWindGust(AccuweatherModel):
    speed: ConditionMeasurement


class CurrentCondition(AccuweatherModel):
    """Snapshot observation for a location."""

    local_observation_date_time: datetime
    epoch_time: int
    weather_text: str
    weather_icon: int
    local_source: LocalSource | None = None
    is_day_time: bool
    temperature: ConditionMeasurement
    real_feel_temperature: ConditionMeasurement
    real_feel_temperature_shade: ConditionMeasurement
    relative_humidity: int
    dew_point: ConditionMeasurement
    wind: ConditionWind
    wind_gust: ConditionWindGust
    uv_index: int = Field(alias="UVIndex")
    uv_index_text: str = Field(alias="UVIndexText")
    visibility: ConditionMeasurement
    obstructions_to_visibility: str
    cloud_cover: int
    ceiling: ConditionMeasurement
    pressure: ConditionMeasurement
    pressure_tendency: PressureTendency
    past24_hour_temperature_departure: ConditionMeasurement
    apparent_temperature: ConditionMeasurement
    wind_chill_temperature: ConditionMeasurement
    wet_bulb_temperature: ConditionMeasurement
    precip1hr: ConditionMeasurement
    precipitation_summary: PrecipitationSummary
    temperature_summary: TemperatureSummary
    mobile_link: str
    link: str
    has_precipitation: bool
    precipitation_type: str | None = None
