"""Typed model for the hourly forecasts endpoint."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import AccuweatherModel, Measurement, Wind, WindGust


class HourlyForecast(AccuweatherModel):
    """Forecast reading for a single hour."""

    ceiling: Measurement
    cloud_cover: int
    date_time: datetime
    dew_point: Measurement
    epoch_date_time: int
    has_precipitation: bool = False
    ice: Measurement
    ice_probability: int
    icon_phrase: str
    is_daylight: bool
    link: str
    mobile_link: str
    precipitation_probability: int
    rain: Measurement
    rain_probability: int
    real_feel_temperature: Measurement
    relative_humidity: int
    snow: Measurement
    snow_probability: int
    temperature: Measurement
    total_liquid: Measurement
    uv_index: int = Field(alias="UVIndex")
    uv_index_text: str = Field(alias="UVIndexText")
    visibility: Measurement
    weather_icon: int
    wet_bulb_temperature: Measurement
    wind: Wind
    wind_gust: WindGust
