"""Shared building blocks for AccuWeather response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


def to_wire_name(field_name: str) -> str:
    """Translate a snake_case field name into the API's PascalCase key.

    Each underscore-separated word gets its first character upper-cased and
    the rest left alone, so ``past3_hours`` maps to ``Past3Hours`` and
    ``precip1hr`` to ``Precip1hr``. Acronym keys such as ``UVIndex`` do not
    follow this rule and are declared with an explicit alias on the field.
    """
    return "".join(word[:1].upper() + word[1:] for word in field_name.split("_"))


class AccuweatherModel(BaseModel):
    """Base for immutable records decoded from AccuWeather payloads."""

    model_config = ConfigDict(
        alias_generator=to_wire_name,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize back to the API's JSON shape."""
        return self.model_dump(by_alias=True, mode="json")


class Measurement(AccuweatherModel):
    """A value with its unit, e.g. ``7.2 C``."""

    value: float
    unit: str
    unit_type: int

    def __str__(self) -> str:
        return f"{self.value} {self.unit}"

    def __repr__(self) -> str:
        return f"{self.value} {self.unit} ({self.unit_type})"


class ConditionMeasurement(AccuweatherModel):
    """A measurement reported in both metric and imperial units."""

    metric: Measurement
    imperial: Measurement

    def __str__(self) -> str:
        return f"{self.metric} / {self.imperial}"


class WindDirection(AccuweatherModel):
    """Wind direction in degrees plus its compass label."""

    degrees: float
    localized: str
    english: str


class Wind(AccuweatherModel):
    """Wind speed and direction in forecast payloads."""

    speed: Measurement
    direction: WindDirection


class WindGust(AccuweatherModel):
    """Wind gust in hourly forecasts; the API usually omits the direction."""

    speed: Measurement
    direction: WindDirection | None = None


class Temperature(AccuweatherModel):
    """Temperature range for a forecast day."""

    maximum: Measurement
    minimum: Measurement
