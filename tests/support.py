"""AccuWeather wire-format payload builders shared by the tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx

API_KEY = "abcdefg"
LOCATION = 12345
BASE_URL = "https://test-accuweather.example.com"

HOURLY_TEMPERATURES = [12.8, 12.1, 11.4, 10.9, 10.2, 9.7, 9.3, 8.8, 8.4, 7.9, 7.5, 7.2]


def _measurement(value: float, unit: str, unit_type: int) -> dict[str, Any]:
    return {"Value": value, "Unit": unit, "UnitType": unit_type}


def _condition_measurement(
    metric: float, metric_unit: str, metric_type: int,
    imperial: float, imperial_unit: str, imperial_type: int,
) -> dict[str, Any]:
    return {
        "Metric": _measurement(metric, metric_unit, metric_type),
        "Imperial": _measurement(imperial, imperial_unit, imperial_type),
    }


def _temperature(minimum: float, maximum: float) -> dict[str, Any]:
    return {
        "Minimum": _measurement(minimum, "C", 17),
        "Maximum": _measurement(maximum, "C", 17),
    }


def _direction(degrees: float, label: str) -> dict[str, Any]:
    return {"Degrees": degrees, "Localized": label, "English": label}


def hourly_entry(index: int, temperature: float) -> dict[str, Any]:
    return {
        "DateTime": f"2019-06-05T{8 + index:02d}:00:00+02:00",
        "EpochDateTime": 1559714400 + 3600 * index,
        "WeatherIcon": 7,
        "IconPhrase": "Cloudy",
        "HasPrecipitation": False,
        "IsDaylight": True,
        "Temperature": _measurement(temperature, "C", 17),
        "RealFeelTemperature": _measurement(temperature - 1.5, "C", 17),
        "WetBulbTemperature": _measurement(temperature - 2.1, "C", 17),
        "DewPoint": _measurement(3.4, "C", 17),
        "Wind": {
            "Speed": _measurement(11.1, "km/h", 7),
            "Direction": _direction(248, "WSW"),
        },
        "WindGust": {"Speed": _measurement(20.4, "km/h", 7)},
        "RelativeHumidity": 71,
        "Visibility": _measurement(16.1, "km", 6),
        "Ceiling": _measurement(9144.0, "m", 5),
        "UVIndex": 1,
        "UVIndexText": "Low",
        "PrecipitationProbability": 20,
        "RainProbability": 20,
        "SnowProbability": 0,
        "IceProbability": 0,
        "TotalLiquid": _measurement(0.0, "mm", 3),
        "Rain": _measurement(0.0, "mm", 3),
        "Snow": _measurement(0.0, "cm", 4),
        "Ice": _measurement(0.0, "mm", 3),
        "CloudCover": 88,
        "MobileLink": "http://m.accuweather.com/en/fr/paris/623/hourly-weather-forecast/623",
        "Link": "http://www.accuweather.com/en/fr/paris/623/hourly-weather-forecast/623",
    }


def _day_part(short_phrase: str, icon: int) -> dict[str, Any]:
    return {
        "Icon": icon,
        "IconPhrase": short_phrase,
        "HasPrecipitation": False,
        "ShortPhrase": short_phrase,
        "LongPhrase": f"{short_phrase}; breezy in the afternoon",
        "PrecipitationProbability": 25,
        "ThunderstormProbability": 5,
        "RainProbability": 25,
        "SnowProbability": 0,
        "IceProbability": 0,
        "Wind": {
            "Speed": _measurement(14.8, "km/h", 7),
            "Direction": _direction(236, "SW"),
        },
        "WindGust": {
            "Speed": _measurement(38.9, "km/h", 7),
            "Direction": _direction(241, "WSW"),
        },
        "TotalLiquid": _measurement(0.5, "mm", 3),
        "Rain": _measurement(0.5, "mm", 3),
        "Snow": _measurement(0.0, "cm", 4),
        "Ice": _measurement(0.0, "mm", 3),
        "HoursOfPrecipitation": 0.5,
        "HoursOfRain": 0.5,
        "HoursOfSnow": 0.0,
        "HoursOfIce": 0.0,
        "CloudCover": 69,
    }


def daily_entry(index: int, minimum: float, maximum: float) -> dict[str, Any]:
    day = 5 + index
    epoch = 1559710800 + 86400 * index
    return {
        "Date": f"2019-06-{day:02d}T07:00:00+02:00",
        "EpochDate": epoch,
        "Sun": {
            "Rise": f"2019-06-{day:02d}T05:48:00+02:00",
            "EpochRise": epoch - 4320,
            "Set": f"2019-06-{day:02d}T21:52:00+02:00",
            "EpochSet": epoch + 53520,
        },
        "Moon": {
            "Rise": f"2019-06-{day:02d}T07:12:00+02:00",
            "EpochRise": epoch + 720,
            "Set": f"2019-06-{day:02d}T23:41:00+02:00",
            "EpochSet": epoch + 59460,
            "Phase": "WaxingCrescent",
            "Age": 2 + index,
        },
        "Temperature": _temperature(minimum, maximum),
        "RealFeelTemperature": _temperature(minimum - 1.2, maximum + 0.8),
        "RealFeelTemperatureShade": _temperature(minimum - 1.2, maximum - 1.9),
        "HoursOfSun": 7.3,
        "DegreeDaySummary": {
            "Heating": _measurement(6.0, "C", 17),
            "Cooling": _measurement(0.0, "C", 17),
        },
        "AirAndPollen": [
            {
                "Name": "AirQuality",
                "Value": 23,
                "Category": "Good",
                "CategoryValue": 1,
                "Type": "Ozone",
            },
            {"Name": "Grass", "Value": 12, "Category": "Moderate", "CategoryValue": 2},
            {"Name": "UVIndex", "Value": 6, "Category": "High", "CategoryValue": 3},
        ],
        "Day": _day_part("Intervals of clouds and sun", 4),
        "Night": _day_part("Partly cloudy", 35),
        "Sources": ["AccuWeather"],
        "MobileLink": "http://m.accuweather.com/en/fr/paris/623/daily-weather-forecast/623",
        "Link": "http://www.accuweather.com/en/fr/paris/623/daily-weather-forecast/623",
    }


def current_condition_entry() -> dict[str, Any]:
    return {
        "LocalObservationDateTime": "2019-06-05T16:50:00+02:00",
        "EpochTime": 1559746200,
        "WeatherText": "Sunny",
        "WeatherIcon": 1,
        "HasPrecipitation": False,
        "PrecipitationType": None,
        "IsDayTime": True,
        "Temperature": _condition_measurement(27.9, "C", 17, 82.0, "F", 18),
        "RealFeelTemperature": _condition_measurement(29.4, "C", 17, 85.0, "F", 18),
        "RealFeelTemperatureShade": _condition_measurement(26.2, "C", 17, 79.0, "F", 18),
        "RelativeHumidity": 38,
        "DewPoint": _condition_measurement(12.2, "C", 17, 54.0, "F", 18),
        "Wind": {
            "Direction": _direction(270, "W"),
            "Speed": _condition_measurement(14.8, "km/h", 7, 9.2, "mi/h", 9),
        },
        "WindGust": {"Speed": _condition_measurement(27.8, "km/h", 7, 17.3, "mi/h", 9)},
        "UVIndex": 5,
        "UVIndexText": "Moderate",
        "Visibility": _condition_measurement(16.1, "km", 6, 10.0, "mi", 2),
        "ObstructionsToVisibility": "",
        "CloudCover": 10,
        "Ceiling": _condition_measurement(12192.0, "m", 5, 40000.0, "ft", 0),
        "Pressure": _condition_measurement(1016.9, "mb", 14, 30.03, "inHg", 12),
        "PressureTendency": {"LocalizedText": "Steady", "Code": "S"},
        "Past24HourTemperatureDeparture": _condition_measurement(3.1, "C", 17, 6.0, "F", 18),
        "ApparentTemperature": _condition_measurement(28.3, "C", 17, 83.0, "F", 18),
        "WindChillTemperature": _condition_measurement(27.8, "C", 17, 82.0, "F", 18),
        "WetBulbTemperature": _condition_measurement(18.1, "C", 17, 65.0, "F", 18),
        "Precip1hr": _condition_measurement(0.0, "mm", 3, 0.0, "in", 1),
        "PrecipitationSummary": {
            "Precipitation": _condition_measurement(0.0, "mm", 3, 0.0, "in", 1),
            "PastHour": _condition_measurement(0.0, "mm", 3, 0.0, "in", 1),
            "Past3Hours": _condition_measurement(0.0, "mm", 3, 0.0, "in", 1),
            "Past6Hours": _condition_measurement(0.0, "mm", 3, 0.0, "in", 1),
            "Past9Hours": _condition_measurement(0.0, "mm", 3, 0.0, "in", 1),
            "Past12Hours": _condition_measurement(0.3, "mm", 3, 0.01, "in", 1),
            "Past18Hours": _condition_measurement(0.3, "mm", 3, 0.01, "in", 1),
            "Past24Hours": _condition_measurement(1.8, "mm", 3, 0.07, "in", 1),
        },
        "TemperatureSummary": {
            "Past6HourRange": {
                "Minimum": _condition_measurement(19.4, "C", 17, 67.0, "F", 18),
                "Maximum": _condition_measurement(27.9, "C", 17, 82.0, "F", 18),
            },
            "Past12HourRange": {
                "Minimum": _condition_measurement(13.3, "C", 17, 56.0, "F", 18),
                "Maximum": _condition_measurement(27.9, "C", 17, 82.0, "F", 18),
            },
            "Past24HourRange": {
                "Minimum": _condition_measurement(13.3, "C", 17, 56.0, "F", 18),
                "Maximum": _condition_measurement(27.9, "C", 17, 82.0, "F", 18),
            },
        },
        "MobileLink": "http://m.accuweather.com/en/fr/paris/623/current-weather/623",
        "Link": "http://www.accuweather.com/en/fr/paris/623/current-weather/623",
    }


def hourly_payload() -> list[dict[str, Any]]:
    return [hourly_entry(i, temp) for i, temp in enumerate(HOURLY_TEMPERATURES)]


def daily_payload() -> dict[str, Any]:
    ranges = [(5.4, 16.7), (8.1, 19.2), (9.9, 21.5), (11.0, 23.4), (12.6, 24.8)]
    return {
        "Headline": {
            "EffectiveDate": "2019-06-06T08:00:00+02:00",
            "EffectiveEpochDate": 1559800800,
            "Severity": 4,
            "Text": "Pleasant this weekend",
            "Category": "mild",
            "EndDate": "2019-06-08T20:00:00+02:00",
            "EndEpochDate": 1560016800,
            "MobileLink": "http://m.accuweather.com/en/fr/paris/623/extended-weather-forecast/623",
            "Link": "http://www.accuweather.com/en/fr/paris/623/daily-weather-forecast/623",
        },
        "DailyForecasts": [
            daily_entry(i, minimum, maximum) for i, (minimum, maximum) in enumerate(ranges)
        ],
    }


def conditions_payload() -> list[dict[str, Any]]:
    return [current_condition_entry()]


def keyed_response(payload: Any) -> Callable[[httpx.Request], httpx.Response]:
    """Answer 403 unless the request carries the expected API key."""

    def _respond(request: httpx.Request) -> httpx.Response:
        if request.url.params.get("apikey") != API_KEY:
            return httpx.Response(
                403,
                json={
                    "Code": "Unauthorized",
                    "Message": "Api Authorization failed",
                    "Reference": request.url.path,
                },
            )
        return httpx.Response(200, json=payload)

    return _respond
