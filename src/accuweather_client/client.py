"""AccuWeather data service client."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from rich.console import Console
from rich.pretty import Pretty

from .config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, Settings
from .decoder import decode_current_conditions, decode_daily_forecasts, decode_hourly_forecasts
from .exceptions import HttpStatusError, MissingLocationError, TransportError
from .log_setup import get_logger, request_extra
from .models import CurrentCondition, DailyForecastsAnswer, HourlyForecast
from .redaction import sanitize_text
from .request import (
    CURRENT_CONDITIONS_PATH,
    DAILY_PATH,
    DAILY_PERIODS,
    HOURLY_PATH,
    HOURLY_PERIODS,
    ApiRequest,
    build_request,
    validate_period,
)


class AccuweatherClient:
    """Typed client for the AccuWeather forecast and current-conditions API.

    Each public call performs exactly one blocking GET and either returns a
    fully decoded model or raises an ``AccuweatherError`` subclass. Nothing
    is retried or cached.

    ``base_url`` and ``transport`` exist so tests can point the client at a
    mock service; production code normally leaves both at their defaults.
    """

    def __init__(
        self,
        api_key: str,
        location: int | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
        logger: logging.Logger | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self._location = location
        self._base_url = base_url
        self.logger = logger or get_logger()
        self._client = httpx.Client(
            timeout=timeout_seconds,
            transport=transport,
            headers={
                "Accept": "application/json",
                "User-Agent": user_agent,
            },
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        logger: logging.Logger | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> AccuweatherClient:
        """Build a client from loaded settings."""
        return cls(
            settings.api_key,
            settings.location,
            base_url=str(settings.base_url),
            timeout_seconds=settings.timeout_seconds,
            user_agent=settings.user_agent,
            logger=logger,
            transport=transport,
        )

    def __enter__(self) -> AccuweatherClient:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self._base_url!r}, "
            f"location={self.location!r}, api_key='[REDACTED]')"
        )

    @property
    def location(self) -> int | None:
        return self._location

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        self._client.close()

    def set_location(self, location: int | None) -> None:
        """Replace the location used by subsequent calls."""
        self._location = location

    def debug(self, console: Console | None = None) -> None:
        """Pretty-print the client state, API key excluded."""
        summary = {
            "base_url": self._base_url,
            "location": self.location,
            "api_key_configured": bool(self.api_key),
            "timeout": self._client.timeout,
            "headers": dict(self._client.headers),
        }
        (console or Console()).print(Pretty(summary))

    def get_hourly_forecasts(self, period: int) -> list[HourlyForecast]:
        """Fetch hourly forecasts for the next ``period`` hours.

        ``period`` must be one of 1, 12, 24, 72 or 120.
        """
        validate_period(period, HOURLY_PERIODS, "hourly")
        request = self._build(
            HOURLY_PATH,
            endpoint="hourly forecasts",
            period=period,
            query={"details": "true", "metric": "true"},
        )
        response = self._get(request)
        forecasts = decode_hourly_forecasts(response.content)
        if len(forecasts) != period:
            self.logger.warning(
                "AccuWeather returned %d hourly forecasts for a %d hour period",
                len(forecasts), period,
            )
        return forecasts

    def get_daily_forecasts(self, period: int) -> DailyForecastsAnswer:
        """Fetch daily forecasts for the next ``period`` days.

        ``period`` must be one of 1, 5, 10 or 15.
        """
        validate_period(period, DAILY_PERIODS, "daily")
        request = self._build(
            DAILY_PATH,
            endpoint="daily forecasts",
            period=period,
            query={"details": "true", "metric": "true"},
        )
        response = self._get(request)
        return decode_daily_forecasts(response.content)

    def get_current_conditions(self) -> list[CurrentCondition]:
        """Fetch current conditions; the API answers with a single entry."""
        request = self._build(
            CURRENT_CONDITIONS_PATH,
            endpoint="current conditions",
            query={"details": "true", "language": "en-us"},
        )
        response = self._get(request)
        return decode_current_conditions(response.content)

    def _build(
        self,
        path_template: str,
        *,
        endpoint: str,
        query: dict[str, str],
        **path_params: Any,
    ) -> ApiRequest:
        if self._location is None:
            raise MissingLocationError(
                f"AccuWeather {endpoint} needs a location; call set_location() first."
            )
        return build_request(
            self._base_url,
            path_template,
            {**path_params, "location": self._location},
            {"apikey": self.api_key, **query},
            endpoint=endpoint,
        )

    def _get(self, request: ApiRequest) -> httpx.Response:
        self.logger.debug(
            "AccuWeather %s request: GET %s",
            request.endpoint,
            request.redacted_url(),
            extra=request_extra(request.endpoint, request.url),
        )
        try:
            response = self._client.get(request.url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            self.logger.warning(
                "AccuWeather %s failed with HTTP %d",
                request.endpoint,
                status,
                extra=request_extra(request.endpoint, request.url, status_code=status),
            )
            raise HttpStatusError(
                f"AccuWeather {request.endpoint} failed with status {status} "
                f"at {request.redacted_url()}: {sanitize_text(exc.response.text[:300])}",
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            self.logger.warning(
                "AccuWeather %s request failed (%s)",
                request.endpoint,
                type(exc).__name__,
                extra=request_extra(
                    request.endpoint, request.url, error_type=type(exc).__name__
                ),
            )
            raise TransportError(
                f"AccuWeather {request.endpoint} request failed at "
                f"{request.redacted_url()}: {sanitize_text(str(exc))}"
            ) from exc
        return response
