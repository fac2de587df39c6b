"""Request construction for AccuWeather endpoints."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any, Literal

import httpx
from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidParameterError, RequestBuildError
from .redaction import sanitize_text

HOURLY_PERIODS: tuple[int, ...] = (1, 12, 24, 72, 120)
DAILY_PERIODS: tuple[int, ...] = (1, 5, 10, 15)

HOURLY_PATH = "forecasts/v1/hourly/{period}hour/{location}"
DAILY_PATH = "forecasts/v1/daily/{period}day/{location}"
CURRENT_CONDITIONS_PATH = "currentconditions/v1/{location}"


class ApiRequest(BaseModel):
    """Fully-formed request descriptor ready to hand to the transport."""

    model_config = ConfigDict(frozen=True)

    endpoint: str
    method: Literal["GET"] = "GET"
    url: str

    def redacted_url(self) -> str:
        return sanitize_text(self.url)


def validate_period(period: int, allowed: Collection[int], kind: str) -> int:
    """Return ``period`` if it is one of ``allowed``, else raise."""
    # 12.0 == 12 and True == 1, so membership alone is not enough.
    if isinstance(period, bool) or not isinstance(period, int) or period not in allowed:
        choices = ", ".join(str(value) for value in allowed)
        raise InvalidParameterError(
            f"Invalid {kind} forecast period {period!r}; expected one of {choices}.",
            parameter="period",
            value=period,
        )
    return period


def build_request(
    base_url: str,
    path_template: str,
    path_params: Mapping[str, Any],
    query_params: Mapping[str, str],
    *,
    endpoint: str,
) -> ApiRequest:
    """Join base URL and path, and percent-encode the query parameters.

    Raises RequestBuildError when the base URL is malformed or when the
    template references a parameter that was not supplied.
    """
    try:
        path = path_template.format(**path_params)
    except (KeyError, IndexError) as exc:
        raise RequestBuildError(
            f"Missing path parameter {exc} for {endpoint} path '{path_template}'."
        ) from exc

    raw_url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    try:
        url = httpx.URL(raw_url, params=dict(query_params))
    except httpx.InvalidURL as exc:
        raise RequestBuildError(f"Malformed base URL '{base_url}': {exc}") from exc

    if url.scheme not in ("http", "https") or not url.host:
        raise RequestBuildError(
            f"Malformed base URL '{base_url}': expected an absolute http(s) URL."
        )
    return ApiRequest(endpoint=endpoint, url=str(url))
