"""Forecast client: fetches weather forecasts from either backend route."""

import logging
from typing import Protocol

import httpx

from apimsample.config.schema import ApiSettings
from apimsample.models.common import ApiSource
from apimsample.models.fetch import FetchErrorKind, FetchResult
from apimsample.models.forecast import parse_forecasts

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"

ENDPOINTS: dict[ApiSource, str] = {
    ApiSource.DIRECT_AUTH: "/direct-auth/weatherforecast",
    ApiSource.APIM_AUTH: "/apim-auth/weatherforecast",
}


class ForecastSource(Protocol):
    async def fetch(self, source: ApiSource | str) -> FetchResult: ...


class ForecastClient:
    def __init__(self, http: httpx.AsyncClient, settings: ApiSettings):
        self.http = http
        self.settings = settings

    async def fetch(self, source: ApiSource | str) -> FetchResult:
        """Fetch forecasts from the route selected by ``source``.

        Unknown sources raise ValueError. Every other failure (transport
        fault, non-2xx status, unparseable body) comes back as a failed
        FetchResult.
        """
        source = ApiSource(source)
        endpoint = ENDPOINTS[source]
        # Sent on the DirectAuth route too, which does not check it.
        headers = {SUBSCRIPTION_KEY_HEADER: self.settings.api_key}

        try:
            resp = await self.http.get(endpoint, headers=headers)
        except httpx.HTTPError as e:
            logger.error("Error fetching weather forecast data from %s: %r", source, e)
            return FetchResult.failed(
                source, FetchErrorKind.TRANSPORT, f"Error: {_describe(e)}"
            )

        if not resp.is_success:
            logger.error(
                "API request to %s failed with status code %d",
                source, resp.status_code,
            )
            return FetchResult.failed(
                source,
                FetchErrorKind.STATUS,
                f"API returned status code: {resp.status_code} - {resp.reason_phrase}",
                status_code=resp.status_code,
            )

        try:
            forecasts = parse_forecasts(resp.json())
        except (ValueError, RecursionError) as e:
            logger.error("Could not parse forecast response from %s: %s", source, e)
            return FetchResult.failed(
                source, FetchErrorKind.DESERIALIZATION, f"Error: {_describe(e)}"
            )

        logger.info("Fetched %d forecasts from %s", len(forecasts), source)
        return FetchResult.ok(source, forecasts)


def _describe(exc: Exception) -> str:
    # Some httpx errors carry an empty message
    return str(exc) or type(exc).__name__
