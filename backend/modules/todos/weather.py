"""
Weather provider client.

The provider serves a JSON array of ``{"date": "MM-dd", "weather": "..."}``
entries; today's entry is the snapshot stored on new todos.
"""

import logging
from datetime import date
from typing import Callable, Optional

import httpx

from .interfaces import IWeatherClient
from .exceptions import WeatherFetchError

logger = logging.getLogger(__name__)


class WeatherClient(IWeatherClient):
    """Fetches today's weather from the configured HTTP endpoint."""

    def __init__(
        self,
        api_url: str,
        timeout: float = 10.0,
        today: Optional[Callable[[], date]] = None,
    ):
        self._api_url = api_url
        self._timeout = timeout
        self._today = today or date.today

    async def get_today_weather(self) -> str:
        entries = await self._fetch_entries()
        if not entries:
            raise WeatherFetchError("No weather data")

        today_key = self._today().strftime("%m-%d")
        for entry in entries:
            if entry.get("date") != today_key:
                continue
            weather = entry.get("weather")
            if not isinstance(weather, str) or not weather:
                raise WeatherFetchError(f"Malformed weather entry for {today_key}")
            return weather

        raise WeatherFetchError(f"No weather data for {today_key}")

    async def _fetch_entries(self) -> list[dict]:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self._api_url, timeout=self._timeout)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            logger.warning(f"Weather provider request failed: {e}")
            raise WeatherFetchError(f"Failed to fetch weather data: {e}") from e
        except ValueError as e:
            logger.warning(f"Weather provider returned invalid JSON: {e}")
            raise WeatherFetchError("Weather provider returned invalid JSON") from e

        if payload is None:
            return []
        if not isinstance(payload, list) or not all(isinstance(entry, dict) for entry in payload):
            raise WeatherFetchError("Weather provider returned an unexpected payload")
        return payload
