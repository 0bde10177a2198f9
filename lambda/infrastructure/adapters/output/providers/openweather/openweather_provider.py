"""OpenWeather Provider - current weather por coordenadas (pass-through)"""
from typing import Any, Dict, Optional

from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API, ResponseKeys
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.http.json_http_client import JsonHttpClient


class OpenWeatherProvider(IWeatherProvider):
    """Provider para OpenWeather Current Weather Data 2.5"""

    def __init__(self, api_key: str, http_client: Optional[JsonHttpClient] = None):
        self.api_key = api_key
        self.base_url = API.OPENWEATHER_URL
        self.http = http_client or JsonHttpClient(upstream=self.provider_name)

    @property
    def provider_name(self) -> str:
        return "OpenWeather"

    @property
    def response_key(self) -> str:
        return ResponseKeys.OPENWEATHER

    @tracer.wrap(resource="openweather.get_weather")
    async def get_weather(self, coordinates: Coordinates) -> Dict[str, Any]:
        params = {
            "lat": coordinates.latitude,
            "lon": coordinates.longitude,
            "appid": self.api_key,
            "units": API.UNITS_METRIC,
        }
        return await self.http.get_json(self.base_url, params=params)
