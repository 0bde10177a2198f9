"""Tomorrow.io Provider - timeline de temperatura por coordenadas (pass-through)"""
from typing import Any, Dict, Optional

from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API, ResponseKeys
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.http.json_http_client import JsonHttpClient


class TomorrowProvider(IWeatherProvider):
    """Provider para Tomorrow.io Timelines API v4"""

    def __init__(self, api_key: str, http_client: Optional[JsonHttpClient] = None):
        self.api_key = api_key
        self.base_url = API.TOMORROW_TIMELINES_URL
        self.http = http_client or JsonHttpClient(upstream=self.provider_name)

    @property
    def provider_name(self) -> str:
        return "Tomorrow.io"

    @property
    def response_key(self) -> str:
        return ResponseKeys.TOMORROW

    @tracer.wrap(resource="tomorrow.get_weather")
    async def get_weather(self, coordinates: Coordinates) -> Dict[str, Any]:
        params = {
            "location": coordinates.as_query_value(),
            "fields": "temperature",
            "units": API.UNITS_METRIC,
            "apikey": self.api_key,
        }
        return await self.http.get_json(self.base_url, params=params)
