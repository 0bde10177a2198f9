"""
AccuWeather Provider - fluxo em duas etapas
1. Geoposition search → Location Key
2. Current conditions para a Location Key
"""
from typing import Any, Dict, Optional

from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API, ResponseKeys
from domain.exceptions import ProviderUnavailableException
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.http.json_http_client import JsonHttpClient


class AccuWeatherProvider(IWeatherProvider):
    """Provider para AccuWeather Locations + Current Conditions API v1"""

    def __init__(self, api_key: str, http_client: Optional[JsonHttpClient] = None):
        self.api_key = api_key
        self.base_url = API.ACCUWEATHER_BASE_URL
        self.http = http_client or JsonHttpClient(upstream=self.provider_name)

    @property
    def provider_name(self) -> str:
        return "AccuWeather"

    @property
    def response_key(self) -> str:
        return ResponseKeys.ACCUWEATHER

    @tracer.wrap(resource="accuweather.get_location_key")
    async def get_location_key(self, coordinates: Coordinates) -> str:
        """Busca a Location Key para as coordenadas"""
        location = await self.http.get_json(
            f"{self.base_url}/locations/v1/cities/geoposition/search",
            params={"apikey": self.api_key, "q": coordinates.as_query_value()}
        )

        location_key = location.get("Key") if isinstance(location, dict) else None
        if not location_key:
            raise ProviderUnavailableException(
                "AccuWeather returned no location key",
                details={"upstream": self.provider_name, "q": coordinates.as_query_value()}
            )
        return str(location_key)

    @tracer.wrap(resource="accuweather.get_weather")
    async def get_weather(self, coordinates: Coordinates) -> Dict[str, Any]:
        location_key = await self.get_location_key(coordinates)
        return await self.http.get_json(
            f"{self.base_url}/currentconditions/v1/{location_key}",
            params={"apikey": self.api_key, "details": "true"}
        )
