"""
Nominatim Geocoding Provider
Reverse geocoding OpenStreetMap → fragmentos de endereço indonésios
"""
from typing import Optional

from ddtrace import tracer

from application.ports.output.geocoding_provider_port import IReverseGeocodingProvider
from domain.constants import API, Geocoding
from domain.entities.address_fragments import AddressFragments
from domain.exceptions import GeocodingUnavailableException
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.http.json_http_client import JsonHttpClient


class NominatimGeocodingProvider(IReverseGeocodingProvider):
    """Provider de reverse geocoding do Nominatim"""

    def __init__(
        self,
        user_agent: str = Geocoding.DEFAULT_USER_AGENT,
        http_client: Optional[JsonHttpClient] = None
    ):
        # Política de uso do Nominatim exige identificador estável do cliente
        self.user_agent = user_agent
        self.base_url = API.NOMINATIM_REVERSE_URL
        self.http = http_client or JsonHttpClient(
            upstream="Nominatim",
            exception_class=GeocodingUnavailableException
        )

    @property
    def provider_name(self) -> str:
        return "Nominatim"

    @tracer.wrap(resource="nominatim.reverse")
    async def reverse(self, coordinates: Coordinates) -> AddressFragments:
        params = {
            "lat": coordinates.latitude,
            "lon": coordinates.longitude,
            "format": Geocoding.FORMAT,
            "zoom": Geocoding.ZOOM,
            "addressdetails": 1,
        }
        data = await self.http.get_json(
            self.base_url,
            params=params,
            headers={"User-Agent": self.user_agent}
        )

        address = data.get("address") if isinstance(data, dict) else None
        if not isinstance(address, dict):
            raise GeocodingUnavailableException(
                "Nominatim returned no address for coordinates",
                details={
                    "lat": coordinates.latitude,
                    "lon": coordinates.longitude,
                    "error": data.get("error") if isinstance(data, dict) else None
                }
            )

        return AddressFragments.from_address(address)
