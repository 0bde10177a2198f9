"""
Output Port: Reverse Geocoding Provider
Contrato para resolver coordenadas em fragmentos de endereço
"""
from abc import ABC, abstractmethod

from domain.entities.address_fragments import AddressFragments
from domain.value_objects.coordinates import Coordinates


class IReverseGeocodingProvider(ABC):
    """Interface para provedores de reverse geocoding"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex.: Nominatim)"""
        raise NotImplementedError

    @abstractmethod
    async def reverse(self, coordinates: Coordinates) -> AddressFragments:
        """
        Resolve coordenadas em fragmentos province/regency/district/village

        Raises:
            GeocodingUnavailableException: Se o provider falhar
        """
        raise NotImplementedError
