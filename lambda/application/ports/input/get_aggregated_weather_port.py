"""
Input Port: Interface para buscar clima agregado de todos os provedores
"""
from abc import ABC, abstractmethod

from domain.entities.aggregated_weather import AggregatedWeather
from domain.value_objects.coordinates import Coordinates


class IGetAggregatedWeatherUseCase(ABC):
    """Interface para caso de uso de agregação de clima"""

    @abstractmethod
    async def execute(self, coordinates: Coordinates) -> AggregatedWeather:
        """
        Busca clima em todos os provedores com falhas isoladas por provedor

        Raises:
            ProviderUnavailableException: Se todos os provedores falharem
        """
        pass
