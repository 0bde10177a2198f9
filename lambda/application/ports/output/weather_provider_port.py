"""Weather Provider Ports - Interfaces para provedores climáticos"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from domain.value_objects.coordinates import Coordinates


class IWeatherProvider(ABC):
    """
    Provedor consultado diretamente por coordenadas.
    Retorna o JSON bruto do upstream (pass-through).
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenWeather')"""
        pass

    @property
    @abstractmethod
    def response_key(self) -> str:
        """Chave na resposta agregada (ex: 'openWeather')"""
        pass

    @abstractmethod
    async def get_weather(self, coordinates: Coordinates) -> Dict[str, Any]:
        """
        Busca dados de clima para as coordenadas

        Raises:
            ProviderUnavailableException: Se o provider falhar
        """
        pass


class IAdministrativeCodeWeatherProvider(ABC):
    """Provedor indexado por código administrativo ADM4 (BMKG)"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @property
    @abstractmethod
    def response_key(self) -> str:
        pass

    @abstractmethod
    async def get_forecast(self, adm4_code: str) -> Dict[str, Any]:
        """
        Busca previsão para o código ADM4 (largura fixa)

        Raises:
            ProviderUnavailableException: Se o provider falhar
        """
        pass
