"""
Input Port: Interface para resolver coordenadas em código ADM4
"""
from abc import ABC, abstractmethod

from domain.value_objects.coordinates import Coordinates


class IResolveAdministrativeCodeUseCase(ABC):
    """Interface para caso de uso de resolução de código administrativo"""

    @abstractmethod
    async def execute(self, coordinates: Coordinates) -> str:
        """
        Resolve coordenadas no código do village (ADM4)

        Returns:
            Código de largura fixa do village

        Raises:
            GeocodingUnavailableException: Falha no reverse geocoding
            SourceUnavailableException: Falha no dataset de referência
            CodeNotResolvableException: Nenhum nível resolvido
        """
        pass
