"""
Value Object para coordenadas geográficas
Garante imutabilidade e validação no domínio
"""
from dataclasses import dataclass
from typing import Tuple

from domain.exceptions import InvalidCoordinatesException


@dataclass(frozen=True)
class Coordinates:
    """
    Value Object para coordenadas geográficas

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__
    - Formatação para os parâmetros dos provedores
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if not (-90 <= self.latitude <= 90):
            raise InvalidCoordinatesException(
                f"Invalid latitude: {self.latitude}. Must be between -90 and 90",
                details={"lat": self.latitude, "min": -90, "max": 90}
            )
        if not (-180 <= self.longitude <= 180):
            raise InvalidCoordinatesException(
                f"Invalid longitude: {self.longitude}. Must be between -180 and 180",
                details={"lon": self.longitude, "min": -180, "max": 180}
            )

    def to_tuple(self) -> Tuple[float, float]:
        """Retorna coordenadas como tupla (lat, lon)"""
        return (self.latitude, self.longitude)

    def as_query_value(self) -> str:
        """Formato 'lat,lon' usado por Tomorrow.io e AccuWeather"""
        return f"{self.latitude},{self.longitude}"

    def __str__(self) -> str:
        """String representation amigável"""
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.4f}°{lat_dir}, {abs(self.longitude):.4f}°{lon_dir}"
