"""
Validators Utility
Input validation with domain exceptions
"""
from typing import Optional, Type

from domain.exceptions import InvalidCoordinatesException, MissingCoordinatesException
from domain.value_objects.coordinates import Coordinates


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_range(
        value: float,
        min_val: float,
        max_val: float,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> float:
        """
        Valida se valor numérico está dentro do range

        Args:
            value: Valor a validar
            min_val: Valor mínimo permitido
            max_val: Valor máximo permitido
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            Valor validado

        Raises:
            exception_class: Se valor fora do range
        """
        if not (min_val <= value <= max_val):
            # Tenta criar exceção com details se suportado
            try:
                raise exception_class(
                    f"{param_name} must be between {min_val} and {max_val}",
                    details={
                        param_name: value,
                        "min": min_val,
                        "max": max_val
                    }
                )
            except TypeError:
                # Fallback: exceção sem details
                raise exception_class(
                    f"{param_name} must be between {min_val} and {max_val}"
                )
        return value

    @staticmethod
    def validate_float(
        value: str,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> float:
        """
        Converte string para float

        Raises:
            exception_class: Se não for numérica (inclui nan/inf)
        """
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise exception_class(f"Invalid {param_name} format: {value}")
        if number != number or number in (float('inf'), float('-inf')):
            raise exception_class(f"Invalid {param_name} format: {value}")
        return number


class CoordinatesValidator:
    """Validate lat/lon query parameters"""

    MISSING_MESSAGE = "Missing lat or lon query parameter"

    @staticmethod
    def from_query_params(lat: Optional[str], lon: Optional[str]) -> Coordinates:
        """
        Valida e converte parâmetros de query em Coordinates

        Args:
            lat: Latitude como string (query param)
            lon: Longitude como string (query param)

        Returns:
            Coordinates validado

        Raises:
            MissingCoordinatesException: Se lat ou lon ausente/vazio
            InvalidCoordinatesException: Se não numérico ou fora do range
        """
        if not lat or not lat.strip() or not lon or not lon.strip():
            raise MissingCoordinatesException(
                CoordinatesValidator.MISSING_MESSAGE,
                details={"lat": lat, "lon": lon}
            )

        latitude = GenericValidator.validate_float(lat.strip(), "lat", InvalidCoordinatesException)
        longitude = GenericValidator.validate_float(lon.strip(), "lon", InvalidCoordinatesException)

        GenericValidator.validate_range(latitude, -90.0, 90.0, "lat", InvalidCoordinatesException)
        GenericValidator.validate_range(longitude, -180.0, 180.0, "lon", InvalidCoordinatesException)

        return Coordinates(latitude=latitude, longitude=longitude)
