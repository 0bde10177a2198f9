"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .resolve_administrative_code_use_case import ResolveAdministrativeCodeUseCase
from .get_aggregated_weather_use_case import GetAggregatedWeatherUseCase

__all__ = [
    'ResolveAdministrativeCodeUseCase',
    'GetAggregatedWeatherUseCase'
]
