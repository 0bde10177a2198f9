"""Infrastructure Providers - Implementações de provedores climáticos e de geocoding"""

from infrastructure.adapters.output.providers.openweather import OpenWeatherProvider
from infrastructure.adapters.output.providers.tomorrow import TomorrowProvider
from infrastructure.adapters.output.providers.accuweather import AccuWeatherProvider
from infrastructure.adapters.output.providers.bmkg import BmkgProvider
from infrastructure.adapters.output.providers.nominatim import NominatimGeocodingProvider
from infrastructure.adapters.output.providers.weather_provider_factory import (
    WeatherProviderFactory,
    get_weather_provider_factory
)

__all__ = [
    'OpenWeatherProvider',
    'TomorrowProvider',
    'AccuWeatherProvider',
    'BmkgProvider',
    'NominatimGeocodingProvider',
    'WeatherProviderFactory',
    'get_weather_provider_factory'
]
