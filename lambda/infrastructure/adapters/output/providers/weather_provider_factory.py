"""
Weather Provider Factory - criação centralizada dos provedores e do resolvedor ADM4
"""
from typing import List, Optional

from application.ports.input.resolve_administrative_code_port import IResolveAdministrativeCodeUseCase
from application.ports.output.weather_provider_port import (
    IAdministrativeCodeWeatherProvider,
    IWeatherProvider
)
from application.use_cases.resolve_administrative_code_use_case import ResolveAdministrativeCodeUseCase
from infrastructure.adapters.output.providers.accuweather import AccuWeatherProvider
from infrastructure.adapters.output.providers.bmkg import BmkgProvider
from infrastructure.adapters.output.providers.nominatim import NominatimGeocodingProvider
from infrastructure.adapters.output.providers.openweather import OpenWeatherProvider
from infrastructure.adapters.output.providers.tomorrow import TomorrowProvider
from infrastructure.adapters.output.reference.kodewilayah_reference_loader import KodeWilayahReferenceLoader
from shared.config.logger_config import get_logger
from shared.config.settings import Settings

logger = get_logger(child=True)


class WeatherProviderFactory:
    """
    Factory que recebe Settings imutável e monta os adapters.
    Mantém lazy-loading e singleton para reuso em execução quente da Lambda.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._direct_providers: Optional[List[IWeatherProvider]] = None
        self._bmkg: Optional[IAdministrativeCodeWeatherProvider] = None
        self._code_resolver: Optional[IResolveAdministrativeCodeUseCase] = None

        missing = settings.missing_api_keys()
        if missing:
            logger.warning("Weather provider API keys not configured", missing=missing)

    def get_direct_providers(self) -> List[IWeatherProvider]:
        """OpenWeather, Tomorrow.io e AccuWeather (consultados por coordenadas)"""
        if self._direct_providers is None:
            self._direct_providers = [
                OpenWeatherProvider(api_key=self.settings.openweather_api_key),
                TomorrowProvider(api_key=self.settings.tomorrow_api_key),
                AccuWeatherProvider(api_key=self.settings.accuweather_api_key),
            ]
        return self._direct_providers

    def get_administrative_code_provider(self) -> IAdministrativeCodeWeatherProvider:
        """BMKG (consultado por código ADM4)"""
        if self._bmkg is None:
            self._bmkg = BmkgProvider()
        return self._bmkg

    def get_code_resolver(self) -> IResolveAdministrativeCodeUseCase:
        """Nominatim + dataset Kemendagri → código ADM4"""
        if self._code_resolver is None:
            self._code_resolver = ResolveAdministrativeCodeUseCase(
                geocoding_provider=NominatimGeocodingProvider(
                    user_agent=self.settings.geocoder_user_agent
                ),
                reference_loader=KodeWilayahReferenceLoader(
                    source_url=self.settings.reference_data_url
                )
            )
        return self._code_resolver


# Factory singleton global
_factory_instance: Optional[WeatherProviderFactory] = None


def get_weather_provider_factory(settings: Settings) -> WeatherProviderFactory:
    """Retorna singleton da factory"""
    global _factory_instance

    if _factory_instance is None:
        _factory_instance = WeatherProviderFactory(settings=settings)

    return _factory_instance
