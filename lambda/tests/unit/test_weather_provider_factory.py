"""Testes Unitários - WeatherProviderFactory"""
import pytest

from application.use_cases.resolve_administrative_code_use_case import ResolveAdministrativeCodeUseCase
from infrastructure.adapters.output.providers import weather_provider_factory as factory_module
from infrastructure.adapters.output.providers import (
    AccuWeatherProvider,
    BmkgProvider,
    NominatimGeocodingProvider,
    OpenWeatherProvider,
    TomorrowProvider,
)
from infrastructure.adapters.output.providers.weather_provider_factory import (
    WeatherProviderFactory,
    get_weather_provider_factory,
)
from shared.config.settings import Settings


@pytest.fixture
def settings():
    return Settings(
        openweather_api_key="ow",
        tomorrow_api_key="tm",
        accuweather_api_key="aw",
        geocoder_user_agent="factory-test/1.0",
        reference_data_url="https://mirror.example.test/base.csv"
    )


def test_direct_providers_are_configured_from_settings(settings):
    factory = WeatherProviderFactory(settings)

    openweather, tomorrow, accuweather = factory.get_direct_providers()

    assert isinstance(openweather, OpenWeatherProvider)
    assert isinstance(tomorrow, TomorrowProvider)
    assert isinstance(accuweather, AccuWeatherProvider)
    assert openweather.api_key == "ow"
    assert tomorrow.api_key == "tm"
    assert accuweather.api_key == "aw"


def test_providers_are_lazy_singletons(settings):
    factory = WeatherProviderFactory(settings)

    assert factory.get_direct_providers() is factory.get_direct_providers()
    assert factory.get_administrative_code_provider() is factory.get_administrative_code_provider()
    assert factory.get_code_resolver() is factory.get_code_resolver()


def test_code_resolver_wires_geocoder_and_dataset(settings):
    resolver = WeatherProviderFactory(settings).get_code_resolver()

    assert isinstance(resolver, ResolveAdministrativeCodeUseCase)
    assert isinstance(resolver.geocoding_provider, NominatimGeocodingProvider)
    assert resolver.geocoding_provider.user_agent == "factory-test/1.0"
    assert resolver.reference_loader.source_url == "https://mirror.example.test/base.csv"


def test_administrative_code_provider_is_bmkg(settings):
    assert isinstance(WeatherProviderFactory(settings).get_administrative_code_provider(), BmkgProvider)


def test_missing_keys_do_not_prevent_construction():
    factory = WeatherProviderFactory(Settings())

    assert len(factory.get_direct_providers()) == 3


def test_get_weather_provider_factory_is_singleton(settings, monkeypatch):
    monkeypatch.setattr(factory_module, "_factory_instance", None)

    first = get_weather_provider_factory(settings)
    second = get_weather_provider_factory(Settings())

    assert first is second
    assert first.settings is settings
