"""
Fixtures compartilhadas para testes de integração
"""
import pytest
import json
from typing import Dict, Any, Optional
from unittest.mock import AsyncMock, MagicMock


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'weather-aggregator'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:ap-southeast-3:123456789012:function:weather-aggregator'
        self.memory_limit_in_mb = '512'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/weather-aggregator'
        self.log_stream_name = '2026/10/19/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000  # 30 segundos


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext para todos os testes"""
    return MockContext()


def build_api_gateway_event(
    method: str,
    path: str,
    resource: str,
    query_parameters: Optional[Dict[str, str]] = None,
    body: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Builder genérico para eventos do API Gateway

    Args:
        method: HTTP method (GET, OPTIONS)
        path: Request path (/weather)
        resource: API Gateway resource (/weather)
        query_parameters: Query string params dict
        body: Request body dict (will be JSON encoded)
    """
    event = {
        'resource': resource,
        'path': path,
        'httpMethod': method,
        'headers': {
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        },
        'pathParameters': None,
        'queryStringParameters': query_parameters,
        'body': json.dumps(body) if body else None,
        'isBase64Encoded': False
    }
    return event


def build_weather_event(lat: Optional[str] = None, lon: Optional[str] = None) -> Dict[str, Any]:
    """
    Builder para evento GET /weather?lat=-6.2297&lon=106.7997

    Parâmetros None são omitidos da query string.
    """
    query_params = {}
    if lat is not None:
        query_params['lat'] = lat
    if lon is not None:
        query_params['lon'] = lon

    return build_api_gateway_event(
        method='GET',
        path='/weather',
        resource='/weather',
        query_parameters=query_params if query_params else None
    )


def make_direct_provider(name: str, key: str, result=None, error: Exception = None):
    provider = MagicMock()
    provider.provider_name = name
    provider.response_key = key
    provider.get_weather = AsyncMock(return_value=result, side_effect=error)
    return provider


@pytest.fixture
def make_factory():
    """
    Factory fixture para uma WeatherProviderFactory com provedores mockados

    Usage:
        factory = make_factory(openweather_error=ProviderUnavailableException("down"))
    """
    def _make(
        openweather_error: Exception = None,
        tomorrow_error: Exception = None,
        accuweather_error: Exception = None,
        bmkg_error: Exception = None,
        resolver_error: Exception = None
    ):
        factory = MagicMock()
        factory.get_direct_providers.return_value = [
            make_direct_provider("OpenWeather", "openWeather", {"main": {"temp": 31.0}}, openweather_error),
            make_direct_provider("Tomorrow.io", "tomorrowWeather", {"data": {"timelines": []}}, tomorrow_error),
            make_direct_provider("AccuWeather", "accuWeather", [{"WeatherText": "Cloudy"}], accuweather_error),
        ]

        bmkg = MagicMock()
        bmkg.provider_name = "BMKG"
        bmkg.response_key = "bmkgWeather"
        bmkg.get_forecast = AsyncMock(
            return_value={"lokasi": {"adm4": "31.71.06.1001"}, "data": []},
            side_effect=bmkg_error
        )
        factory.get_administrative_code_provider.return_value = bmkg

        resolver = MagicMock()
        resolver.execute = AsyncMock(return_value="3171061001", side_effect=resolver_error)
        factory.get_code_resolver.return_value = resolver
        return factory

    return _make


@pytest.fixture
def jakarta_lat():
    return '-6.2297'


@pytest.fixture
def jakarta_lon():
    return '106.7997'
