"""BMKG Provider - previsão do tempo pública indexada por código ADM4"""
from typing import Any, Dict, Optional

from ddtrace import tracer

from application.ports.output.weather_provider_port import IAdministrativeCodeWeatherProvider
from domain.constants import API, ResponseKeys
from domain.value_objects.administrative_code import AdministrativeCode
from infrastructure.adapters.output.http.json_http_client import JsonHttpClient


class BmkgProvider(IAdministrativeCodeWeatherProvider):
    """
    Provider para a API pública de prakiraan cuaca do BMKG

    A API espera o código ADM4 pontuado (31.71.06.1001); o código de
    largura fixa resolvido é convertido antes da chamada.
    """

    def __init__(self, http_client: Optional[JsonHttpClient] = None):
        self.base_url = API.BMKG_FORECAST_URL
        self.http = http_client or JsonHttpClient(upstream=self.provider_name)

    @property
    def provider_name(self) -> str:
        return "BMKG"

    @property
    def response_key(self) -> str:
        return ResponseKeys.BMKG

    @tracer.wrap(resource="bmkg.get_forecast")
    async def get_forecast(self, adm4_code: str) -> Dict[str, Any]:
        return await self.http.get_json(
            self.base_url,
            params={"adm4": AdministrativeCode.to_dotted(adm4_code)}
        )
