"""Async Use Case: Get Aggregated Weather de todos os provedores"""
import asyncio
from typing import Any, Awaitable, List

from ddtrace import tracer

from application.ports.input.get_aggregated_weather_port import IGetAggregatedWeatherUseCase
from application.ports.input.resolve_administrative_code_port import IResolveAdministrativeCodeUseCase
from application.ports.output.weather_provider_port import (
    IAdministrativeCodeWeatherProvider,
    IWeatherProvider
)
from domain.entities.aggregated_weather import AggregatedWeather, ProviderResult
from domain.exceptions import DomainException, ProviderUnavailableException
from domain.value_objects.coordinates import Coordinates
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetAggregatedWeatherUseCase(IGetAggregatedWeatherUseCase):
    """
    Async use case: consulta todos os provedores em paralelo

    Estratégia "join all, collect individually":
    - Provedores diretos (OpenWeather, Tomorrow.io, AccuWeather) por coordenadas
    - BMKG condicionado à resolução do código ADM4
    - Cada chamada limitada por timeout próprio
    - Falha de um provedor vira marcador de erro apenas na sua chave
    """

    def __init__(
        self,
        weather_providers: List[IWeatherProvider],
        administrative_code_provider: IAdministrativeCodeWeatherProvider,
        code_resolver: IResolveAdministrativeCodeUseCase,
        timeout_seconds: float
    ):
        self.weather_providers = weather_providers
        self.administrative_code_provider = administrative_code_provider
        self.code_resolver = code_resolver
        self.timeout_seconds = timeout_seconds

    @tracer.wrap(resource="use_case.get_aggregated_weather")
    async def execute(self, coordinates: Coordinates) -> AggregatedWeather:
        """
        Execute use case asynchronously com chamadas em paralelo

        Args:
            coordinates: Coordenadas validadas

        Returns:
            AggregatedWeather com um ProviderResult por chave de resposta

        Raises:
            ProviderUnavailableException: Se todos os provedores falharem
        """
        calls = [
            (provider.response_key, provider.provider_name, provider.get_weather(coordinates))
            for provider in self.weather_providers
        ]
        calls.append((
            self.administrative_code_provider.response_key,
            self.administrative_code_provider.provider_name,
            self._fetch_by_administrative_code(coordinates)
        ))

        results = await asyncio.gather(
            *(self._bounded(name, call) for _, name, call in calls),
            return_exceptions=True  # Continue even if one fails
        )

        aggregated = AggregatedWeather()
        for (key, name, _), result in zip(calls, results):
            if isinstance(result, Exception):
                self._log_failure(name, result)
                aggregated.results[key] = ProviderResult(provider_name=name, error=result)
            elif isinstance(result, BaseException):
                raise result
            else:
                aggregated.results[key] = ProviderResult(provider_name=name, data=result)

        if aggregated.all_failed:
            raise ProviderUnavailableException(
                "All weather providers failed",
                details={"providers": aggregated.to_api_response()}
            )

        logger.info(
            "Aggregated weather completed",
            coordinates=str(coordinates),
            failed=aggregated.failed_keys()
        )
        return aggregated

    async def _fetch_by_administrative_code(self, coordinates: Coordinates) -> Any:
        """Resolve ADM4 e só então chama o provedor dependente"""
        adm4_code = await self.code_resolver.execute(coordinates)
        return await self.administrative_code_provider.get_forecast(adm4_code)

    async def _bounded(self, provider_name: str, call: Awaitable[Any]) -> Any:
        try:
            return await asyncio.wait_for(call, timeout=self.timeout_seconds)
        except asyncio.TimeoutError as ex:
            raise ProviderUnavailableException(
                f"{provider_name} timed out after {self.timeout_seconds}s",
                details={"provider": provider_name, "timeout_seconds": self.timeout_seconds}
            ) from ex

    @staticmethod
    def _log_failure(provider_name: str, error: Exception) -> None:
        if isinstance(error, DomainException):
            logger.warning(
                "Weather provider failed",
                provider=provider_name,
                error_type=type(error).__name__,
                error=str(error),
                details=error.details
            )
        else:
            logger.error(
                "Unexpected weather provider error",
                provider=provider_name,
                error=str(error),
                exc_info=error
            )
