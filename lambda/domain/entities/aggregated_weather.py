"""
AggregatedWeather Entity - resultado consolidado dos provedores de clima
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from domain.exceptions import DomainException


@dataclass(frozen=True)
class ProviderResult:
    """Resultado de um único provedor: payload bruto ou erro isolado"""
    provider_name: str
    data: Optional[Any] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_api_response(self) -> Any:
        """Payload do provedor ou marcador de erro"""
        if self.succeeded:
            return self.data

        if isinstance(self.error, DomainException):
            return {
                "error": f"Failed to fetch {self.provider_name} data",
                "type": type(self.error).__name__,
                "message": self.error.message,
                "details": self.error.details
            }

        return {
            "error": f"Failed to fetch {self.provider_name} data",
            "type": "UnexpectedError",
            "message": "An unexpected error occurred"
        }


@dataclass
class AggregatedWeather:
    """Resultados por chave de resposta (openWeather, tomorrowWeather, ...)"""
    results: Dict[str, ProviderResult] = field(default_factory=dict)

    @property
    def all_failed(self) -> bool:
        return bool(self.results) and not any(r.succeeded for r in self.results.values())

    def failed_keys(self) -> list:
        return [key for key, result in self.results.items() if not result.succeeded]

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        return {key: result.to_api_response() for key, result in self.results.items()}
