"""
Configurações centralizadas da aplicação
Lidas uma única vez do ambiente e imutáveis após a inicialização
"""
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from domain.constants import API, Geocoding
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

DEFAULT_PROVIDER_TIMEOUT_SECONDS = 20.0


def _parse_timeout(raw: Optional[str]) -> float:
    """Timeout positivo em segundos; valor inválido cai no default com warning"""
    if raw is None:
        return DEFAULT_PROVIDER_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except (TypeError, ValueError):
        value = None

    if value is None or not math.isfinite(value) or value <= 0:
        logger.warning(
            "Invalid PROVIDER_TIMEOUT_SECONDS, using default",
            value=raw,
            default=DEFAULT_PROVIDER_TIMEOUT_SECONDS
        )
        return DEFAULT_PROVIDER_TIMEOUT_SECONDS
    return value


@dataclass(frozen=True)
class Settings:
    """Configuração imutável injetada nos adapters"""
    openweather_api_key: str = ""
    tomorrow_api_key: str = ""
    accuweather_api_key: str = ""
    geocoder_user_agent: str = Geocoding.DEFAULT_USER_AGENT
    reference_data_url: str = API.KODEWILAYAH_CSV_URL
    provider_timeout_seconds: float = DEFAULT_PROVIDER_TIMEOUT_SECONDS
    cors_origin: str = "*"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """
        Constrói Settings a partir das variáveis de ambiente

        Args:
            environ: Mapeamento alternativo (default: os.environ)
        """
        env = os.environ if environ is None else environ
        return cls(
            openweather_api_key=env.get('OPENWEATHER_API_KEY', ''),
            tomorrow_api_key=env.get('TOMORROW_API_KEY', ''),
            accuweather_api_key=env.get('ACCUWEATHER_API_KEY', ''),
            geocoder_user_agent=env.get('GEOCODER_USER_AGENT', Geocoding.DEFAULT_USER_AGENT),
            reference_data_url=env.get('REFERENCE_DATA_URL', API.KODEWILAYAH_CSV_URL),
            provider_timeout_seconds=_parse_timeout(env.get('PROVIDER_TIMEOUT_SECONDS')),
            cors_origin=env.get('CORS_ORIGIN', '*'),
        )

    def missing_api_keys(self) -> list:
        """Nomes das chaves de API não configuradas"""
        keys = {
            'OPENWEATHER_API_KEY': self.openweather_api_key,
            'TOMORROW_API_KEY': self.tomorrow_api_key,
            'ACCUWEATHER_API_KEY': self.accuweather_api_key,
        }
        return [name for name, value in keys.items() if not value]


# Singleton - carregado uma vez por container Lambda
_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """Retorna Settings construído do ambiente na primeira chamada"""
    global _settings_instance

    if _settings_instance is None:
        _settings_instance = Settings.from_env()

    return _settings_instance
