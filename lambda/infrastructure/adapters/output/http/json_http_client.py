"""
JSON HTTP Client - GET com retry e tradução de erros para exceções de domínio
Compartilhado por todos os adapters de saída (provedores, geocoding, dataset)
"""
import asyncio
import logging
from typing import Any, Dict, Optional, Type

import aiohttp
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log
)

from domain.constants import API
from domain.exceptions import DomainException, ProviderUnavailableException
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class JsonHttpClient:
    """
    Cliente HTTP fino sobre a sessão aiohttp compartilhada

    Qualquer falha upstream (rede, timeout, status não-2xx, body malformado)
    vira `exception_class` com details {upstream, url, status?}.
    """

    def __init__(
        self,
        upstream: str,
        exception_class: Type[DomainException] = ProviderUnavailableException,
        session_manager: Optional[AiohttpSessionManager] = None,
        retry_attempts: int = API.RETRY_ATTEMPTS,
        backoff_multiplier: float = API.RETRY_BACKOFF_MULTIPLIER
    ):
        self.upstream = upstream
        self.exception_class = exception_class
        self.session_manager = session_manager or get_aiohttp_session_manager()
        self.retry_attempts = retry_attempts
        self.backoff_multiplier = backoff_multiplier

    async def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """GET e decodifica o body como JSON"""
        return await self._get(url, params=params, headers=headers, as_text=False)

    async def get_text(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> str:
        """GET e retorna o body como texto"""
        return await self._get(url, params=params, headers=headers, as_text=True)

    async def _get(
        self,
        url: str,
        params: Optional[Dict[str, Any]],
        headers: Optional[Dict[str, str]],
        as_text: bool
    ) -> Any:
        details = {"upstream": self.upstream, "url": url}
        session = await self.session_manager.get_session()

        # Retry com exponential backoff para rate limiting
        @retry(
            retry=retry_if_exception_type((aiohttp.ClientResponseError, asyncio.TimeoutError)),
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(
                multiplier=self.backoff_multiplier,
                min=self.backoff_multiplier,
                max=API.RETRY_BACKOFF_MAX
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True
        )
        async def fetch_with_retry():
            async with session.get(url, params=params, headers=headers) as response:
                # Apenas retry em rate limit (429) e service unavailable (503)
                if response.status in API.RETRY_STATUSES:
                    raise aiohttp.ClientResponseError(
                        request_info=response.request_info,
                        history=response.history,
                        status=response.status
                    )
                if response.status >= 400:
                    raise self.exception_class(
                        f"{self.upstream} responded with HTTP {response.status}",
                        details={**details, "status": response.status}
                    )
                if as_text:
                    return await response.text()
                return await response.json(content_type=None)

        try:
            return await fetch_with_retry()
        except aiohttp.ClientResponseError as ex:
            raise self.exception_class(
                f"{self.upstream} responded with HTTP {ex.status}",
                details={**details, "status": ex.status}
            ) from ex
        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            raise self.exception_class(
                f"{self.upstream} request failed: {str(ex) or type(ex).__name__}",
                details=details
            ) from ex
        except ValueError as ex:
            raise self.exception_class(
                f"{self.upstream} returned a malformed body",
                details=details
            ) from ex
