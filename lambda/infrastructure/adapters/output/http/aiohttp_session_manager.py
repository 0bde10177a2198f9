"""
Aiohttp Session Manager - Singleton para gerenciar sessão HTTP global
Reutiliza sessão entre invocações Lambda (warm starts)
"""
import asyncio
from typing import Optional

import aiohttp

from domain.constants import API
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador singleton de sessão aiohttp

    - Uma sessão por event loop (asyncio.run cria novos loops)
    - Recria a sessão automaticamente quando o loop muda ou ela foi fechada
    - Timeout de sessão limita cada requisição HTTP individualmente

    Uso:
        manager = get_aiohttp_session_manager()
        session = await manager.get_session()
        async with session.get(url) as response:
            data = await response.json()
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(
        self,
        total_timeout: float = API.HTTP_TIMEOUT_TOTAL,
        connect_timeout: float = API.HTTP_TIMEOUT_CONNECT,
        sock_read_timeout: float = API.HTTP_TIMEOUT_READ,
        limit: int = API.HTTP_CONNECTION_LIMIT,
        limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST,
        ttl_dns_cache: int = API.DNS_CACHE_TTL
    ):
        self.total_timeout = total_timeout
        self.connect_timeout = connect_timeout
        self.sock_read_timeout = sock_read_timeout
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache

        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    @classmethod
    def get_instance(cls) -> 'AiohttpSessionManager':
        """Retorna instância singleton do gerenciador"""
        if cls._instance is None:
            cls._instance = cls()
            logger.info(
                "AiohttpSessionManager singleton created",
                total_timeout=cls._instance.total_timeout,
                limit=cls._instance.limit
            )
        return cls._instance

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp (cria ou reutiliza)

        Returns:
            Sessão aiohttp vinculada ao event loop atual
        """
        current_loop_id = id(asyncio.get_running_loop())

        if (self._session is not None and
                not self._session.closed and
                self._session_loop_id == current_loop_id):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.info(
                "Event loop changed - recreating session",
                old_loop_id=self._session_loop_id,
                new_loop_id=current_loop_id
            )
            await self._close_session()

        timeout = aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout,
            sock_read=self.sock_read_timeout
        )
        connector = aiohttp.TCPConnector(
            limit=self.limit,
            limit_per_host=self.limit_per_host,
            ttl_dns_cache=self.ttl_dns_cache
        )
        self._session = aiohttp.ClientSession(timeout=timeout, connector=connector)
        self._session_loop_id = current_loop_id

        logger.info("Aiohttp session created", loop_id=current_loop_id)
        return self._session

    async def _close_session(self) -> None:
        """Fecha sessão aiohttp existente"""
        if self._session is not None and not self._session.closed:
            try:
                await self._session.close()
            except Exception as e:
                logger.warning("Error closing aiohttp session", error=str(e))
            finally:
                self._session = None
                self._session_loop_id = None

    async def cleanup(self) -> None:
        """Fecha a sessão e libera o pool de conexões"""
        await self._close_session()

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton instance (útil para testes)"""
        cls._instance = None


def get_aiohttp_session_manager() -> AiohttpSessionManager:
    """Factory function para obter instância singleton do gerenciador"""
    return AiohttpSessionManager.get_instance()
