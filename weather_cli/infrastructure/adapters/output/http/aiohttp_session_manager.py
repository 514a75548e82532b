"""
Aiohttp Session Manager - sessão HTTP compartilhada pelos clientes de provedores
Uma instância é criada no startup e injetada nos clientes
"""
import asyncio
from typing import Optional

import aiohttp

from weather_cli.shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador de sessão aiohttp

    - Reutiliza a sessão dentro do mesmo event loop
    - Recria a sessão quando o loop muda (asyncio.run cria novos loops)
    - Pool de conexões compartilhado entre os clientes

    Uso:
        manager = AiohttpSessionManager(total_timeout=5)
        session = await manager.get_session()
        async with session.get(url) as response:
            data = await response.json()
    """

    def __init__(
        self,
        total_timeout: float = 5,
        connect_timeout: Optional[float] = None,
        limit: int = 20,
        limit_per_host: int = 10,
        ttl_dns_cache: int = 300
    ):
        """
        Args:
            total_timeout: Timeout total em segundos
            connect_timeout: Timeout de conexão em segundos (padrão: total)
            limit: Limite total de conexões no pool
            limit_per_host: Limite de conexões por host
            ttl_dns_cache: TTL do cache DNS em segundos
        """
        self.total_timeout = total_timeout
        self.connect_timeout = connect_timeout or total_timeout
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache

        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp (cria ou reutiliza)

        Returns:
            Sessão aiohttp ligada ao event loop atual
        """
        current_loop_id = id(asyncio.get_running_loop())

        if (self._session is not None and
                not self._session.closed and
                self._session_loop_id == current_loop_id):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.debug(
                "Event loop changed - recreating session",
                old_loop_id=self._session_loop_id,
                new_loop_id=current_loop_id
            )
            await self.close()

        timeout = aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout
        )
        connector = aiohttp.TCPConnector(
            limit=self.limit,
            limit_per_host=self.limit_per_host,
            ttl_dns_cache=self.ttl_dns_cache
        )
        self._session = aiohttp.ClientSession(timeout=timeout, connector=connector)
        self._session_loop_id = current_loop_id

        logger.debug("Aiohttp session created", loop_id=current_loop_id, limit=self.limit)
        return self._session

    async def close(self) -> None:
        """Fecha a sessão existente (chamado ao final do CLI)"""
        if self._session is not None and not self._session.closed:
            try:
                await self._session.close()
                logger.debug("Aiohttp session closed", loop_id=self._session_loop_id)
            except aiohttp.ClientError as e:
                logger.warning("Error closing aiohttp session", error=str(e))
        self._session = None
        self._session_loop_id = None
