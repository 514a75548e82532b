"""
Output Port: Interface para repositórios de cache
Usado para desacoplar repositório e use cases da implementação do cache
"""
from typing import Any, Optional, Protocol


class ICacheRepository(Protocol):
    """Interface assíncrona para cache chave/valor com TTL"""

    async def get(self, key: str) -> Optional[Any]:
        """Retorna valor ou None (ausente ou expirado)"""
        ...

    async def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        ...

    async def delete(self, key: str) -> bool:
        ...

    async def clear(self) -> None:
        ...
