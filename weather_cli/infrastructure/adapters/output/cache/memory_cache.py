"""
Memory Cache - cache em processo com TTL e despejo LRU

Estrutura de cada entrada: (valor, expira_em, último_acesso). Entradas
expiradas são removidas na leitura; não há timer de limpeza.
"""
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from weather_cli.shared.config.logger_config import get_logger

DEFAULT_TTL_SECONDS = 600
DEFAULT_MAX_ENTRIES = 100


@dataclass
class CacheEntry:
    value: Any
    expires_at: float
    last_accessed: float


class MemoryCache:
    """
    Cache chave/valor limitado

    Ao atingir a capacidade, `set` despeja primeiro uma entrada já expirada;
    se não houver, a menos recentemente acessada.
    """

    def __init__(
        self,
        default_ttl_seconds: int = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
        logger=None
    ):
        if max_entries <= 0:
            raise ValueError("max_entries must be greater than 0")
        self.default_ttl_seconds = default_ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self.logger = logger or get_logger(child=True)

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        now = self._clock()
        if now >= entry.expires_at:
            del self._entries[key]
            self.logger.debug("Cache entry expired", key=key)
            return None

        entry.last_accessed = now
        return entry.value

    async def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> None:
        ttl = self.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        now = self._clock()

        if key not in self._entries and len(self._entries) >= self.max_entries:
            self._evict(now)

        self._entries[key] = CacheEntry(value=value, expires_at=now + ttl, last_accessed=now)

    async def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    async def clear(self) -> None:
        self._entries.clear()

    def _evict(self, now: float) -> None:
        victim = next(
            (key for key, entry in self._entries.items() if now >= entry.expires_at),
            None
        )
        reason = 'expired'
        if victim is None:
            victim = min(self._entries, key=lambda k: self._entries[k].last_accessed)
            reason = 'lru'

        del self._entries[victim]
        self.logger.debug("Cache entry evicted", key=victim, reason=reason)
