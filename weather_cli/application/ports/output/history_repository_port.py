"""Output Port: persistência do histórico de consultas"""
from abc import ABC, abstractmethod
from typing import List, Optional

from weather_cli.domain.entities.search_history import SearchHistoryEntry


class IHistoryRepository(ABC):

    @abstractmethod
    def is_available(self) -> bool:
        pass

    @abstractmethod
    async def save(self, entry: SearchHistoryEntry) -> None:
        pass

    @abstractmethod
    async def get_all(self, limit: Optional[int] = None) -> List[SearchHistoryEntry]:
        """Entradas mais recentes primeiro"""
        pass

    @abstractmethod
    async def find_by_city(self, city_name: str) -> List[SearchHistoryEntry]:
        pass

    @abstractmethod
    async def clear(self) -> int:
        """Remove tudo e retorna a quantidade removida"""
        pass
