"""Output Port: persistência de favoritos"""
from abc import ABC, abstractmethod
from typing import List, Optional

from weather_cli.domain.entities.favorite import Favorite


class IFavoriteRepository(ABC):

    @abstractmethod
    async def add(self, favorite: Favorite) -> None:
        pass

    @abstractmethod
    async def list_all(self) -> List[Favorite]:
        pass

    @abstractmethod
    async def find(self, city: str, country: str) -> Optional[Favorite]:
        """Busca case-insensitive pela cidade"""
        pass

    @abstractmethod
    async def remove(self, city: str, country: str) -> bool:
        """Retorna False se o favorito não existia"""
        pass
