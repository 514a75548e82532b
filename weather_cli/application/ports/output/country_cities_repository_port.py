"""Output Port: lista persistida de cidades por país"""
from abc import ABC, abstractmethod
from typing import List


class ICountryCitiesRepository(ABC):
    """Fonte persistida (primeiro nível do fallback por país)"""

    @abstractmethod
    def is_available(self) -> bool:
        pass

    @abstractmethod
    async def get_cities(self, country_code: str) -> List[str]:
        """Nomes de cidades do país, na ordem de prioridade"""
        pass
