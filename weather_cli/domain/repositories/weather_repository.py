"""
Interface do Repositório de Dados Meteorológicos
Define o contrato que deve ser implementado pela camada de infraestrutura
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from weather_cli.domain.entities.weather_query_result import WeatherQueryResult
from weather_cli.domain.value_objects.coordinates import Coordinates
from weather_cli.domain.value_objects.temperature import TemperatureUnit


class IWeatherRepository(ABC):
    """Interface para repositório de dados meteorológicos"""

    @abstractmethod
    async def get_by_city(
        self,
        city_name: str,
        country_code: Optional[str] = None,
        units: TemperatureUnit = TemperatureUnit.CELSIUS
    ) -> WeatherQueryResult:
        """
        Busca clima atual pelo nome da cidade (com cache)

        Raises:
            NotFoundError: cidade inexistente no provedor
            ConfigurationError: credenciais inválidas
            ApiError: falha transitória ou genérica do provedor
        """
        pass

    @abstractmethod
    async def get_by_coordinates(
        self,
        coordinates: Coordinates,
        units: TemperatureUnit = TemperatureUnit.CELSIUS
    ) -> WeatherQueryResult:
        """Busca clima atual por coordenadas (sem cache)"""
        pass

    @abstractmethod
    async def get_by_country(self, country_code: str, limit: int = 5) -> List[WeatherQueryResult]:
        """
        Busca clima das principais cidades de um país

        Returns:
            Lista possivelmente vazia; falhas individuais não abortam o lote
        """
        pass
