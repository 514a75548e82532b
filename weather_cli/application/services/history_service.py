"""
History Service - registro de consultas sem afetar o fluxo principal
Toda falha de persistência é registrada em log e engolida aqui
"""
from collections import Counter
from typing import Any, Dict, List, Optional

from weather_cli.application.ports.output.history_repository_port import IHistoryRepository
from weather_cli.domain.entities.search_history import SearchHistoryEntry, SearchType
from weather_cli.domain.entities.weather_query_result import WeatherQueryResult
from weather_cli.domain.value_objects.temperature import TemperatureUnit
from weather_cli.shared.config.logger_config import get_logger


class HistoryService:

    def __init__(self, repository: Optional[IHistoryRepository], logger=None):
        self.repository = repository
        self.logger = logger or get_logger(child=True)

    def is_available(self) -> bool:
        return self.repository is not None and self.repository.is_available()

    async def save(
        self,
        search_query: str,
        result: WeatherQueryResult,
        search_type: SearchType = SearchType.CITY
    ) -> bool:
        """Salva a consulta; retorna False (nunca levanta) em caso de falha"""
        if not self.is_available():
            return False

        weather = result.weather
        entry = SearchHistoryEntry(
            search_query=search_query,
            city_name=result.city.name,
            country_code=result.city.country,
            temperature=round(weather.get_temperature_in_unit(TemperatureUnit.CELSIUS), 2),
            feels_like=round(weather.get_feels_like_in_unit(TemperatureUnit.CELSIUS), 2),
            humidity=weather.humidity,
            condition=weather.condition.value,
            description=weather.description,
            coordinates=result.city.coordinates,
            search_type=search_type
        )
        try:
            await self.repository.save(entry)
            return True
        except Exception as e:
            self.logger.warning("Failed to save search history", query=search_query, error=str(e))
            return False

    async def get_all(self, limit: Optional[int] = None) -> List[SearchHistoryEntry]:
        if not self.is_available():
            return []
        try:
            return await self.repository.get_all(limit)
        except Exception as e:
            self.logger.warning("Failed to read search history", error=str(e))
            return []

    async def find_by_city(self, city_name: str) -> List[SearchHistoryEntry]:
        if not self.is_available():
            return []
        try:
            return await self.repository.find_by_city(city_name)
        except Exception as e:
            self.logger.warning("Failed to search history", city=city_name, error=str(e))
            return []

    async def clear_all(self) -> int:
        if not self.is_available():
            return 0
        try:
            return await self.repository.clear()
        except Exception as e:
            self.logger.warning("Failed to clear search history", error=str(e))
            return 0

    async def get_stats(self) -> Dict[str, Any]:
        """Totais, cidades mais consultadas e distribuição por tipo"""
        entries = await self.get_all()
        if not entries:
            return {'total': 0, 'topCities': [], 'byType': {}, 'averageTemperature': None}

        cities = Counter(f"{e.city_name}, {e.country_code}" for e in entries)
        by_type = Counter(e.search_type.value for e in entries)
        return {
            'total': len(entries),
            'topCities': cities.most_common(5),
            'byType': dict(by_type),
            'averageTemperature': round(sum(e.temperature for e in entries) / len(entries), 1),
        }
