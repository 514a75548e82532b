"""
Lista persistida de cidades por país: {"ES": ["Madrid", ...], ...}
Primeiro nível do fallback; indisponível quando o arquivo não existe
"""
from typing import List, Optional

from weather_cli.application.ports.output.country_cities_repository_port import ICountryCitiesRepository
from weather_cli.infrastructure.adapters.output.persistence.json_file_store import JsonFileStore


class JsonCountryCitiesRepository(ICountryCitiesRepository):

    def __init__(self, path: Optional[str]):
        self.store = JsonFileStore(path, default={}) if path else None

    def is_available(self) -> bool:
        return self.store is not None and self.store.exists()

    async def get_cities(self, country_code: str) -> List[str]:
        if not self.is_available():
            return []
        data = self.store.read()
        cities = data.get(country_code.upper(), []) if isinstance(data, dict) else []
        return [str(city) for city in cities if str(city).strip()]
