"""Histórico de consultas em arquivo JSON (mantém as últimas N entradas)"""
from typing import List, Optional

from weather_cli.application.ports.output.history_repository_port import IHistoryRepository
from weather_cli.domain.entities.search_history import SearchHistoryEntry
from weather_cli.infrastructure.adapters.output.persistence.json_file_store import JsonFileStore
from weather_cli.shared.config.settings import HISTORY_MAX_ENTRIES


class JsonHistoryRepository(IHistoryRepository):

    def __init__(self, path: str, max_entries: int = HISTORY_MAX_ENTRIES):
        self.store = JsonFileStore(path, default=[])
        self.max_entries = max_entries

    def is_available(self) -> bool:
        return True

    def _load(self) -> List[SearchHistoryEntry]:
        return [SearchHistoryEntry.from_dict(item) for item in self.store.read()]

    async def save(self, entry: SearchHistoryEntry) -> None:
        entries = [entry] + self._load()
        self.store.write([e.to_dict() for e in entries[:self.max_entries]])

    async def get_all(self, limit: Optional[int] = None) -> List[SearchHistoryEntry]:
        entries = sorted(self._load(), key=lambda e: e.searched_at, reverse=True)
        return entries[:limit] if limit else entries

    async def find_by_city(self, city_name: str) -> List[SearchHistoryEntry]:
        needle = city_name.strip().lower()
        return [e for e in await self.get_all() if needle in e.city_name.lower()]

    async def clear(self) -> int:
        total = len(self._load())
        self.store.write([])
        return total
