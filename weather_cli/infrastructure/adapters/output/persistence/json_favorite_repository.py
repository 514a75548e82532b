"""Favoritos persistidos em arquivo JSON"""
from typing import List, Optional

from weather_cli.application.ports.output.favorite_repository_port import IFavoriteRepository
from weather_cli.domain.entities.favorite import Favorite
from weather_cli.infrastructure.adapters.output.persistence.json_file_store import JsonFileStore


class JsonFavoriteRepository(IFavoriteRepository):

    def __init__(self, path: str):
        self.store = JsonFileStore(path, default=[])

    def _load(self) -> List[Favorite]:
        return [Favorite.from_dict(item) for item in self.store.read()]

    def _save(self, favorites: List[Favorite]) -> None:
        self.store.write([favorite.to_dict() for favorite in favorites])

    async def add(self, favorite: Favorite) -> None:
        favorites = self._load()
        favorites.append(favorite)
        self._save(favorites)

    async def list_all(self) -> List[Favorite]:
        return sorted(self._load(), key=lambda f: f.created_at)

    async def find(self, city: str, country: str) -> Optional[Favorite]:
        return next((f for f in self._load() if f.matches(city, country)), None)

    async def remove(self, city: str, country: str) -> bool:
        favorites = self._load()
        remaining = [f for f in favorites if not f.matches(city, country)]
        if len(remaining) == len(favorites):
            return False
        self._save(remaining)
        return True
