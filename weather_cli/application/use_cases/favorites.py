"""
Use Cases: Favoritos
Adicionar, listar, remover e consultar o clima de todos em paralelo
"""
import asyncio
from typing import List

from weather_cli.application.dtos.requests import FavoriteRequest, GetWeatherByCityRequest
from weather_cli.application.dtos.responses import FavoriteResponseDTO, FavoriteWeatherDTO
from weather_cli.application.ports.output.favorite_repository_port import IFavoriteRepository
from weather_cli.application.use_cases.get_weather_by_city import GetWeatherByCityUseCase
from weather_cli.domain.entities.favorite import Favorite
from weather_cli.domain.exceptions import ApplicationError, NotFoundError
from weather_cli.shared.utils.validators import CityValidator, CountryValidator


class AddFavoriteUseCase:

    def __init__(self, favorite_repository: IFavoriteRepository):
        self.favorite_repository = favorite_repository

    async def execute(self, request: FavoriteRequest) -> FavoriteResponseDTO:
        """
        Raises:
            ApplicationError: favorito duplicado (DUPLICATE_FAVORITE)
        """
        city = CityValidator.validate(request.city)
        country = CountryValidator.normalize(request.country)

        if await self.favorite_repository.find(city, country) is not None:
            raise ApplicationError(
                f"{city}, {country} ya está en favoritos",
                code='DUPLICATE_FAVORITE',
                details={'city': city, 'country': country}
            )

        favorite = Favorite(city=city, country=country)
        await self.favorite_repository.add(favorite)
        return FavoriteResponseDTO.from_entity(favorite)


class ListFavoritesUseCase:

    def __init__(self, favorite_repository: IFavoriteRepository):
        self.favorite_repository = favorite_repository

    async def execute(self) -> List[FavoriteResponseDTO]:
        favorites = await self.favorite_repository.list_all()
        return [FavoriteResponseDTO.from_entity(f) for f in favorites]


class RemoveFavoriteUseCase:

    def __init__(self, favorite_repository: IFavoriteRepository):
        self.favorite_repository = favorite_repository

    async def execute(self, request: FavoriteRequest) -> None:
        """
        Raises:
            NotFoundError: favorito inexistente
        """
        city = CityValidator.validate(request.city)
        country = CountryValidator.normalize(request.country)

        removed = await self.favorite_repository.remove(city, country)
        if not removed:
            raise NotFoundError('Favorito', f"{city}, {country}")


class GetWeatherForFavoritesUseCase:
    """Consulta todos os favoritos em paralelo; erros ficam por favorito"""

    def __init__(
        self,
        favorite_repository: IFavoriteRepository,
        get_weather_by_city: GetWeatherByCityUseCase
    ):
        self.favorite_repository = favorite_repository
        self.get_weather_by_city = get_weather_by_city

    async def execute(self, units: str = 'celsius') -> List[FavoriteWeatherDTO]:
        favorites = await self.favorite_repository.list_all()
        outcomes = await asyncio.gather(
            *(self._fetch(favorite, units) for favorite in favorites)
        )
        return list(outcomes)

    async def _fetch(self, favorite: Favorite, units: str) -> FavoriteWeatherDTO:
        request = GetWeatherByCityRequest(
            city=favorite.city,
            country=favorite.country,
            units=units,
            save_history=False
        )
        try:
            weather = await self.get_weather_by_city.execute(request)
            return FavoriteWeatherDTO(favorite=FavoriteResponseDTO.from_entity(favorite), weather=weather)
        except Exception as e:
            return FavoriteWeatherDTO(favorite=FavoriteResponseDTO.from_entity(favorite), error=str(e))
